# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Closed ranges of rational numbers."""

from __future__ import annotations

from .rational import Rational


__all__ = ['RationalRange']


class RationalRange:

    """Closed range [`start`, `end_inclusive`] of rational numbers.

    Args:
        start (Rational): lower end of the range
        end_inclusive (Rational): upper end of the range

    Raises:
        TypeError: `start` or `end_inclusive` is not a Rational

    Note:
        The `in` operator does NOT test whether a value lies between
        `start` and `end_inclusive`. It checks numerator and denominator of
        the candidate against those of `end_inclusive`, field by field and
        without reducing. Use :meth:`encloses` for value-based containment.
    """

    __slots__ = ('_start', '_end_inclusive')

    def __init__(self, start: Rational, end_inclusive: Rational) -> None:
        if not (isinstance(start, Rational) and
                isinstance(end_inclusive, Rational)):
            raise TypeError(f"Can't create RationalRange from "
                            f"{start!r}, {end_inclusive!r}.")
        self._start = start
        self._end_inclusive = end_inclusive

    @property
    def start(self) -> Rational:
        """Lower end of `self`."""
        return self._start

    @property
    def end_inclusive(self) -> Rational:
        """Upper end of `self`."""
        return self._end_inclusive

    @property
    def is_empty(self) -> bool:
        """True if `start` is greater than `end_inclusive`."""
        return self._start > self._end_inclusive

    def encloses(self, value: Rational) -> bool:
        """Return True if start <= `value` <= end_inclusive."""
        return (self._start.compare_to(value) <= 0 and
                self._end_inclusive.compare_to(value) >= 0)

    def __contains__(self, candidate: Rational) -> bool:
        """candidate in self"""
        if not isinstance(candidate, Rational):
            return False
        last = self._end_inclusive
        return (candidate.numerator <= last.numerator and
                candidate.denominator <= last.denominator)

    def __eq__(self, other: object) -> bool:
        """self == other"""
        if not isinstance(other, RationalRange):
            return NotImplemented
        return (self._start == other._start and
                self._end_inclusive == other._end_inclusive)

    def __hash__(self) -> int:
        """hash(self)"""
        return hash((self._start, self._end_inclusive))

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{type(self).__name__}({self._start!r}, " \
               f"{self._end_inclusive!r})"

    def __str__(self) -> str:
        """str(self)"""
        return f"{self._start}..{self._end_inclusive}"
