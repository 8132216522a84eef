# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational number value type with lazy normalization.

A :class:`Rational` keeps numerator and denominator exactly as given. Neither
the constructor nor the arithmetic operators reduce the fraction or move a
negative sign out of the denominator. Reduction is done on demand by
:func:`simplify`, which is applied when a rational number is converted to a
string or compared for equality.

Equality defaults to comparing the reduced fractions as float quotients,
while ordering compares exactly by cross-multiplication. Hashing defaults to
the unreduced fields, so two equal rationals given in different forms may
have different hashes. Both defaults can be changed, see
:mod:`rationals.modes`.
"""

from __future__ import annotations

import math
from numbers import Integral
from operator import index
from typing import Optional, Tuple, Union

from .modes import (
    EqualityMode, HashMode, get_dflt_equality_mode, get_dflt_hash_mode)


__all__ = ['Rational', 'gcd', 'simplify']


IntegralOrRational = Union[int, Integral, 'Rational']


def gcd(x: int, y: int) -> int:
    """Return greatest common divisor of `x` and `y`.

    Euclidean algorithm: gcd(x, 0) == x, gcd(x, y) == gcd(y, x % y).

    The sign of the result depends on the signs of the arguments, callers
    have to take the absolute value.
    """
    while y != 0:
        x, y = y, x % y
    return x


def simplify(q: Rational) -> Rational:
    """Return new rational equal to `q` with numerator and denominator
    divided by their greatest common divisor.

    The sign of the denominator is kept.

    Raises:
        ZeroDivisionError: both numerator and denominator of `q` are 0
    """
    num, den = q.numerator, q.denominator
    divisor = abs(gcd(num, den))
    return Rational(num // divisor, den // divisor)


def _to_float(i: int) -> float:
    try:
        return float(i)
    except OverflowError:
        return math.inf if i > 0 else -math.inf


def _canonical(q: Rational) -> Tuple[int, int]:
    red = simplify(q)
    num, den = red.numerator, red.denominator
    if den < 0:
        return -num, -den
    return num, den


def _as_rational(value: object) -> Optional[Rational]:
    if isinstance(value, Rational):
        return value
    if isinstance(value, Integral):
        return Rational(value)
    return None


class Rational:

    """Rational number with arbitrary-precision numerator and denominator.

    Args:
        numerator (int): numerator, any integral value
        denominator (int): denominator, any integral value (default: 1)

    Returns:
        :class:`Rational` instance holding `numerator` and `denominator`
            unchanged

    Raises:
        TypeError: `numerator` or `denominator` is not integral

    A zero denominator is not rejected, but any operation needing to divide
    by it will raise a :exc:`ZeroDivisionError`.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: Union[int, Integral],
                 denominator: Union[int, Integral] = 1) -> None:
        try:
            num = index(numerator)
            den = index(denominator)
        except TypeError:
            raise TypeError(f"Can't create Rational from "
                            f"{numerator!r}, {denominator!r}.") from None
        self._numerator = num
        self._denominator = den

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Convert `text` of the form '<numerator>[/<denominator>]' to a
        rational number.

        See :func:`rationals.to_rational`.
        """
        # deferred to avoid circular import
        from .constructors import to_rational
        return to_rational(text)

    @property
    def numerator(self) -> int:
        """Numerator of `self` as given at construction."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` as given at construction."""
        return self._denominator

    def simplify(self) -> Rational:
        """Return reduced equivalent of `self`."""
        return simplify(self)

    def compare_to(self, other: IntegralOrRational) -> int:
        """Return -1, 0 or 1, depending on `self` being less than, equal to or
        greater than `other`.

        Compares by cross-multiplication, without reducing either operand.

        Raises:
            TypeError: `other` is neither Rational nor integral
        """
        oth = _as_rational(other)
        if oth is None:
            raise TypeError(f"Can't compare Rational to {other!r}.")
        lhs = self._numerator * oth._denominator
        rhs = oth._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def range_to(self, last: Rational):
        """Return closed range from `self` to `last`."""
        from .ranges import RationalRange
        return RationalRange(self, last)

    def __copy__(self) -> Rational:
        """Return self (Rational instances are immutable)."""
        return self

    def __deepcopy__(self, memo: object) -> Rational:
        return self.__copy__()

    def __reduce__(self):
        return type(self), (self._numerator, self._denominator)

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{type(self).__name__}({self._numerator}, " \
               f"{self._denominator})"

    def __str__(self) -> str:
        """str(self)"""
        num, den = self._numerator, self._denominator
        if den == 1 or num % den == 0:
            return str(num // den)
        red = simplify(self)
        num, den = red.numerator, red.denominator
        if den < 0:
            return f"{-num}/{-den}"
        return f"{num}/{den}"

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __hash__(self) -> int:
        """hash(self)"""
        if get_dflt_hash_mode() is HashMode.CANONICAL:
            return hash(_canonical(self))
        return hash((self._numerator, self._denominator))

    def __eq__(self, other: object) -> bool:
        """self == other"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        if self is oth:
            return True
        if get_dflt_equality_mode() is EqualityMode.EXACT:
            return _canonical(self) == _canonical(oth)
        lhs = simplify(self)
        rhs = simplify(oth)
        return (_to_float(lhs._numerator) / _to_float(lhs._denominator) ==
                _to_float(rhs._numerator) / _to_float(rhs._denominator))

    def __lt__(self, other: IntegralOrRational) -> bool:
        """self < other"""
        if _as_rational(other) is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: IntegralOrRational) -> bool:
        """self <= other"""
        if _as_rational(other) is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: IntegralOrRational) -> bool:
        """self > other"""
        if _as_rational(other) is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: IntegralOrRational) -> bool:
        """self >= other"""
        if _as_rational(other) is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __neg__(self) -> Rational:
        """-self"""
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other: IntegralOrRational) -> Rational:
        """self + other"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _add(self, oth)

    def __radd__(self, other: IntegralOrRational) -> Rational:
        """other + self"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _add(oth, self)

    def __sub__(self, other: IntegralOrRational) -> Rational:
        """self - other"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _sub(self, oth)

    def __rsub__(self, other: IntegralOrRational) -> Rational:
        """other - self"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _sub(oth, self)

    def __mul__(self, other: IntegralOrRational) -> Rational:
        """self * other"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _mul(self, oth)

    def __rmul__(self, other: IntegralOrRational) -> Rational:
        """other * self"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _mul(oth, self)

    def __truediv__(self, other: IntegralOrRational) -> Rational:
        """self / other"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _div(self, oth)

    def __rtruediv__(self, other: IntegralOrRational) -> Rational:
        """other / self"""
        oth = _as_rational(other)
        if oth is None:
            return NotImplemented
        return _div(oth, self)


def _add(x: Rational, y: Rational) -> Rational:
    return Rational(x._numerator * y._denominator +
                    x._denominator * y._numerator,
                    x._denominator * y._denominator)


def _sub(x: Rational, y: Rational) -> Rational:
    return Rational(x._numerator * y._denominator -
                    x._denominator * y._numerator,
                    x._denominator * y._denominator)


def _mul(x: Rational, y: Rational) -> Rational:
    return Rational(x._numerator * y._numerator,
                    x._denominator * y._denominator)


def _div(x: Rational, y: Rational) -> Rational:
    if y._numerator == 0:
        raise ZeroDivisionError(f"Division by zero: {x!r} / {y!r}")
    return Rational(x._numerator * y._denominator,
                    x._denominator * y._numerator)
