# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Convenience functions creating rational numbers."""

from __future__ import annotations

import logging
import re
from numbers import Integral
from typing import Union

from .rational import Rational


__all__ = ['div_by', 'to_rational']

logger = logging.getLogger(__name__)

# optional sign followed by at least one digit, nothing else
_INT_PATTERN = re.compile(r"[+-]?\d+")


def div_by(numerator: Union[int, Integral],
           denominator: Union[int, Integral]) -> Rational:
    """Return `numerator` divided by `denominator` as unreduced Rational."""
    return Rational(numerator, denominator)


def _parse_int(text: str, orig: str) -> int:
    if _INT_PATTERN.fullmatch(text) is None:
        logger.debug("Rejected %r: %r is not an integer literal.", orig, text)
        raise ValueError(f"Can't convert {orig!r} to Rational.")
    return int(text)


def to_rational(text: str) -> Rational:
    """Convert `text` to a rational number.

    Args:
        text (str): string of the form '<numerator>' or
            '<numerator>/<denominator>'

    Returns:
        :class:`Rational` instance, unreduced

    Raises:
        TypeError: `text` is not a string
        ValueError: numerator or denominator part of `text` is not an integer
            literal

    The text is split at its last '/'. Without a '/' the whole text is taken
    as numerator and the denominator is 1.

    >>> str(to_rational("117/1098"))
    '13/122'
    """
    if not isinstance(text, str):
        raise TypeError(f"Can't convert {text!r} to Rational.")
    head, sep, tail = text.rpartition('/')
    if not sep:
        return Rational(_parse_int(tail, text), 1)
    return Rational(_parse_int(head, text), _parse_int(tail, text))
