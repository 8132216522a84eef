# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Equality and hashing modes for rational numbers."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
import logging


__all__ = [
    'EqualityMode',
    'HashMode',
    'get_dflt_equality_mode',
    'set_dflt_equality_mode',
    'get_dflt_hash_mode',
    'set_dflt_hash_mode',
]

logger = logging.getLogger(__name__)


class _DocEnum(Enum):

    def __new__(cls, value: int, doc: str) -> _DocEnum:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member


@unique
class EqualityMode(_DocEnum):
    """Enumeration of equality modes."""

    FLOAT_RATIO = (1, 'Reduce both operands, then compare the quotients of '
                      'numerator and denominator as floats.')
    EXACT = (2, 'Compare reduced, sign-normalized numerator / denominator '
                'pairs exactly.')


@unique
class HashMode(_DocEnum):
    """Enumeration of hashing modes."""

    RAW = (1, 'Hash numerator and denominator as given at construction.')
    CANONICAL = (2, 'Hash reduced, sign-normalized numerator and '
                    'denominator.')


_dflt_equality: ContextVar[EqualityMode] = \
    ContextVar("dflt_equality", default=EqualityMode.FLOAT_RATIO)
_dflt_hashing: ContextVar[HashMode] = \
    ContextVar("dflt_hashing", default=HashMode.RAW)


def get_dflt_equality_mode() -> EqualityMode:
    """Return default equality mode."""
    return _dflt_equality.get()


def set_dflt_equality_mode(mode: EqualityMode) -> Token:
    """Set default equality mode.

    Args:
        mode (EqualityMode): equality mode to be set as default

    Returns:
        Token: can be used to restore the previous mode

    Raises:
        TypeError: given 'mode' is not a valid equality mode
    """
    if not isinstance(mode, EqualityMode):
        raise TypeError(f"Illegal equality mode: {mode!r}")
    logger.debug("Default equality mode set to %s", mode.name)
    return _dflt_equality.set(mode)


def get_dflt_hash_mode() -> HashMode:
    """Return default hashing mode."""
    return _dflt_hashing.get()


def set_dflt_hash_mode(mode: HashMode) -> Token:
    """Set default hashing mode.

    Args:
        mode (HashMode): hashing mode to be set as default

    Returns:
        Token: can be used to restore the previous mode

    Raises:
        TypeError: given 'mode' is not a valid hashing mode
    """
    if not isinstance(mode, HashMode):
        raise TypeError(f"Illegal hash mode: {mode!r}")
    logger.debug("Default hash mode set to %s", mode.name)
    return _dflt_hashing.set(mode)
