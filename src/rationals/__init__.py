# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic."""

import logging

from .constructors import div_by, to_rational
from .modes import (
    EqualityMode, HashMode, get_dflt_equality_mode, get_dflt_hash_mode,
    set_dflt_equality_mode, set_dflt_hash_mode)
from .ranges import RationalRange
from .rational import Rational, gcd, simplify
from .version import version_tuple as __version__  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define public namespace
__all__ = [
    'EqualityMode',
    'HashMode',
    'Rational',
    'RationalRange',
    'div_by',
    'gcd',
    'get_dflt_equality_mode',
    'get_dflt_hash_mode',
    'set_dflt_equality_mode',
    'set_dflt_hash_mode',
    'simplify',
    'to_rational',
]
