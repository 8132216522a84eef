# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import pytest

from rationals import (
    EqualityMode, HashMode, set_dflt_equality_mode, set_dflt_hash_mode)


@pytest.fixture(params=[mode.name for mode in EqualityMode],
                ids=[mode.name for mode in EqualityMode])
def eq_mode(request) -> EqualityMode:
    mode = EqualityMode[request.param]
    token = set_dflt_equality_mode(mode)
    yield mode
    token.var.reset(token)


def dflt_equality(mode, name):
    @pytest.fixture(name=name)
    def closure():
        token = set_dflt_equality_mode(mode)
        yield
        token.var.reset(token)
    return closure


def dflt_hashing(mode, name):
    @pytest.fixture(name=name)
    def closure():
        token = set_dflt_hash_mode(mode)
        yield
        token.var.reset(token)
    return closure


with_float_ratio_equality = dflt_equality(EqualityMode.FLOAT_RATIO,
                                          "with_float_ratio_equality")
with_exact_equality = dflt_equality(EqualityMode.EXACT,
                                    "with_exact_equality")
with_raw_hashing = dflt_hashing(HashMode.RAW, "with_raw_hashing")
with_canonical_hashing = dflt_hashing(HashMode.CANONICAL,
                                      "with_canonical_hashing")
