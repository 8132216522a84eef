#!/usr/bin/env python
# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Test driver for package 'rationals' (constructors)."""

import copy
from decimal import Decimal
from fractions import Fraction
from numbers import Integral
import pickle

import pytest

from rationals import Rational, div_by


class IntWrapper:

    def __init__(self, i):
        assert isinstance(i, int)
        self.i = i

    def __int__(self):
        """int(self)"""
        return self.i

    __index__ = __int__

    def __eq__(self, i):
        """self == i"""
        return self.i == i


# noinspection PyUnresolvedReferences
Integral.register(IntWrapper)


compact_num = 174
small_num = 123456789012345678901234567890
large_num = 294898 * 10 ** 2453 + 1498953


@pytest.mark.parametrize(("num", "den"),
                         ((compact_num, 10),
                          (-small_num, 10 ** 20),
                          (large_num, -10 ** 459),
                          (8290, -10000),
                          (-17, -34),
                          (0, 5),
                          (small_num, large_num)),
                         ids=("compact", "small", "large", "neg-den",
                              "neg-both", "zero", "small/large"))
def test_rational_from_ints(num, den):
    rn = Rational(num, den)
    assert isinstance(rn, Rational)
    # fields are kept as given
    assert rn.numerator == num
    assert rn.denominator == den


@pytest.mark.parametrize("num", (compact_num, -small_num, large_num),
                         ids=("compact", "small", "large"))
def test_rational_dflt_denominator(num):
    rn = Rational(num)
    assert rn.numerator == num
    assert rn.denominator == 1


def test_rational_zero_denominator():
    rn = Rational(3, 0)
    assert rn.numerator == 3
    assert rn.denominator == 0


def test_rational_from_integral():
    rn = Rational(IntWrapper(328), IntWrapper(-7))
    assert rn.numerator == 328
    assert rn.denominator == -7
    assert type(rn.numerator) is int
    assert type(rn.denominator) is int


@pytest.mark.parametrize(("num", "den"),
                         ((1.5, 2),
                          (1, 2.0),
                          ("1", 2),
                          (3 + 2j, 1),
                          (Fraction(1, 2), 1),
                          (Decimal(5), 1),
                          (None, 1),
                          (1, Rational(1, 2))),
                         ids=("num=float", "den=float", "num=str",
                              "num=complex", "num=Fraction", "num=Decimal",
                              "num=None", "den=Rational"))
def test_rational_wrong_type(num, den):
    with pytest.raises(TypeError):
        Rational(num, den)


@pytest.mark.parametrize(("num", "den"),
                         ((1, 2),
                          (2000000000, 4000000000),
                          (912016490186296920119201192141970416029,
                           1824032980372593840238402384283940832058),
                          (-2, 4)),
                         ids=("int", "long", "big", "neg"))
def test_div_by(num, den):
    rn = div_by(num, den)
    assert isinstance(rn, Rational)
    assert rn.numerator == num
    assert rn.denominator == den


def test_div_by_wrong_type():
    with pytest.raises(TypeError):
        div_by(0.5, 2)


@pytest.mark.parametrize(("num", "den"),
                         ((17, 8),
                          (large_num, -small_num),
                          (-14, 28)),
                         ids=("compact", "large", "unreduced"))
def test_copy(num, den):
    rn = Rational(num, den)
    assert copy.copy(rn) is rn
    assert copy.deepcopy(rn) is rn


@pytest.mark.parametrize(("num", "den"),
                         ((17, 8),
                          (large_num, -small_num),
                          (-14, 28)),
                         ids=("compact", "large", "unreduced"))
def test_pickle(num, den):
    rn = Rational(num, den)
    restored = pickle.loads(pickle.dumps(rn))
    assert restored.numerator == num
    assert restored.denominator == den


@pytest.mark.parametrize("attr", ("numerator", "denominator"))
def test_immutable(attr):
    rn = Rational(1, 2)
    with pytest.raises(AttributeError):
        setattr(rn, attr, 5)
    with pytest.raises(AttributeError):
        rn.foo = 5
