#!/usr/bin/env python3
#
#   Exact coefficient fields
#

from typing import Union

from libfracpoly.fraction import Fraction
from libfracpoly.modular import Mod, is_prime

class CoefficientField:
    """
    An exact field the coefficients of a Polynomial live in.

    Elements must support + - * and exact /, subclasses provide conversion
    into the field along with its zero and one.
    """

    def __call__(self, arg):
        raise NotImplementedError()

    @property
    def zero(self):
        return self(0)

    @property
    def one(self):
        return self(1)

    def is_zero(self, x):
        return x == self.zero

    def contains(self, x):
        return False

    def rand_elem(self):
        raise NotImplementedError()

    def is_rational(self):
        return isinstance(self, RationalField)

class RationalField(CoefficientField):
    def __call__(self, arg : Union[Fraction, int]):
        if isinstance(arg, Fraction):
            return arg
        elif isinstance(arg, int) and not isinstance(arg, bool):
            return Fraction(arg, 1)
        else:
            raise TypeError(f"{arg!r} cannot be a member of a rational field")

    def __eq__(self, other):
        return isinstance(other, RationalField)

    def __hash__(self):
        return hash(RationalField)

    def __str__(self):
        return "The Rational Numbers"

    def __repr__(self):
        return "QQ"

    def contains(self, x):
        return isinstance(x, Fraction)

    def rand_elem(self):
        return Fraction.random()

QQ = RationalField()

class GF(CoefficientField):
    def __init__(self, p : int):
        if not isinstance(p, int) or not is_prime(p):
            raise ValueError(f"GF(p) needs a prime p, got {p}")
        self.p = p

    def __repr__(self):
        return f"GF({self.p})"

    def __str__(self):
        return repr(self)

    def __eq__(self, other):
        if isinstance(other, GF):
            return self.p == other.p
        return False

    def __hash__(self):
        return hash((GF, self.p))

    def __call__(self, arg : Union[Mod, Fraction, int]):
        if isinstance(arg, Mod):
            if arg.p != self.p:
                raise TypeError(f"{arg!r} is not a member of {self!r}")
            return arg
        elif isinstance(arg, int) and not isinstance(arg, bool):
            return Mod(arg, self.p)
        elif isinstance(arg, Fraction):
            return arg.to_mod(self.p)
        else:
            raise TypeError(f"{arg!r} cannot be a member of a prime field")

    def contains(self, x):
        return isinstance(x, Mod) and x.p == self.p

    def rand_elem(self):
        return Mod.random(self.p)

def field_of(x) -> CoefficientField:
    """
    The field a coefficient belongs to. Plain ints are taken as rationals.
    """
    if isinstance(x, Fraction):
        return QQ
    if isinstance(x, Mod):
        return GF(x.p)
    if isinstance(x, int) and not isinstance(x, bool):
        return QQ
    raise TypeError(f"{type(x).__name__} is not an exact field type, coefficients must be Fraction, Mod or int")

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestFields(unittest.TestCase):

    def test_rational_field(self):
        self.assertEqual(QQ(3), Fraction(3))
        self.assertEqual(QQ.zero.tup(), (0, 1))
        self.assertEqual(QQ.one.tup(), (1, 1))
        self.assertTrue(QQ.is_zero(Fraction(0, 5)))
        with self.assertRaises(TypeError):
            QQ(0.5)

    def test_prime_field(self):
        F = GF(7)
        self.assertEqual(F(10), Mod(3, 7))
        self.assertEqual(F(Fraction(1, 2)), Mod(4, 7))
        self.assertEqual(F.one, Mod(1, 7))
        self.assertEqual(F, GF(7))
        self.assertNotEqual(F, GF(11))
        with self.assertRaises(TypeError):
            F(Mod(1, 11))

    def test_composite_modulus(self):
        # Z/4 and Z/6 have zero divisors, 2 has no inverse in either
        for n in (0, 1, 4, 6, 9, 65521 * 65519):
            with self.assertRaises(ValueError):
                GF(n)
        with self.assertRaises(ValueError):
            field_of(Mod(2, 4))
        self.assertEqual(GF(2).one, Mod(1, 2))

    def test_field_of(self):
        self.assertEqual(field_of(Fraction(1, 2)), QQ)
        self.assertEqual(field_of(5), QQ)
        self.assertEqual(field_of(Mod(1, 509)), GF(509))
        for bad in (0.5, "1", None, True):
            with self.assertRaises(TypeError):
                field_of(bad)
