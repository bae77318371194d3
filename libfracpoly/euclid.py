#!/usr/bin/env python3
#
#   Euclidean algorithm for polynomials over a field
#

import logging
import random

from libfracpoly.polynomial import Polynomial

logger = logging.getLogger(__name__)

def as_polynomials(a, b):
    # scalars are promoted to constant polynomials over the other operand's field
    if isinstance(a, Polynomial):
        other = a.cvt_other(b)
        if other is None:
            raise TypeError(f"Cannot take the gcd of a polynomial and {type(b).__name__}")
        return a, other
    if isinstance(b, Polynomial):
        other = b.cvt_other(a)
        if other is None:
            raise TypeError(f"Cannot take the gcd of a polynomial and {type(a).__name__}")
        return other, b
    return Polynomial(a), Polynomial(b)

def poly_gcd(a, b) -> Polynomial:
    """
    Monic greatest common divisor, the gcd of two zero polynomials is zero.

    The larger operand is reduced modulo the smaller and made monic again at
    every step so that coefficients stay small.
    """
    a, b = as_polynomials(a, b)
    if a.is_zero() and b.is_zero():
        return Polynomial.zero(a.field)

    steps = 0
    while True:
        if a.is_zero():
            res = b.monic()
            break
        if b.is_zero():
            res = a.monic()
            break
        if a.degree() >= b.degree():
            a = (a % b).monic()
        else:
            b = (b % a).monic()
        steps += 1

    logger.debug("gcd of degree %d found after %d reductions", res.degree(), steps)
    return res

def poly_xgcd(a, b):
    """
    Extended Euclid, returns (g, s, t) with s * a + t * b == g and g == poly_gcd(a, b).
    """
    a, b = as_polynomials(a, b)
    field = a.field

    old_r, r = a, b
    old_s, s = Polynomial.one(field), Polynomial.zero(field)
    old_t, t = Polynomial.zero(field), Polynomial.one(field)
    while not r.is_zero():
        q, rem = old_r.divmod(r)
        old_r, r = r, rem
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    if old_r.is_zero():
        zero = Polynomial.zero(field)
        return zero, zero, zero

    # normalise so that g is monic
    inv_lc = field.one / old_r.leading_coeff()
    return old_r.scale(inv_lc), old_s.scale(inv_lc), old_t.scale(inv_lc)

def poly_lcm(a, b) -> Polynomial:
    a, b = as_polynomials(a, b)
    if a.is_zero() or b.is_zero():
        return Polynomial.zero(a.field)
    return ((a * b) // poly_gcd(a, b)).monic()

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

from libfracpoly.fields import GF, QQ
from libfracpoly.fraction import Fraction
from libfracpoly.modular import LARGEST_u16_PRIME

class TestGCD(unittest.TestCase):

    def setUp(self):
        self.x = Polynomial.variable()

    def test_example(self):
        x = self.x
        g = poly_gcd(x**2 - 1, x - 1)
        self.assertEqual(g, x - 1)
        self.assertEqual(g.leading_coeff(), 1)
        self.assertEqual((x**2 - 1).gcd(x - 1), x - 1)

    def test_monic_result(self):
        x = self.x
        self.assertEqual(poly_gcd(3 * (x - 2) * (x + 5), 6 * (x - 2)), x - 2)
        self.assertEqual(poly_gcd(2 * x + 1, 4 * x**2 - 1), x + Fraction(1, 2))

    def test_coprime(self):
        x = self.x
        self.assertEqual(poly_gcd(x**2 + 1, x - 1), 1)
        self.assertEqual(poly_gcd(Polynomial(5), x + 3), 1)

    def test_zero(self):
        x = self.x
        zero = Polynomial()
        self.assertEqual(poly_gcd(zero, zero), zero)
        self.assertEqual(poly_gcd(zero, zero).degree(), -1)
        self.assertEqual(poly_gcd(2 * x + 4, zero), x + 2)
        self.assertEqual(poly_gcd(zero, 2 * x + 4), x + 2)
        self.assertEqual(poly_gcd(2 * x + 4, 0), x + 2)

    def test_self(self):
        for _ in range(20):
            a = Polynomial.random(random.randint(0, 6))
            self.assertEqual(poly_gcd(a, a), a.monic())
            self.assertEqual(poly_gcd(a, Polynomial()), a.monic())

    def check_common_factor(self, field):
        for _ in range(20):
            g = Polynomial.random(random.randint(0, 3), field).monic()
            u = Polynomial.random(random.randint(0, 4), field)
            v = Polynomial.random(random.randint(0, 4), field)
            a, b = g * u, g * v
            d = poly_gcd(a, b)
            self.assertEqual(d.leading_coeff(), field.one)
            self.assertTrue((a % d).is_zero())
            self.assertTrue((b % d).is_zero())
            self.assertTrue((d % g).is_zero())

    def test_common_factor(self):
        self.check_common_factor(QQ)

    def test_common_factor_gf(self):
        self.check_common_factor(GF(LARGEST_u16_PRIME))

    def test_square_free_part(self):
        x = self.x
        p = (x - 1)**3 * (x + 2)
        self.assertEqual(poly_gcd(p, p.derivative()), (x - 1)**2)

    def test_mixed_fields(self):
        with self.assertRaises(TypeError):
            poly_gcd(self.x, Polynomial([0, 1], GF(7)))

class TestXGCD(unittest.TestCase):

    def test_bezout(self):
        for field in (QQ, GF(509)):
            for _ in range(20):
                a = Polynomial.random(random.randint(0, 6), field)
                b = Polynomial.random(random.randint(0, 6), field)
                g, s, t = poly_xgcd(a, b)
                self.assertEqual(s * a + t * b, g)
                self.assertEqual(g, poly_gcd(a, b))

    def test_zero(self):
        x = Polynomial.variable()
        g, s, t = poly_xgcd(Polynomial(), 2 * x)
        self.assertEqual(g, x)
        self.assertEqual(t * 2 * x, x)
        self.assertEqual(poly_xgcd(Polynomial(), Polynomial())[0], 0)

class TestLCM(unittest.TestCase):

    def test_lcm(self):
        x = Polynomial.variable()
        self.assertEqual(poly_lcm(x**2 - 1, x - 1), x**2 - 1)
        self.assertEqual(poly_lcm(2 * x, 3 * (x + 1)), x**2 + x)
        self.assertEqual(poly_lcm(x, Polynomial()), 0)
