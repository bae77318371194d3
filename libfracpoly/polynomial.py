#!/usr/bin/env python3
#
#   Univariate polynomials over an exact field
#

import logging
import random

from libfracpoly.expr_parser import parse_expr
from libfracpoly.fields import CoefficientField, GF, QQ, field_of
from libfracpoly.formatting import PrintMode, format_polynomial
from libfracpoly.fraction import Fraction
from libfracpoly.modular import Mod

logger = logging.getLogger(__name__)

def isscalar(x):
    return isinstance(x, (Fraction, Mod)) or (isinstance(x, int) and not isinstance(x, bool))

class Polynomial:
    """
    Polynomial in one variable, coeffs[i] is the coefficient of x^i.

    The coefficient tuple is kept canonical: no trailing zeros, and the zero
    polynomial is stored as a single zero coefficient with degree -1.
    Polynomials are immutable, every operation returns a new one.
    """

    def __init__(self, coeffs=0, field : CoefficientField = None):
        if isinstance(coeffs, Polynomial):
            if field is not None and field != coeffs.field:
                raise TypeError(f"Cannot move a polynomial over {coeffs.field!r} to {field!r}")
            self.field = coeffs.field
            self._coeffs = coeffs._coeffs
            return

        if isscalar(coeffs) or (field is not None and field.contains(coeffs)):
            coeffs = [coeffs]
        elif isinstance(coeffs, str) or not hasattr(coeffs, '__iter__'):
            raise TypeError(f"Cannot build a polynomial from {type(coeffs).__name__}, use Polynomial.parse for text")
        else:
            coeffs = list(coeffs)

        if field is None:
            field = QQ
            # ints are taken as rationals unless some coefficient says otherwise
            for c in coeffs:
                if not isinstance(c, int):
                    field = field_of(c)
                    break
        self.field = field
        # Promote to member of coefficient field
        self._coeffs = Polynomial.canonicalise([field(c) for c in coeffs], field)

    @staticmethod
    def canonicalise(coeffs, field : CoefficientField):
        """
        Strips trailing zeros, the empty sequence becomes the zero polynomial.
        """
        n = len(coeffs)
        while n > 0 and field.is_zero(coeffs[n - 1]):
            n -= 1
        if n == 0:
            return (field.zero,)
        return tuple(coeffs[:n])

    @staticmethod
    def from_field(field : CoefficientField, coeffs):
        # coefficients are assumed to already be members of `field`
        p = Polynomial.__new__(Polynomial)
        p.field = field
        p._coeffs = Polynomial.canonicalise(list(coeffs), field)
        return p

    @staticmethod
    def zero(field : CoefficientField = QQ):
        return Polynomial.from_field(field, ())

    @staticmethod
    def one(field : CoefficientField = QQ):
        return Polynomial.from_field(field, (field.one,))

    @staticmethod
    def variable(field : CoefficientField = QQ):
        return Polynomial.from_field(field, (field.zero, field.one))

    @staticmethod
    def parse(text : str, field : CoefficientField = QQ):
        """
        Constant polynomial from an arithmetic expression, e.g. "(1+2)/4".
        """
        return Polynomial.from_field(field, (field(parse_expr(text)),))

    @staticmethod
    def random(degree : int, field : CoefficientField = QQ):
        # Leading coefficient is never zero so the degree is exact
        coeffs = [field.rand_elem() for _ in range(degree)]
        lead = field.rand_elem()
        while field.is_zero(lead):
            lead = field.rand_elem()
        return Polynomial.from_field(field, coeffs + [lead])

    ####################################################################################################################
    #   Queries
    ####################################################################################################################

    @property
    def coeffs(self):
        return self._coeffs

    def __iter__(self):
        return iter(self._coeffs)

    def __getitem__(self, i : int):
        if not isinstance(i, int):
            raise TypeError(f"Polynomial indices must be integers, got {type(i).__name__}")
        # no negative powers, reads outside the stored range are zero
        if i < 0 or i >= len(self._coeffs):
            return self.field.zero
        return self._coeffs[i]

    def is_zero(self):
        return len(self._coeffs) == 1 and self.field.is_zero(self._coeffs[0])

    def __bool__(self):
        return not self.is_zero()

    def degree(self) -> int:
        # Degree == -1 for the zero polynomial
        if self.is_zero():
            return -1
        return len(self._coeffs) - 1

    def leading_coeff(self):
        return self._coeffs[-1]

    def monic(self):
        """
        Divides through by the leading coefficient, the zero polynomial is left alone.
        """
        lc = self.leading_coeff()
        if self.field.is_zero(lc) or lc == self.field.one:
            return self
        return Polynomial.from_field(self.field, (c / lc for c in self._coeffs))

    def is_monic(self):
        return self.leading_coeff() == self.field.one

    def __str__(self):
        return format_polynomial(self, PrintMode.VISUAL)

    def __repr__(self):
        return f"Polynomial({list(self._coeffs)!r}, {self.field!r})"

    def __hash__(self):
        if len(self._coeffs) == 1:
            # agree with the scalar's own hash, Polynomial(3) == 3 and Polynomial([Mod(3, 7)]) == Mod(3, 7).
            # Mod also equals every congruent int, which no hash can follow
            return hash(self._coeffs[0])
        return hash(self._coeffs)

    def cvt_other(self, other):
        if isinstance(other, Polynomial):
            if other.field != self.field:
                raise TypeError(f"Cannot combine polynomials over {self.field!r} and {other.field!r}")
            return other
        if isinstance(other, bool):
            return None
        if isscalar(other) or self.field.contains(other):
            return Polynomial.from_field(self.field, (self.field(other),))
        return None

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.field == other.field and self._coeffs == other._coeffs
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self._coeffs == other._coeffs

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    ####################################################################################################################
    #   Arithmetic
    ####################################################################################################################

    def __pos__(self):
        return self

    def __neg__(self):
        """
        Returns the additive inverse of this polynomial
        """
        return Polynomial.from_field(self.field, (-c for c in self._coeffs))

    def __add__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        n = max(len(self._coeffs), len(other._coeffs))
        return Polynomial.from_field(self.field, (self[i] + other[i] for i in range(n)))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        n = max(len(self._coeffs), len(other._coeffs))
        return Polynomial.from_field(self.field, (self[i] - other[i] for i in range(n)))

    def __rsub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return other - self

    def scale(self, c):
        """
        Multiplies every coefficient by the scalar `c`
        """
        c = self.field(c)
        if self.field.is_zero(c):
            return Polynomial.zero(self.field)
        return Polynomial.from_field(self.field, (a * c for a in self._coeffs))

    def __mul__(self, other):
        if not isinstance(other, Polynomial) and (isscalar(other) or self.field.contains(other)):
            return self.scale(other)
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented

        if self.is_zero() or other.is_zero():
            # Multiplication where one is the 0 polynomial
            return Polynomial.zero(self.field)

        zero = self.field.zero
        res = [zero] * (self.degree() + other.degree() + 1)
        for i,a in enumerate(self._coeffs):
            if self.field.is_zero(a):
                continue
            for j,b in enumerate(other._coeffs):
                res[i + j] += a * b
        return Polynomial.from_field(self.field, res)

    def __rmul__(self, other):
        # Polynomial rings are commutative
        return self.__mul__(other)

    def __pow__(self, power):
        if not isinstance(power, int):
            return NotImplemented
        if power < 0:
            raise ValueError(f"Polynomials can only be raised to non-negative powers, got {power}")
        p = Polynomial.one(self.field)
        for _ in range(power):
            p *= self
        return p

    def evaluate(self, arg):
        """
        Value at `arg`, accumulating c[i] * arg^i in ascending powers of arg.
        """
        if isinstance(arg, int) and not isinstance(arg, bool):
            arg = self.field(arg)
        ans = self._coeffs[0]
        cur = arg
        for c in self._coeffs[1:]:
            ans += cur * c
            cur *= arg
        return ans

    def compose(self, other):
        """
        self(other(x))
        """
        inner = self.cvt_other(other)
        if inner is None:
            raise TypeError(f"Cannot substitute {type(other).__name__} into a polynomial")
        ans = Polynomial.from_field(self.field, self._coeffs[:1])
        cur = inner
        for c in self._coeffs[1:]:
            ans += cur * c
            cur *= inner
        return ans

    def __call__(self, arg):
        if isinstance(arg, Polynomial):
            return self.compose(arg)
        return self.evaluate(arg)

    def derivative(self):
        return Polynomial.from_field(self.field, (c * i for i,c in enumerate(self._coeffs) if i > 0))

    ####################################################################################################################
    #   Division
    ####################################################################################################################

    def divmod(self, other):
        """
        Long division, returns (q, r) with self == q * other + r and deg r < deg other.
        """
        divisor = self.cvt_other(other)
        if divisor is None:
            raise TypeError(f"Cannot divide a polynomial by {type(other).__name__}")
        if divisor.is_zero():
            raise ZeroDivisionError("Polynomial division by the zero polynomial")

        deg_a, deg_b = self.degree(), divisor.degree()
        if deg_a < deg_b:
            return Polynomial.zero(self.field), self

        logger.debug("dividing degree %d by degree %d over %r", deg_a, deg_b, self.field)

        lc = divisor.leading_coeff()
        cur = list(self._coeffs)
        quot = [self.field.zero] * (deg_a - deg_b + 1)
        for power in reversed(range(deg_a - deg_b + 1)):
            coeff = cur[deg_b + power] / lc
            if self.field.is_zero(coeff):
                continue
            quot[power] = coeff
            # subtract coeff * x^power * divisor from the running remainder
            for i,b in enumerate(divisor._coeffs):
                cur[i + power] -= coeff * b

        q = Polynomial.from_field(self.field, quot)
        return q, self - q * divisor

    def __floordiv__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)[0]

    # `/` is polynomial division, dividing by a scalar scales by its inverse
    __truediv__ = __floordiv__

    def __rfloordiv__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)[0]

    __rtruediv__ = __rfloordiv__

    def __mod__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)[1]

    def __rmod__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)[1]

    def __divmod__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)

    def gcd(self, other):
        from libfracpoly.euclid import poly_gcd
        return poly_gcd(self, other)

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

def P(*coeffs, field=QQ):
    return Polynomial(coeffs, field)

class TestContainer(unittest.TestCase):

    def test_canonical_form(self):
        self.assertEqual(P(1, 2, 0, 0).coeffs, (Fraction(1), Fraction(2)))
        self.assertEqual(P(0, 0, 0).coeffs, (Fraction(0),))
        self.assertEqual(Polynomial([]).coeffs, (Fraction(0),))
        self.assertEqual(Polynomial().degree(), -1)
        self.assertEqual(P(0, 0, 0).degree(), -1)
        self.assertEqual(P(5).degree(), 0)
        self.assertEqual(P(1, 0, 3).degree(), 2)

    def test_idempotent(self):
        p = P(1, Fraction(1, 2), 0, 3, 0)
        self.assertEqual(Polynomial.canonicalise(list(p.coeffs), QQ), p.coeffs)
        self.assertEqual(Polynomial(p), p)
        self.assertEqual(Polynomial(p.coeffs), p)

    def test_constructors(self):
        self.assertEqual(Polynomial(Fraction(3, 4)).coeffs, (Fraction(3, 4),))
        self.assertEqual(Polynomial(7), P(7))
        self.assertEqual(Polynomial(c for c in range(4)), P(0, 1, 2, 3))
        self.assertEqual(Polynomial(range(1, 10)[2:5]), P(3, 4, 5))
        self.assertEqual(Polynomial([1, Mod(2, 7)]).field, GF(7))
        self.assertEqual(Polynomial.parse("(1+2)/4"), Fraction(3, 4))

    def test_rejects_inexact(self):
        with self.assertRaises(TypeError):
            Polynomial([1.5, 2])
        with self.assertRaises(TypeError):
            Polynomial("1+x")
        with self.assertRaises(TypeError):
            Polynomial(None)

    def test_indexing(self):
        p = P(1, 2, 3)
        self.assertEqual(p[0], 1)
        self.assertEqual(p[2], 3)
        self.assertEqual(p[3], 0)
        self.assertEqual(p[100], Fraction(0))
        self.assertEqual(len(p.coeffs), 3)
        self.assertEqual(p[-1], 0)
        self.assertEqual(p[-100], Fraction(0))
        self.assertEqual(Polynomial()[-1], 0)
        self.assertEqual(P(1, 2, field=GF(7))[-1], Mod(0, 7))

    def test_equality(self):
        self.assertEqual(P(1, 2), P(Fraction(2, 2), Fraction(4, 2)))
        self.assertNotEqual(P(1, 2), P(1, 2, 3))
        self.assertEqual(P(3), 3)
        self.assertEqual(P(3), Fraction(3))
        self.assertEqual(3, P(3))
        self.assertEqual(Polynomial(), 0)
        self.assertNotEqual(P(0, 1), 0)
        self.assertNotEqual(P(1, 1), P(1, 1, field=GF(7)))
        self.assertEqual(hash(P(3)), hash(3))
        self.assertEqual(hash(P(3)), hash(Fraction(3)))
        self.assertEqual(hash(P(1, 2)), hash(P(Fraction(2, 2), 2)))

    def test_hash_prime_field(self):
        F = GF(7)
        self.assertEqual(P(3, field=F), Mod(3, 7))
        self.assertEqual(hash(P(3, field=F)), hash(Mod(3, 7)))
        self.assertEqual(hash(P(10, field=F)), hash(P(3, field=F)))
        self.assertEqual(hash(P(1, 8, field=F)), hash(P(1, 1, field=F)))
        self.assertEqual(len({P(3, field=F), P(10, field=F), P(-4, field=F)}), 1)

    def test_monic(self):
        self.assertEqual(P(2, 4).monic(), P(Fraction(1, 2), 1))
        self.assertEqual(P(3, 1).monic(), P(3, 1))
        self.assertEqual(Polynomial().monic(), Polynomial())
        self.assertTrue(P(1, 2, -5).monic().is_monic())

    def test_str(self):
        self.assertEqual(str(P(2, -3, 1)), "x^2-3*x+2")
        self.assertEqual(repr(P(1, 2)), "Polynomial([Fraction(1, 1), Fraction(2, 1)], QQ)")

class TestArithmetic(unittest.TestCase):

    def test_add_sub(self):
        self.assertEqual(P(1, 2) + P(3, 4, 5), P(4, 6, 5))
        self.assertEqual(P(1, 2, 3) - P(0, 0, 3), P(1, 2))
        self.assertEqual((P(1, 2, 3) - P(1, 2, 3)).degree(), -1)
        self.assertEqual(P(1, 2) + 3, P(4, 2))
        self.assertEqual(3 - P(1, 2), P(2, -2))
        self.assertEqual(P(1, 2) - Fraction(1, 2), P(Fraction(1, 2), 2))
        p = P(1)
        p += P(0, 1)
        p -= 1
        self.assertEqual(p, Polynomial.variable())

    def test_unary(self):
        self.assertEqual(-P(1, -2), P(-1, 2))
        self.assertEqual(+P(1, -2), P(1, -2))

    def test_scale(self):
        self.assertEqual(P(1, 2).scale(Fraction(1, 2)), P(Fraction(1, 2), 1))
        self.assertEqual(P(1, 2).scale(0), Polynomial())
        self.assertEqual(P(1, 2) * 0, Polynomial())
        self.assertEqual(2 * P(1, 2), P(2, 4))

    def test_mul(self):
        x = Polynomial.variable()
        self.assertEqual((x + 1) * (x - 1), x**2 - 1)
        self.assertEqual(P(1, 1) * P(1, 1), P(1, 2, 1))
        self.assertEqual(P(1, 2, 3) * Polynomial(), Polynomial())
        self.assertEqual((P(1, 2, 3) * P(4, 5)).degree(), 3)
        self.assertEqual(x ** 0, 1)
        p = P(1, 1)
        p *= P(1, 1)
        self.assertEqual(p, P(1, 2, 1))

    def test_mul_gf(self):
        F = GF(5)
        a = P(1, 3, field=F)
        b = P(2, 4, field=F)
        # (1 + 3x)(2 + 4x) = 2 + 10x + 12x^2 = 2 + 0x + 2x^2 mod 5
        self.assertEqual(a * b, P(2, 0, 2, field=F))
        # leading terms cancel mod 5
        self.assertEqual((P(0, 1, field=F) * P(0, 5, field=F)).degree(), -1)

    def test_mixed_fields(self):
        with self.assertRaises(TypeError):
            P(1, 2) + P(1, 2, field=GF(7))
        with self.assertRaises(TypeError):
            P(1, 2) * 1.5

    def test_evaluate(self):
        p = P(2, 3, 1)
        self.assertEqual(p(0), 2)
        self.assertEqual(p(1), 6)
        self.assertEqual(p(Fraction(1, 2)), Fraction(15, 4))
        self.assertEqual(p.evaluate(-1), 0)
        self.assertEqual(Polynomial()(5), 0)
        self.assertEqual(P(1, 1, field=GF(7))(6), 0)

    def test_compose(self):
        x = Polynomial.variable()
        self.assertEqual((x**2).compose(x + 1), P(1, 2, 1))
        self.assertEqual((x**2)(x + 1), x**2 + 2*x + 1)
        self.assertEqual(P(5)(x + 1), 5)
        self.assertEqual((x + 1)(Polynomial()), 1)
        p, q = P(1, -2, 3), P(0, 4, -1)
        for t in range(-3, 4):
            self.assertEqual(p(q)(t), p(q(t)))

    def test_derivative(self):
        self.assertEqual(P(1, 2, 3).derivative(), P(2, 6))
        self.assertEqual(P(7).derivative(), Polynomial())

class TestDivision(unittest.TestCase):

    def check_division(self, a, b):
        q, r = a.divmod(b)
        self.assertEqual(q * b + r, a)
        self.assertLess(r.degree(), b.degree())
        self.assertEqual(a // b, q)
        self.assertEqual(a / b, q)
        self.assertEqual(a % b, r)
        self.assertEqual(divmod(a, b), (q, r))

    def test_example(self):
        x = Polynomial.variable()
        self.assertEqual((x**2 + 3*x + 2) / (x + 1), x + 2)
        self.assertEqual((x**2 + 3*x + 2) % (x + 1), 0)
        self.assertEqual(((x**2 + 3*x + 2) % (x + 1)).degree(), -1)

    def test_small_dividend(self):
        x = Polynomial.variable()
        self.assertEqual((x + 1) // (x**3), 0)
        self.assertEqual((x + 1) % (x**3), x + 1)
        self.assertEqual(Polynomial() // (x + 1), 0)

    def test_fractional(self):
        self.check_division(P(1, 0, 0, 1), P(3, 2))
        self.assertEqual(P(1, 0, 0, 1) % P(3, 2), Fraction(-19, 8))
        self.assertEqual(P(2, 4) / 2, P(1, 2))
        self.assertEqual(P(2, 4) // Fraction(2, 3), P(3, 6))

    def test_random(self):
        for _ in range(50):
            a = Polynomial.random(random.randint(0, 8))
            b = Polynomial.random(random.randint(0, 5))
            self.check_division(a, b)

    def test_random_gf(self):
        F = GF(509)
        for _ in range(50):
            a = Polynomial.random(random.randint(0, 8), F)
            b = Polynomial.random(random.randint(0, 5), F)
            self.check_division(a, b)

    def test_zero_divisor(self):
        with self.assertRaises(ZeroDivisionError):
            P(1, 2) / Polynomial()
        with self.assertRaises(ZeroDivisionError):
            P(1, 2) % 0
        with self.assertRaises(ZeroDivisionError):
            divmod(P(1, 2), P(0, 0))

    def test_scalar_dividend(self):
        self.assertEqual(1 // P(2), Fraction(1, 2))
        self.assertEqual(1 % P(1, 1), 1)
