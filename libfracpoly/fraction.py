#!/usr/bin/env python3
#
#   Exact rational numbers
#

import random

from libfracpoly.modular import Mod, gcd

class Fraction:
    """
    A rational number num / dnm kept in lowest terms with dnm > 0.

    Zero is always stored as 0 / 1. Fractions are immutable, every operation
    returns a new, already reduced Fraction. Numerator and denominator are
    Python ints, so there is no overflow.
    """

    __slots__ = ('_num', '_dnm')

    def __init__(self, num=0, dnm : int = 1):
        if isinstance(num, str):
            if dnm != 1:
                raise TypeError("A denominator cannot be given with an expression")
            # local import, the parser builds Fractions
            from libfracpoly.expr_parser import parse_expr
            num, dnm = parse_expr(num).tup()
        elif isinstance(num, Fraction):
            if dnm != 1:
                raise TypeError("A denominator cannot be given with a Fraction")
            num, dnm = num.tup()

        if isinstance(num, bool) or not isinstance(num, int) or isinstance(dnm, bool) or not isinstance(dnm, int):
            raise TypeError(f"Fraction expects integers, got {type(num).__name__} and {type(dnm).__name__}")

        self._num, self._dnm = Fraction.canonicalise(num, dnm)

    @staticmethod
    def canonicalise(num : int, dnm : int):
        # For consistency, require denominator 1 when numerator is 0
        if num == 0:
            return 0, 1
        if dnm == 0:
            raise ZeroDivisionError(f"Fraction({num}, 0)")
        # Move sign out of the denominator
        if dnm < 0:
            num, dnm = -num, -dnm
        # Remove common factors
        g = gcd(num, dnm)
        return num // g, dnm // g

    @staticmethod
    def from_expr(text : str) -> 'Fraction':
        from libfracpoly.expr_parser import parse_expr
        return parse_expr(text)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._dnm

    def tup(self):
        return self._num, self._dnm

    def __str__(self):
        if self._dnm == 1:
            return f"{self._num}"
        return f"{self._num}/{self._dnm}"

    def __repr__(self):
        return f"Fraction({self._num}, {self._dnm})"

    def __hash__(self):
        if self._dnm == 1:
            # agree with int hashing, Fraction(3) == 3
            return hash(self._num)
        return hash((self._num, self._dnm))

    def __bool__(self):
        return self._num != 0

    def is_integer(self):
        return self._dnm == 1

    def cvt_other(self, other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other, 1)
        return None

    def __add__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._dnm + other._num * self._dnm, self._dnm * other._dnm)

    __radd__ = __add__

    def __sub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._dnm - other._num * self._dnm, self._dnm * other._dnm)

    def __rsub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Fraction(self._num * other._num, self._dnm * other._dnm)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self * ~other

    def __rtruediv__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return other * ~self

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        if other < 0:
            return (~self) ** -other
        return Fraction(self._num ** other, self._dnm ** other)

    def __invert__(self):
        """
        Multiplicative inverse
        """
        if self._num == 0:
            raise ZeroDivisionError("Fraction division by zero")
        return Fraction(self._dnm, self._num)

    def __neg__(self):
        return Fraction(-self._num, self._dnm)

    def __pos__(self):
        return self

    def __abs__(self):
        return Fraction(abs(self._num), self._dnm)

    def increment(self):
        return self + Fraction(1, 1)

    def decrement(self):
        return self - Fraction(1, 1)

    def cmp(self, other, op):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        # sign of the reduced difference decides the order
        return op((self - other)._num, 0)

    def __eq__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._dnm == other._dnm

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __lt__(self, other):
        return self.cmp(other, lambda x,y : x < y)

    def __le__(self, other):
        return self.cmp(other, lambda x,y : x <= y)

    def __gt__(self, other):
        return self.cmp(other, lambda x,y : x > y)

    def __ge__(self, other):
        return self.cmp(other, lambda x,y : x >= y)

    def to_mod(self, p : int) -> Mod:
        return Mod(self._num, p) / Mod(self._dnm, p)

    @staticmethod
    def random(bound : int = 100):
        # Bounds are arbitrary for testing purposes
        return Fraction(random.randint(-bound, bound), random.randint(1, bound))

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestFraction(unittest.TestCase):

    def test_conversion(self):
        self.assertEqual(Fraction(0, 5).tup(), (0, 1))
        self.assertEqual(Fraction(0, -7).tup(), (0, 1))
        self.assertEqual(Fraction(6, 3).tup(), (2, 1))
        self.assertEqual(Fraction(7*4, 3*4).tup(), (7, 3))
        self.assertEqual(Fraction(3, -6).tup(), (-1, 2))
        self.assertEqual(Fraction(-3, -6).tup(), (1, 2))
        self.assertEqual(Fraction(5).tup(), (5, 1))
        self.assertEqual(Fraction(Fraction(4, 6)).tup(), (2, 3))

    def test_invalid(self):
        with self.assertRaises(ZeroDivisionError):
            Fraction(1, 0)
        with self.assertRaises(TypeError):
            Fraction(1.5, 2)
        with self.assertRaises(TypeError):
            Fraction(1, "2")

    def test_reduction_invariant(self):
        for _ in range(1000):
            a = random.randint(-10**6, 10**6)
            b = random.choice([-1, 1]) * random.randint(1, 10**6)
            r = Fraction(a, b)
            self.assertGreater(r.denominator, 0)
            self.assertEqual(gcd(r.numerator, r.denominator), 1)
            self.assertEqual(r.numerator * b, a * r.denominator)

    def test_addition(self):
        self.assertEqual((Fraction(1, 3) + Fraction(1, 3)).tup(), (2, 3))
        self.assertEqual((Fraction(4, 5) + Fraction(6, 7)).tup(), (58, 35))
        self.assertEqual((Fraction(3, 6) + Fraction(3, 4)).tup(), (5, 4))
        self.assertEqual((Fraction(7, 8) + Fraction(5, 6)).tup(), (41, 24))
        self.assertEqual((Fraction(1, 2) + Fraction(-1, 2)).tup(), (0, 1))
        self.assertEqual((2 + Fraction(1, 2)).tup(), (5, 2))

    def test_subtraction(self):
        self.assertEqual((Fraction(1, 2) - Fraction(1, 3)).tup(), (1, 6))
        self.assertEqual((1 - Fraction(1, 3)).tup(), (2, 3))
        self.assertEqual((Fraction(1, 3) - 1).tup(), (-2, 3))

    def test_multiplication(self):
        self.assertEqual((Fraction(1, 3) * Fraction(9, 7)).tup(), (3, 7))
        self.assertEqual((Fraction(4, 5) * Fraction(12, 11)).tup(), (48, 55))
        self.assertEqual((Fraction(3, 2) * Fraction(-1, 2)).tup(), (-3, 4))
        self.assertEqual((Fraction(3, 2) * 0).tup(), (0, 1))

    def test_division(self):
        self.assertEqual((Fraction(2, 3) / Fraction(3, 4)).tup(), (8, 9))
        self.assertEqual((Fraction(3, 5) / Fraction(8, 7)).tup(), (21, 40))
        self.assertEqual((Fraction(0, 1) / Fraction(4, 1)).tup(), (0, 1))
        self.assertEqual((1 / Fraction(-2, 3)).tup(), (-3, 2))
        with self.assertRaises(ZeroDivisionError):
            Fraction(1, 2) / Fraction(0)
        with self.assertRaises(ZeroDivisionError):
            Fraction(1, 2) / 0

    def test_inversion(self):
        self.assertEqual((~Fraction(2, 3)).tup(), (3, 2))
        self.assertEqual((~Fraction(2, -3)).tup(), (-3, 2))
        with self.assertRaises(ZeroDivisionError):
            ~Fraction(0)

    def test_pow(self):
        self.assertEqual(Fraction(2, 3) ** 3, Fraction(8, 27))
        self.assertEqual(Fraction(2, 3) ** -2, Fraction(9, 4))
        self.assertEqual(Fraction(5, 7) ** 0, 1)

    def test_ordering(self):
        self.assertLess(Fraction(5, 3), Fraction(7, 4))
        self.assertGreater(Fraction(-1, 3), Fraction(-1, 2))
        self.assertLessEqual(Fraction(2, 4), Fraction(1, 2))
        self.assertGreaterEqual(Fraction(3), 2)
        self.assertLess(1, Fraction(3, 2))
        self.assertNotEqual(Fraction(1, 2), Fraction(1, 3))
        self.assertEqual(Fraction(4, 2), 2)

    def test_increment(self):
        self.assertEqual(Fraction(1, 2).increment(), Fraction(3, 2))
        self.assertEqual(Fraction(1, 2).decrement(), Fraction(-1, 2))
        r = Fraction(-1)
        r = r.increment()
        self.assertEqual(r.tup(), (0, 1))

    def test_unary(self):
        self.assertEqual(-Fraction(1, 2), Fraction(-1, 2))
        self.assertEqual(+Fraction(1, 2), Fraction(1, 2))
        self.assertEqual(abs(Fraction(-1, 2)), Fraction(1, 2))
        self.assertFalse(Fraction(0, 3))
        self.assertTrue(Fraction(1, 3))

    def test_from_expr(self):
        self.assertEqual(Fraction("2+3*4"), Fraction(14, 1))
        self.assertEqual(Fraction.from_expr(" (1 + 1) / 2 "), Fraction(1, 1))

    def test_hash(self):
        self.assertEqual(hash(Fraction(6, 2)), hash(3))
        self.assertEqual(len({Fraction(1, 2), Fraction(2, 4), Fraction(3, 6)}), 1)

    def test_to_mod(self):
        self.assertEqual(Fraction(1, 2).to_mod(7), Mod(4, 7))
        self.assertEqual(Fraction(-3).to_mod(7), Mod(4, 7))
