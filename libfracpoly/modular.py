#!/usr/bin/env python3
#
#   Integer Euclid and arithmetic in GF(p)
#

import random

def gcd(a : int, b : int) -> int:
    while b != 0:
        a %= b
        a,b = b,a
    return abs(a)

def xgcd(a : int, b : int):
    """
    Returns (g, x, y) with a * x + b * y == g
    """
    prevx, x = 1, 0
    prevy, y = 0, 1
    while b != 0:
        q, r = divmod(a, b)
        x, prevx = prevx - q * x, x
        y, prevy = prevy - q * y, y
        a, b = b, r
    return a, prevx, prevy

LARGEST_u16_PRIME = 65521

# Miller-Rabin with these bases is exact below 3.3 * 10^24
MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

def is_prime(n : int) -> bool:
    if n < 2:
        return False
    for q in MR_BASES:
        if n % q == 0:
            return n == q

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in MR_BASES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True

class Mod:
    """
    Element of GF(p), immutable.
    """

    def __init__(self, x : int, p : int):
        if not isinstance(x, int) or not isinstance(p, int):
            raise TypeError(f"Mod expects integers, got {type(x).__name__} and {type(p).__name__}")
        if p < 2:
            raise ValueError(f"Modulus must be at least 2, got {p}")
        self._x = x % p
        self._p = p

        # Init for prime if not done
        if p not in Mod._inverse_cache:
            Mod._inverse_cache[p] = {}

    @property
    def x(self):
        return self._x

    @property
    def p(self):
        return self._p

    def __str__(self):
        return str(self._x)

    def __repr__(self):
        return f"Mod({self._x}, {self._p})"

    def __hash__(self):
        return hash((self._x, self._p))

    def __bool__(self):
        return self._x != 0

    def cvt_other(self, other):
        # local import, fraction.py depends on this module
        from libfracpoly.fraction import Fraction

        if isinstance(other, Mod):
            if other.p != self._p:
                raise TypeError(f"Cannot combine elements of GF({self._p}) and GF({other.p})")
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return Mod(other, self._p)
        if isinstance(other, Fraction):
            return other.to_mod(self._p)
        return None

    def __add__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        r = self._x + other.x
        if r >= self._p:
            r -= self._p
        return Mod(r, self._p)

    __radd__ = __add__

    def __sub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Mod(self._x - other.x, self._p)

    def __rsub__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Mod(other.x - self._x, self._p)

    def __mul__(self, other):
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return Mod(self._x * other.x, self._p)

    __rmul__ = __mul__

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        if other < 0:
            return (~self) ** -other
        return Mod(pow(self._x, other, self._p), self._p)

    def __invert__(self):
        """
        Multiplicative inverse
        """
        if self._x == 0:
            raise ZeroDivisionError(f"0 has no inverse in GF({self._p})")

        cache = Mod._inverse_cache[self._p]
        if self._x not in cache:
            g,x,_ = xgcd(self._x, self._p)
            if g != 1:
                raise ZeroDivisionError(f"{self._x} is not invertible modulo {self._p}")
            cache[self._x] = Mod(x, self._p)
        return cache[self._x]

    def __neg__(self):
        """
        Additive inverse
        """
        return Mod(-self._x, self._p)

    def __pos__(self):
        return self

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

    def __eq__(self, other):
        if isinstance(other, Mod):
            return self._p == other.p and self._x == other.x
        other = self.cvt_other(other)
        if other is None:
            return NotImplemented
        return self._x == other.x

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    @staticmethod
    def random(p : int, min : int = 0):
        return Mod(random.randint(min, p - 1), p)

Mod._inverse_cache = {}

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestGCD(unittest.TestCase):

    def test_gcd(self):
        self.assertEqual(gcd(4, 3), 1)
        self.assertEqual(gcd(12, 3), 3)
        self.assertEqual(gcd(21, 9), 3)
        self.assertEqual(gcd(0, 9), 9)
        self.assertEqual(gcd(0, 0), 0)
        self.assertEqual(gcd(1, -2), gcd(1, 2))
        self.assertEqual(gcd(-1, -2), gcd(1, 2))

    def test_xgcd(self):
        self.assertEqual(xgcd(30, 18), (6, -1, 2))
        self.assertEqual(xgcd(18, 30), (6, 2, -1))
        for a, b in ((240, 46), (17, 5), (5, 17)):
            g, x, y = xgcd(a, b)
            self.assertEqual(a * x + b * y, g)

class TestMod(unittest.TestCase):
    PRIMES = [509, 32749, 65521]

    def test_conversion(self):
        for _ in range(1000):
            p = random.choice(self.PRIMES)
            x = random.randint(-70000, 70000)
            self.assertEqual(Mod(x, p), x % p)

    def test_field_ops(self):
        for _ in range(1000):
            p = random.choice(self.PRIMES)
            x1 = random.randint(0, 70000)
            x2 = random.randint(0, 70000)
            self.assertEqual(Mod(x1, p) + Mod(x2, p), (x1 + x2) % p)
            self.assertEqual(Mod(x1, p) - Mod(x2, p), (x1 - x2) % p)
            self.assertEqual(Mod(x1, p) * Mod(x2, p), (x1 * x2) % p)
            self.assertEqual(-Mod(x1, p), (-x1) % p)

    def test_inversion(self):
        for p in self.PRIMES:
            x = Mod.random(p, 1)
            ix = ~x
            self.assertEqual(x * ix, 1)
            self.assertEqual(~ix, x)
        with self.assertRaises(ZeroDivisionError):
            ~Mod(0, 509)
        with self.assertRaises(ZeroDivisionError):
            Mod(3, 509) / 0

    def test_division(self):
        for p in self.PRIMES:
            x1 = Mod.random(p)
            x2 = Mod.random(p, 1)
            self.assertEqual(x1 / x2, x1 * ~x2)
            self.assertEqual((x1 / x2) * x2, x1)

    def test_pow(self):
        self.assertEqual(Mod(2, 509) ** 10, 1024 % 509)
        self.assertEqual(Mod(2, 509) ** -1, ~Mod(2, 509))

    def test_mixed_moduli(self):
        with self.assertRaises(TypeError):
            Mod(1, 509) + Mod(1, 65521)

class TestIsPrime(unittest.TestCase):

    def test_small(self):
        primes = [n for n in range(200) if is_prime(n)]
        self.assertEqual(primes[:10], [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
        self.assertEqual(len(primes), 46)
        for n in range(200):
            self.assertEqual(is_prime(n), n > 1 and all(n % d != 0 for d in range(2, n)))

    def test_large(self):
        self.assertTrue(is_prime(LARGEST_u16_PRIME))
        self.assertTrue(is_prime(2**61 - 1))
        self.assertTrue(is_prime(2**127 - 1))
        self.assertFalse(is_prime(LARGEST_u16_PRIME * 65519))
        # strong pseudoprime to the bases 2, 3, 5 and 7
        self.assertFalse(is_prime(3215031751))
        # Carmichael number
        self.assertFalse(is_prime(561))
