#!/usr/bin/env python3
#
#   Text rendering of fractions and polynomials
#
#   SIMPLE  (1)x^2+(-3)x+(2)      (-11/12)
#   VISUAL  x^2-3*x+2             -11/12
#   LATEX   x^{2}-3x+2            -\frac{11}{12}
#

from enum import Enum

from libfracpoly.fraction import Fraction

class PrintMode(Enum):
    SIMPLE = "simple"
    VISUAL = "visual"
    LATEX = "latex"

def format_fraction(r : Fraction, mode : PrintMode = PrintMode.VISUAL) -> str:
    num, dnm = r.tup()
    if mode is PrintMode.SIMPLE:
        if dnm == 1:
            return f"({num})"
        return f"({num}/{dnm})"
    if mode is PrintMode.VISUAL:
        if dnm == 1:
            return f"{num}"
        return f"{num}/{dnm}"
    if mode is PrintMode.LATEX:
        if dnm == 1:
            return f"{num}"
        sign = "-" if num < 0 else ""
        return f"{sign}\\frac{{{abs(num)}}}{{{dnm}}}"
    raise ValueError(f"Unknown print mode {mode!r}")

def format_coeff(c, mode : PrintMode) -> str:
    if isinstance(c, Fraction):
        return format_fraction(c, mode)
    if mode is PrintMode.SIMPLE:
        return f"({c})"
    return str(c)

def is_negative(c):
    # only ordered fields have a sign, elements of GF(p) print without one
    return isinstance(c, Fraction) and c < 0

def format_polynomial(p, mode : PrintMode = PrintMode.VISUAL) -> str:
    """
    Renders p highest power first in the variable x.
    """
    if not isinstance(mode, PrintMode):
        raise ValueError(f"Unknown print mode {mode!r}")

    deg = p.degree()
    terms = []
    for d in range(deg, 0, -1):
        c = p[d]
        if c == 0:
            continue
        if mode is PrintMode.SIMPLE:
            if d != deg:
                terms.append("+")
            terms.append(f"{format_coeff(c, mode)}x")
        else:
            if not is_negative(c) and d < deg:
                terms.append("+")
            if c == -1:
                terms.append("-")
            elif c != 1:
                terms.append(format_coeff(c, mode))
                if mode is PrintMode.VISUAL:
                    terms.append("*")
            terms.append("x")
        if d > 1:
            terms.append(f"^{{{d}}}" if mode is PrintMode.LATEX else f"^{d}")

    c = p[0]
    if c != 0 or deg == -1:
        if deg > 0 and (mode is PrintMode.SIMPLE or not is_negative(c)):
            terms.append("+")
        terms.append(format_coeff(c, mode))

    return "".join(terms)

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestFormatting(unittest.TestCase):

    def test_fraction(self):
        self.assertEqual(format_fraction(Fraction(5), PrintMode.SIMPLE), "(5)")
        self.assertEqual(format_fraction(Fraction(-11, 12), PrintMode.SIMPLE), "(-11/12)")
        self.assertEqual(format_fraction(Fraction(5), PrintMode.VISUAL), "5")
        self.assertEqual(format_fraction(Fraction(-11, 12), PrintMode.VISUAL), "-11/12")
        self.assertEqual(format_fraction(Fraction(5), PrintMode.LATEX), "5")
        self.assertEqual(format_fraction(Fraction(-11, 12), PrintMode.LATEX), "-\\frac{11}{12}")
        self.assertEqual(str(Fraction(-11, 12)), "-11/12")

    def test_polynomial(self):
        from libfracpoly.polynomial import Polynomial

        p = Polynomial([2, -3, 1])
        self.assertEqual(format_polynomial(p, PrintMode.SIMPLE), "(1)x^2+(-3)x+(2)")
        self.assertEqual(format_polynomial(p, PrintMode.VISUAL), "x^2-3*x+2")
        self.assertEqual(format_polynomial(p, PrintMode.LATEX), "x^{2}-3x+2")

        q = Polynomial([Fraction(-1, 2), 0, -1, Fraction(2, 3)])
        self.assertEqual(format_polynomial(q, PrintMode.VISUAL), "2/3*x^3-x^2-1/2")
        self.assertEqual(format_polynomial(q, PrintMode.LATEX), "\\frac{2}{3}x^{3}-x^{2}-\\frac{1}{2}")

    def test_degenerate(self):
        from libfracpoly.polynomial import Polynomial

        for mode, text in ((PrintMode.SIMPLE, "(0)"), (PrintMode.VISUAL, "0"), (PrintMode.LATEX, "0")):
            self.assertEqual(format_polynomial(Polynomial(), mode), text)
        self.assertEqual(format_polynomial(Polynomial([0, 1]), PrintMode.VISUAL), "x")
        self.assertEqual(format_polynomial(Polynomial([0, -1]), PrintMode.VISUAL), "-x")
        self.assertEqual(format_polynomial(Polynomial([7]), PrintMode.VISUAL), "7")

    def test_bad_mode(self):
        from libfracpoly.polynomial import Polynomial

        with self.assertRaises(ValueError):
            format_polynomial(Polynomial([1]), "plain")
