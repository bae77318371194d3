"""Exact fractions, univariate polynomials over exact fields, polynomial division and gcd."""

from libfracpoly.modular import Mod, gcd, is_prime, xgcd
from libfracpoly.fraction import Fraction
from libfracpoly.expr_parser import ParseError, parse_expr
from libfracpoly.fields import CoefficientField, GF, QQ, RationalField, field_of
from libfracpoly.formatting import PrintMode, format_fraction, format_polynomial
from libfracpoly.polynomial import Polynomial
from libfracpoly.euclid import poly_gcd, poly_lcm, poly_xgcd
