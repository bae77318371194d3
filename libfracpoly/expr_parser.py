#!/usr/bin/env python3
#
#   Recursive descent parser for arithmetic expressions over the rationals
#
#   Expr    := Sum
#   Sum     := Product (('+'|'-') Product)*
#   Product := SubExpr (('*'|'/') SubExpr)*
#   SubExpr := '(' Sum ')' | Num
#   Num     := ['-'] digit+
#

import logging

from libfracpoly.fraction import Fraction

logger = logging.getLogger(__name__)

DIGIT_CHUNK = 1000

class ParseError(ValueError):
    """
    Malformed expression text. `pos` indexes the whitespace-stripped text.
    """

    def __init__(self, msg : str, text : str, pos : int):
        super().__init__(f"{msg} at position {pos} in {text!r}")
        self.text = text
        self.pos = pos

class ExprParser:

    def __init__(self, text : str):
        if not isinstance(text, str):
            raise TypeError(f"Expected an expression string, got {type(text).__name__}")
        self.text = "".join(text.split())
        self.pos = 0

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def fail(self, msg):
        raise ParseError(msg, self.text, self.pos)

    def parse(self) -> Fraction:
        if len(self.text) == 0:
            self.fail("Empty expression")
        try:
            res = self.parse_sum()
        except RecursionError as e:
            raise ParseError("Expression nested too deeply", self.text, self.pos) from e
        if self.pos != len(self.text):
            if self.peek() == ')':
                self.fail("Unbalanced ')'")
            self.fail(f"Unexpected character {self.peek()!r}")
        logger.debug("parsed %r as %r", self.text, res)
        return res

    def parse_sum(self) -> Fraction:
        # operations: +, -
        res = self.parse_product()
        while self.peek() in ('+', '-'):
            op = self.peek()
            self.pos += 1
            other = self.parse_product()
            if op == '+':
                res += other
            else:
                res -= other
        return res

    def parse_product(self) -> Fraction:
        # operations: *, /
        res = self.parse_subexpr()
        while self.peek() in ('*', '/'):
            op = self.peek()
            self.pos += 1
            other = self.parse_subexpr()
            if op == '*':
                res *= other
            else:
                res /= other
        return res

    def parse_subexpr(self) -> Fraction:
        if self.peek() == '(':
            self.pos += 1
            res = self.parse_sum()
            if self.peek() != ')':
                self.fail("Expected ')'")
            self.pos += 1
            return res
        return self.parse_num()

    def parse_num(self) -> Fraction:
        sign = 1
        if self.peek() == '-':
            sign = -1
            self.pos += 1
        start = self.pos
        while self.peek() is not None and self.peek() in "0123456789":
            self.pos += 1
        if self.pos == start:
            if self.peek() is None:
                self.fail("Expected a number but the expression ended")
            self.fail(f"Expected a number, got {self.peek()!r}")

        # int() refuses strings past sys.get_int_max_str_digits(), convert in chunks
        num = 0
        for i in range(start, self.pos, DIGIT_CHUNK):
            chunk = self.text[i:min(i + DIGIT_CHUNK, self.pos)]
            num = num * 10**len(chunk) + int(chunk)
        return Fraction(sign * num)

def parse_expr(text : str) -> Fraction:
    """
    Evaluates an expression of integers, + - * / and parentheses exactly.

    Raises ParseError on malformed text and ZeroDivisionError if a divisor
    evaluates to zero.
    """
    return ExprParser(text).parse()

########################################################################################################################
#   Unit Tests
########################################################################################################################

import unittest

class TestExprParser(unittest.TestCase):

    def test_examples(self):
        self.assertEqual(parse_expr("2+3*4"), Fraction(14, 1))
        self.assertEqual(parse_expr("(1+1)/2"), Fraction(1, 1))
        self.assertEqual(parse_expr("-6/3"), Fraction(-2, 1))

    def test_precedence_and_associativity(self):
        self.assertEqual(parse_expr("10-4-3"), Fraction(3))
        self.assertEqual(parse_expr("12/3/2"), Fraction(2))
        self.assertEqual(parse_expr("1/2+1/3"), Fraction(5, 6))
        self.assertEqual(parse_expr("2*(3+4)*5"), Fraction(70))
        self.assertEqual(parse_expr("((7))"), Fraction(7))
        self.assertEqual(parse_expr("1/3*3"), Fraction(1))

    def test_whitespace(self):
        self.assertEqual(parse_expr("  1 +\t2 *\n 3 "), Fraction(7))
        self.assertEqual(parse_expr("1 2 + 1"), Fraction(13))

    def test_negative_numerals(self):
        self.assertEqual(parse_expr("-1--1"), Fraction(0))
        self.assertEqual(parse_expr("3*-2"), Fraction(-6))
        self.assertEqual(parse_expr("(-3)/(-6)"), Fraction(1, 2))

    def test_big_numbers(self):
        self.assertEqual(parse_expr("99999999999999999999*10"), Fraction(999999999999999999990))

    def test_long_numerals(self):
        # longer than the default int() digit limit of 4300
        self.assertEqual(parse_expr("1" * 5000), Fraction((10**5000 - 1) // 9))
        self.assertEqual(parse_expr("-1" + "0" * 6000), Fraction(-10**6000))
        self.assertEqual(parse_expr("1" + "0" * 2500 + "/1" + "0" * 2499), Fraction(10))
        self.assertEqual(parse_expr("0" * 3001 + "7"), Fraction(7))

    def test_deep_nesting(self):
        self.assertEqual(parse_expr("(" * 50 + "3" + ")" * 50), Fraction(3))
        for text in ("(" * 5000 + "1" + ")" * 5000, "(" * 100000):
            with self.assertRaises(ParseError):
                parse_expr(text)

    def test_malformed(self):
        for text in ("", "   ", "(1+2", "1+", "1)", "-", "1+x", "()", "-(1)", "1**2", "2(3)"):
            with self.assertRaises(ParseError, msg=text):
                parse_expr(text)

    def test_error_position(self):
        try:
            parse_expr("1 + 2 * x")
            self.fail()
        except ParseError as e:
            self.assertEqual(e.pos, 4)
            self.assertEqual(e.text, "1+2*x")

    def test_division_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            parse_expr("1/(2-2)")

    def test_not_a_string(self):
        with self.assertRaises(TypeError):
            parse_expr(12)
