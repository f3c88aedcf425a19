"""Fuzzing tests comparing random expressions with SymPy."""

import math
import random
import string
import unittest

import sympy as sp

from rpnkalk_pkg.api import evaluate_expression
from rpnkalk_pkg.types import EvalResult


def _literal(rng):
    if rng.random() < 0.25:
        return f"{rng.randint(0, 20)}.{rng.randint(1, 9)}"
    return str(rng.randint(0, 20))


def _divisor(rng):
    # Strictly positive so neither side divides by zero
    if rng.random() < 0.5:
        return str(rng.randint(1, 9))
    return f"({rng.randint(1, 9)}+{rng.randint(0, 9)})"


def random_expression(rng, depth=0):
    if depth >= 3 or rng.random() < 0.3:
        return _literal(rng)
    left = random_expression(rng, depth + 1)
    op = rng.choice("+-*/")
    right = _divisor(rng) if op == "/" else random_expression(rng, depth + 1)
    expr = f"{left}{rng.choice(['', ' '])}{op}{rng.choice(['', ' '])}{right}"
    if rng.random() < 0.4:
        expr = f"({expr})"
    return expr


class TestAgainstSymPy(unittest.TestCase):
    """Random well-formed expressions must match SymPy's arithmetic."""

    def test_random_expressions(self):
        rng = random.Random(20241019)
        for _ in range(300):
            expr = random_expression(rng)
            result = evaluate_expression(expr, strict=True)
            self.assertTrue(result.ok, f"{expr!r} failed: {result!r}")
            expected = float(sp.sympify(expr))
            self.assertTrue(
                math.isclose(result.value, expected, rel_tol=1e-9, abs_tol=1e-3),
                f"{expr!r}: got {result.value!r}, SymPy gives {expected!r}",
            )


class TestGarbageInput(unittest.TestCase):
    """Random garbage never raises out of the API."""

    def test_random_strings(self):
        rng = random.Random(7)
        for _ in range(200):
            length = rng.randint(0, 60)
            raw = "".join(rng.choices(string.printable, k=length))
            for strict in (False, True):
                result = evaluate_expression(raw, strict=strict)
                self.assertIsInstance(result, EvalResult)
                if not result.ok:
                    self.assertIsNotNone(result.error_code)

    def test_malformed_expressions(self):
        malformed = ["(((", ")))", "1++2", "*/1", "", "   ", "1 2 3", "(1)(2)", ")1("]
        for expr in malformed:
            result = evaluate_expression(expr, strict=False)
            self.assertFalse(result.ok, f"{expr!r} should fail")


if __name__ == "__main__":
    unittest.main()
