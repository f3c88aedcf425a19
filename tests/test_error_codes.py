"""Test error codes returned by the API."""

import unittest

from rpnkalk_pkg import config
from rpnkalk_pkg.api import evaluate_expression


class TestErrorCodes(unittest.TestCase):
    """Test that every failure kind carries its error code."""

    def assertFailsWith(self, expression, code, strict=False):
        result = evaluate_expression(expression, strict=strict)
        self.assertFalse(result.ok)
        self.assertEqual(
            result.error_code, code, f"Expected {code} for {expression!r}, got {result!r}"
        )
        self.assertTrue(result.error)
        return result

    def test_no_tokens(self):
        self.assertFailsWith("", "NO_TOKENS")
        self.assertFailsWith("hello", "NO_TOKENS")

    def test_unmatched_paren(self):
        result = self.assertFailsWith("(2+3", "UNMATCHED_PAREN")
        self.assertIn("closing", result.error)
        result = self.assertFailsWith("2+3)", "UNMATCHED_PAREN")
        self.assertIn("opening", result.error)

    def test_unknown_token(self):
        result = self.assertFailsWith("2+x", "UNKNOWN_TOKEN", strict=True)
        self.assertIn("x", result.error)

    def test_insufficient_operands(self):
        result = self.assertFailsWith("+", "INSUFFICIENT_OPERANDS")
        self.assertIn("'+'", result.error)
        self.assertIn("position 1", result.error)

    def test_division_by_zero(self):
        result = self.assertFailsWith("5/0", "OPERATOR_ERROR")
        self.assertEqual(result.cause_code, "DIVISION_BY_ZERO")
        self.assertTrue(result.failed_with("DIVISION_BY_ZERO"))
        self.assertTrue(result.failed_with("OPERATOR_ERROR"))
        self.assertIn("'/'", result.error)
        self.assertIn("division by zero", result.error)

    def test_malformed_expression(self):
        self.assertFailsWith("2 3", "MALFORMED_EXPRESSION")
        self.assertFailsWith("()", "MALFORMED_EXPRESSION")

    def test_literal_overflowing_float(self):
        huge = "9" * 400
        result = self.assertFailsWith(f"{huge}-{huge}", "UNKNOWN_TOKEN")
        self.assertIsNone(result.value)

    def test_too_long(self):
        long_input = "1+" * config.MAX_INPUT_LENGTH
        self.assertFailsWith(long_input, "TOO_LONG")

    def test_failed_with_is_false_on_success(self):
        self.assertFalse(evaluate_expression("1+1").failed_with("DIVISION_BY_ZERO"))


if __name__ == "__main__":
    unittest.main()
