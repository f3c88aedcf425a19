"""Performance tests for the expression pipeline.

These tests are marked as 'slow' and can be skipped with: pytest -m "not slow"
"""

import time

import pytest

from rpnkalk_pkg.api import evaluate_expression


@pytest.mark.slow
class TestPipelinePerformance:
    def test_long_flat_expression(self):
        expr = "+".join(["1"] * 4000)
        start = time.time()
        result = evaluate_expression(expr, strict=False)
        elapsed = time.time() - start
        assert result.value == 4000.0
        assert elapsed < 1.0, f"Evaluation too slow: {elapsed}s"

    def test_deeply_nested_expression(self):
        depth = 1500
        expr = "(" * depth + "1" + "+1)" * depth
        start = time.time()
        result = evaluate_expression(expr, strict=False)
        elapsed = time.time() - start
        assert result.value == depth + 1
        assert elapsed < 1.0, f"Nested evaluation too slow: {elapsed}s"

    def test_many_independent_evaluations(self):
        start = time.time()
        for _ in range(2000):
            evaluate_expression("(2+3)*4-10/5", strict=False)
        elapsed = time.time() - start
        assert elapsed < 5.0, f"Repeated evaluation too slow: {elapsed}s"
