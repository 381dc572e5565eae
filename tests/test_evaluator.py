# =============================================================================
# tests/test_evaluator.py - Postfix Evaluator Tests
# =============================================================================
# Tests for core/expression/evaluator.py, driven with hand-built postfix
# sequences so each stack rule is exercised directly.
#
# Run with: pytest tests/test_evaluator.py -v
# =============================================================================

import pytest

from core.expression import ErrorKind, ExpressionError, Token, evaluate


def _seq(*items: str) -> list[Token]:
    """Build a postfix sequence from "3", "4", "+" style strings."""
    return [Token.of(i) if i in "+-*/()" else Token.number(i) for i in items]


class TestEvaluate:
    """Tests for evaluate()."""

    @pytest.mark.parametrize(
        "items, expected",
        [
            (("3", "4", "+"), 7.0),
            (("10", "2", "/"), 5.0),
            (("2", "3", "4", "*", "+"), 14.0),
            (("5", "1", "2", "+", "4", "*", "+", "3", "-"), 14.0),
            (("0.5", "2", "*"), 1.0),
            (("42",), 42.0),
        ],
    )
    def test_values(self, items, expected):
        assert evaluate(_seq(*items)) == pytest.approx(expected)

    def test_operand_order_for_subtraction(self):
        assert evaluate(_seq("10", "4", "-")) == 6.0

    def test_operand_order_for_division(self):
        assert evaluate(_seq("1", "4", "/")) == 0.25

    def test_division_by_zero(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate(_seq("2", "0", "/"))
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO

    def test_division_by_computed_zero(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate(_seq("2", "1", "1", "-", "/"))
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO

    @pytest.mark.parametrize(
        "items",
        [
            ("1" + "0" * 200, "1" + "0" * 200, "*"),
            ("1" + "0" * 308, "1" + "0" * 308, "+"),
            ("1" + "0" * 300, "0.0000000001", "/"),
        ],
    )
    def test_overflow(self, items):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate(_seq(*items))
        assert exc_info.value.kind is ErrorKind.NUMERIC_OVERFLOW

    def test_largest_finite_result_is_kept(self):
        big = "1" + "0" * 308
        assert evaluate(_seq(big, "1", "*")) == 1e308

    def test_zero_divided_is_fine(self):
        assert evaluate(_seq("0", "5", "/")) == 0.0

    @pytest.mark.parametrize(
        "items",
        [
            ("+",),
            ("2", "+"),
            ("1", "2"),
            ("1", "2", "3", "+"),
            ("1", "2", "("),
        ],
    )
    def test_malformed(self, items):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate(_seq(*items))
        assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION

    def test_empty_sequence_is_malformed(self):
        with pytest.raises(ExpressionError) as exc_info:
            evaluate([])
        assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION
