"""Unit tests for the calculate tool."""

import pytest

from simplemcp.skill.builtin.calculator import (
    CalculationError,
    CalculatorSkill,
    evaluate_simple_expression,
)
from simplemcp.skill.errors import InvalidArgumentsError, ToolExecutionError


class TestEvaluateSimpleExpression:
    """Tests for evaluate_simple_expression()."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2 + 2", "4.00"),
            ("10 - 4", "6.00"),
            ("3 * 1.5", "4.50"),
            ("7 / 2", "3.50"),
            ("  8/4  ", "2.00"),
            ("-5 + 3", "-2.00"),
            ("1 / 3", "0.33"),
        ],
    )
    def test_binary_operations(self, expression: str, expected: str) -> None:
        assert evaluate_simple_expression(expression) == expected

    def test_division_by_zero(self) -> None:
        with pytest.raises(CalculationError, match="division by zero"):
            evaluate_simple_expression("10 / 0")

    @pytest.mark.parametrize("expression", ["abc + 2", "2 + 3 + 4", "", "42", "2 ^ 3"])
    def test_unsupported(self, expression: str) -> None:
        """Only a single operator between two numbers is accepted."""
        with pytest.raises(CalculationError, match="unsupported expression format"):
            evaluate_simple_expression(expression)


class TestCalculatorSkill:
    """Tests for CalculatorSkill.execute()."""

    @pytest.mark.asyncio
    async def test_result_text(self) -> None:
        result = await CalculatorSkill().execute({"expression": "2 + 2"})
        assert result.text == "Expression: 2 + 2\nResult: 4.00"

    @pytest.mark.asyncio
    async def test_division_by_zero_is_execution_error(self) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            await CalculatorSkill().execute({"expression": "10 / 0"})
        assert exc_info.value.message == "division by zero"
        assert exc_info.value.tool_name == "calculate"

    @pytest.mark.asyncio
    async def test_missing_expression(self) -> None:
        with pytest.raises(InvalidArgumentsError):
            await CalculatorSkill().execute({})
