"""Two-operand calculator.

Only "number operator number" is supported. The expression is split on each
operator in turn (+, -, *, /); the first split that yields exactly two
numeric parts wins. Nothing is ever passed to eval().
"""

from typing import Any

from simplemcp.core.types import ToolResult
from simplemcp.skill.base import BaseSkill, object_schema, string_property
from simplemcp.skill.errors import ToolExecutionError

OPERATORS = ("+", "-", "*", "/")


class CalculationError(ValueError):
    """Raised when an expression cannot be evaluated."""


def _parse_number(text: str) -> float | None:
    try:
        return float(text.strip())
    except ValueError:
        return None


def evaluate_simple_expression(expression: str) -> str:
    """Evaluate "a op b" and format the result with two decimals.

    Args:
        expression: e.g. "2 + 2", "10 * 5".

    Returns:
        The result, e.g. "4.00".

    Raises:
        CalculationError: On division by zero or an unsupported expression.
    """
    expression = expression.strip()

    for op in OPERATORS:
        parts = expression.split(op)
        if len(parts) != 2:
            continue

        left = _parse_number(parts[0])
        right = _parse_number(parts[1])
        if left is None or right is None:
            continue

        if op == "+":
            result = left + right
        elif op == "-":
            result = left - right
        elif op == "*":
            result = left * right
        else:
            if right == 0:
                raise CalculationError("division by zero")
            result = left / right

        return f"{result:.2f}"

    raise CalculationError(
        "unsupported expression format. Use: number operator number"
    )


class CalculatorSkill(BaseSkill):
    """Evaluate a single binary arithmetic operation."""

    def __init__(self) -> None:
        super().__init__(
            name="calculate",
            description="Perform simple calculations (supports +, -, *, /)",
            parameters=object_schema(
                {
                    "expression": string_property(
                        "Mathematical expression (e.g., '2 + 2', '10 * 5')"
                    ),
                },
                required=["expression"],
            ),
        )

    async def run(self, expression: str = "", **kwargs: Any) -> ToolResult:
        try:
            result = evaluate_simple_expression(expression)
        except CalculationError as e:
            raise ToolExecutionError(self.name, str(e)) from e

        return ToolResult.from_text(f"Expression: {expression}\nResult: {result}")
