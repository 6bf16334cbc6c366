"""Slash command arithmetic: expression parsing and evaluation."""

from slack_calculator.calculator.engine import (
    CalculationError,
    DivisionByZeroError,
    calculate,
)
from slack_calculator.calculator.expression import (
    Expression,
    ExpressionError,
    OperationType,
    format_number,
)

__all__ = [
    "CalculationError",
    "DivisionByZeroError",
    "Expression",
    "ExpressionError",
    "OperationType",
    "calculate",
    "format_number",
]
