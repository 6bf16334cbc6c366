"""Arithmetic evaluation of parsed expressions."""

import math

from slack_calculator.calculator.expression import Expression, OperationType


class CalculationError(Exception):
    """Raised when a well-formed expression cannot be evaluated."""


class DivisionByZeroError(CalculationError):
    """Raised when dividing by zero."""


def calculate(expression: Expression) -> float:
    """Evaluate ``expression`` and return the result.

    Raises:
        DivisionByZeroError: If dividing by zero.
        CalculationError: If the result overflows to infinity.
    """
    result = _evaluate(expression)
    if not math.isfinite(result):
        raise CalculationError("Unable to perform calculation. Result is too large.")
    return result


def _evaluate(expression: Expression) -> float:
    a, b = expression.first_number, expression.second_number
    op = expression.operation_type

    if op == OperationType.ADD:
        return a + b
    if op == OperationType.SUBTRACT:
        return a - b
    if op == OperationType.MULTIPLY:
        return a * b
    if b == 0:
        raise DivisionByZeroError("Unable to perform calculation. Cannot divide by 0.")
    return a / b
