"""Slash command and argument parsing into arithmetic expressions."""

import math
from dataclasses import dataclass
from enum import Enum


class ExpressionError(ValueError):
    """Raised when a slash command or its text cannot form an expression."""


class OperationType(str, Enum):
    """Supported arithmetic operations, keyed by slash command."""

    ADD = "/add"
    SUBTRACT = "/subtract"
    MULTIPLY = "/multiply"
    DIVIDE = "/divide"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    OperationType.ADD: "+",
    OperationType.SUBTRACT: "-",
    OperationType.MULTIPLY: "*",
    OperationType.DIVIDE: "/",
}


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Expression:
    """A binary arithmetic expression, e.g. ``4 + 5``."""

    first_number: float
    operation_type: OperationType
    second_number: float

    @classmethod
    def parse(cls, command: str, text: str) -> "Expression":
        """Build an expression from a slash command and its text (``'/add'``, ``'4 5'``).

        Raises:
            ExpressionError: If the command is unknown or the text is not two numbers.
        """
        operation_type = _parse_command(command)
        first_number, second_number = _parse_numbers(text)
        return cls(first_number, operation_type, second_number)

    def __str__(self) -> str:
        return (
            f"{format_number(self.first_number)} "
            f"{self.operation_type.symbol} "
            f"{format_number(self.second_number)}"
        )


def _parse_command(command: str) -> OperationType:
    try:
        return OperationType(command)
    except ValueError:
        valid = [f"'{op.value}'" for op in OperationType]
        raise ExpressionError(
            f"Command '{command}' is invalid. "
            f"Valid options include {', '.join(valid[:-1])} and {valid[-1]}."
        ) from None


def _parse_numbers(text: str) -> tuple[float, float]:
    error_message = (
        f"Input '{text}' is not valid. "
        "Expected input to be of the form: 'firstNumber secondNumber'."
    )

    parts = (text or "").split()
    if len(parts) != 2:
        raise ExpressionError(error_message)

    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        raise ExpressionError(error_message) from None

    if not all(math.isfinite(number) for number in numbers):
        raise ExpressionError(error_message)

    return numbers[0], numbers[1]
