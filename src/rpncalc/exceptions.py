"""Custom exceptions for the rpncalc package."""

import enum
from typing import Any


class ErrorKind(enum.Enum):
    """Outcome of a checked arithmetic operation."""

    OK = "ok"
    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division by zero"
    INVALID_ARGUMENT = "invalid argument"


def describe(kind: ErrorKind) -> str:
    """Return the user-facing message for an error kind."""
    return kind.value


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class UsageError(CalculatorError):
    """Raised when the command line is malformed (wrong arity, bad token)."""


class MathError(CalculatorError):
    """Raised when a well-formed calculation cannot be carried out."""

    kind = ErrorKind.INVALID_ARGUMENT


class DivisionByZeroError(MathError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: int) -> None:
        super().__init__(describe(self.kind))
        self.numerator = numerator


class OverflowError(MathError):
    """Raised when a result does not fit in a 32-bit signed integer."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, *operands: int) -> None:
        super().__init__(describe(self.kind))
        self.operation = operation
        self.operands = operands


class InvalidInputError(MathError):
    """Raised when an operand is outside the domain of an operation."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, value: Any, reason: str = "invalid argument") -> None:
        super().__init__(reason)
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class OutOfRangeError(InvalidInputError):
    """Raised when a value is outside the 32-bit signed range."""

    def __init__(self, value: int, min_val: int, max_val: int) -> None:
        super().__init__(value, f"value out of range [{min_val}, {max_val}]")
        self.min_val = min_val
        self.max_val = max_val
