"""Calculation record plus the check, compute and format stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rpncalc.exceptions import DivisionByZeroError, InvalidInputError, UsageError
from rpncalc.operations import add, divide, factorial, multiply, power, subtract

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

FACTORIAL = "!"
BINARY_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": add,
    "-": subtract,
    "x": multiply,
    "/": divide,
    "^": power,
}


@dataclass
class Calculation:
    """A single invocation: two operands, an operator and the result."""

    a: int = 0
    b: int = 0
    op: str = ""
    result: int = 0

    @property
    def is_unary(self) -> bool:
        return self.op == FACTORIAL

    def __str__(self) -> str:
        return format_result(self)


def is_binary_op(op: str) -> bool:
    return op in BINARY_OPERATIONS


def check(calc: Calculation) -> None:
    """
    Reject semantically invalid calculations before computing them.

    Args:
        calc: A parsed calculation

    Raises:
        UsageError: If the invocation is malformed (help should be shown)
        InvalidInputError: For a negative factorial or exponent
        DivisionByZeroError: If dividing by zero
    """
    if calc.op == FACTORIAL:
        if calc.b != 0:
            raise UsageError("'!' must be used in unary form: N !")
        if calc.a < 0:
            raise InvalidInputError(calc.a, "factorial requires n >= 0")
        return

    if not is_binary_op(calc.op):
        raise UsageError("unknown operation")

    if calc.op == "^" and calc.b < 0:
        raise InvalidInputError(calc.b, "power requires exp >= 0")

    if calc.op == "/" and calc.b == 0:
        raise DivisionByZeroError(calc.a)


def calculate(calc: Calculation) -> Calculation:
    """
    Run the operation selected by ``calc.op`` and store its result.

    Raises:
        MathError: Any error signalled by the arithmetic operation
        UsageError: If the operator is unknown
    """
    if calc.op == FACTORIAL:
        calc.result = factorial(calc.a)
    elif is_binary_op(calc.op):
        calc.result = BINARY_OPERATIONS[calc.op](calc.a, calc.b)
    else:
        raise UsageError("unknown operation")

    logger.debug("computed %r", calc)
    return calc


def format_result(calc: Calculation) -> str:
    """Render a completed calculation as a single display line."""
    if calc.op == FACTORIAL:
        return f"fact({calc.a}) = {calc.result}"
    if calc.op == "^":
        return f"{calc.a}^{calc.b} = {calc.result}"
    return f"{calc.a} {calc.op} {calc.b} = {calc.result}"


def evaluate(a: int, op: str, b: int = 0) -> Calculation:
    """
    Check and compute a calculation in one call.

    Example:
        >>> evaluate(2, "+", 3).result
        5
        >>> str(evaluate(5, "!"))
        'fact(5) = 120'
    """
    calc = Calculation(a=a, b=b, op=op)
    check(calc)
    return calculate(calc)
