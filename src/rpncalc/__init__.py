"""
Checked 32-bit integer calculator with an RPN-style command line.

Invoked as ``rpncalc A B OP`` or ``rpncalc N !``. The arithmetic layer
never wraps: every operation either returns an in-range result or raises
a :class:`MathError` carrying an :class:`ErrorKind`.
"""

from rpncalc.core import Calculation, calculate, check, evaluate, format_result
from rpncalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ErrorKind,
    InvalidInputError,
    MathError,
    OutOfRangeError,
    OverflowError,
    UsageError,
    describe,
)
from rpncalc.operations import (
    add,
    divide,
    factorial,
    multiply,
    power,
    subtract,
)
from rpncalc.validators import (
    INT_MAX,
    INT_MIN,
    parse_int,
    validate_int32,
    validate_non_negative,
)

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "Calculation",
    "CalculatorError",
    "DivisionByZeroError",
    "ErrorKind",
    "InvalidInputError",
    "MathError",
    "OutOfRangeError",
    "OverflowError",
    "UsageError",
    "add",
    "calculate",
    "check",
    "describe",
    "divide",
    "evaluate",
    "factorial",
    "format_result",
    "multiply",
    "parse_int",
    "power",
    "subtract",
    "validate_int32",
    "validate_non_negative",
]

__version__ = "0.1.0"
