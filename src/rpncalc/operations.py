"""Checked 32-bit integer operations with overflow protection."""

import logging

from rpncalc.exceptions import DivisionByZeroError, InvalidInputError, OverflowError
from rpncalc.validators import INT_MAX, INT_MIN, validate_int32, validate_non_negative

logger = logging.getLogger(__name__)


def add(a: int, b: int) -> int:
    """
    Add two integers, rejecting results outside the 32-bit range.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are not 32-bit integers
        OverflowError: If the sum does not fit
    """
    validate_int32(a)
    validate_int32(b)

    result = _wrap(a + b)

    # Same-sign operands producing a result of the other sign
    if (a >= 0) == (b >= 0) and (result >= 0) != (a >= 0):
        raise OverflowError("addition", a, b)

    return result


def subtract(a: int, b: int) -> int:
    """
    Subtract b from a, rejecting results outside the 32-bit range.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are not 32-bit integers
        OverflowError: If the difference does not fit
    """
    validate_int32(a)
    validate_int32(b)

    result = _wrap(a - b)

    # Opposite-sign operands where the result takes the sign of b
    if (a >= 0) != (b >= 0) and (result >= 0) != (a >= 0):
        raise OverflowError("subtraction", a, b)

    return result


def multiply(a: int, b: int) -> int:
    """
    Multiply two integers, rejecting products outside the 32-bit range.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are not 32-bit integers
        OverflowError: If the product does not fit
    """
    validate_int32(a)
    validate_int32(b)

    if a == 0 or b == 0:
        return 0

    # Check bounds before computing
    if (a > 0) == (b > 0):
        if abs(a) > INT_MAX // abs(b):
            raise OverflowError("multiplication", a, b)
    elif abs(a) > -INT_MIN // abs(b):
        raise OverflowError("multiplication", a, b)

    return a * b


def divide(a: int, b: int) -> int:
    """
    Divide a by b, truncating toward zero.

    Properties:
        - Identity: divide(a, 1) == a
        - Truncation: divide(-7, 2) == -3

    Raises:
        InvalidInputError: If inputs are not 32-bit integers
        DivisionByZeroError: If b is zero
        OverflowError: For INT_MIN / -1, the only unrepresentable quotient
    """
    validate_int32(a)
    validate_int32(b)

    if b == 0:
        raise DivisionByZeroError(a)

    if a == INT_MIN and b == -1:
        raise OverflowError("division", a, b)

    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def power(base: int, exponent: int) -> int:
    """
    Raise base to a non-negative integer power by repeated multiplication.

    Properties:
        - Zero exponent: power(a, 0) == 1 (including a == 0)
        - Identity: power(a, 1) == a
        - One base: power(1, n) == 1

    Raises:
        InvalidInputError: If inputs are invalid or exponent is negative
        OverflowError: If an intermediate product does not fit
    """
    validate_int32(base)
    validate_non_negative(exponent, "power requires exp >= 0")

    if exponent == 0:
        return 1
    if base in (0, 1):
        return base
    if base == -1:
        return -1 if exponent % 2 else 1

    # |base| >= 2 overflows within 31 steps
    result = 1
    for _ in range(exponent):
        try:
            result = multiply(result, base)
        except OverflowError:
            raise OverflowError("exponentiation", base, exponent) from None
    return result


def factorial(n: int) -> int:
    """
    Compute n! by iterative checked multiplication.

    factorial(12) == 479001600 is the largest value that fits; 13! overflows.

    Raises:
        InvalidInputError: If n is negative
        OverflowError: If the product does not fit
    """
    validate_non_negative(n, "factorial requires n >= 0")

    result = 1
    for i in range(2, n + 1):
        try:
            result = multiply(result, i)
        except OverflowError:
            logger.debug("factorial(%d) overflowed at step %d", n, i)
            raise OverflowError("factorial", n) from None
    return result


def _wrap(value: int) -> int:
    """Reduce an unbounded int to two's-complement 32-bit."""
    return (value - INT_MIN) % 2**32 + INT_MIN
