"""Input validation and strict integer parsing for 32-bit operands."""

import re

from rpncalc.exceptions import InvalidInputError, OutOfRangeError, UsageError

# Limits of a 32-bit signed integer
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = len(str(INT_MAX))


def validate_int32(value: int) -> int:
    """
    Validate that a value is an integer representable in 32 bits.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int (bools are rejected too)
        OutOfRangeError: If value is outside [INT_MIN, INT_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"expected int, got {type(value).__name__}")

    if value < INT_MIN or value > INT_MAX:
        raise OutOfRangeError(value, INT_MIN, INT_MAX)

    return value


def validate_non_negative(value: int, reason: str) -> int:
    """
    Validate that a value is zero or positive.

    Raises:
        InvalidInputError: With ``reason`` as message if value is negative
    """
    validate_int32(value)

    if value < 0:
        raise InvalidInputError(value, reason)

    return value


def parse_int(token: str) -> int:
    """
    Parse a command-line token as a 32-bit signed integer.

    The whole token must be an optionally signed run of ASCII digits;
    surrounding whitespace, underscores and non-ASCII digits are rejected.

    Args:
        token: The raw argument

    Returns:
        The parsed integer

    Raises:
        UsageError: If the token is not a valid in-range integer
    """
    if not _INTEGER_RE.fullmatch(token):
        raise UsageError("invalid integer", token)

    # Longer digit runs cannot fit and may exceed int()'s digit limit
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise UsageError("invalid integer", token)

    value = -int(digits) if token.startswith("-") else int(digits)
    try:
        return validate_int32(value)
    except OutOfRangeError as e:
        raise UsageError("invalid integer", token) from e
