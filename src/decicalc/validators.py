"""Input validation shared by parsing and the floating-point fallback."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

from decicalc.exceptions import DomainError, FactorialRangeError, ParseError

if TYPE_CHECKING:
    from decicalc.number import DecimalNumber

T = TypeVar("T", int, float)

DIGITS = frozenset("0123456789")

# Largest n for which n! still fits in an IEEE 754 double
MAX_FACTORIAL = 170


def validate_numeric_text(text: str) -> tuple[bool, str, str]:
    """
    Validate a decimal literal and split it into its parts.

    Surrounding whitespace is ignored. An optional leading ``-`` is
    followed by digits with at most one ``.`` among them.

    Args:
        text: The text to validate

    Returns:
        Tuple of (is_negative, integer_part, fractional_part)

    Raises:
        ParseError: If text is not a string, has no digits, or contains
            anything besides one sign, digits and one decimal point
    """
    if not isinstance(text, str):
        raise ParseError(text, f"Expected str, got {type(text).__name__}")

    cleaned = text.strip()
    is_negative = cleaned.startswith("-")
    if is_negative:
        cleaned = cleaned[1:]

    integer_part, _, fractional_part = cleaned.partition(".")

    if not integer_part and not fractional_part:
        raise ParseError(text, "No digits")

    for char in integer_part + fractional_part:
        if char not in DIGITS:
            raise ParseError(text, f"Unexpected character {char!r}")

    return is_negative, integer_part, fractional_part


def validate_finite(value: float, operation: str) -> float:
    """
    Validate that a float produced at the fallback boundary is finite.

    Raises:
        DomainError: If value is NaN or infinite
    """
    if math.isnan(value):
        raise DomainError(operation, value, "result is not a number")
    if math.isinf(value):
        raise DomainError(operation, value, "result is not finite")
    return value


def validate_positive(value: T, operation: str, allow_zero: bool = False) -> T:
    """
    Validate that a value is positive.

    Args:
        value: The value to validate
        operation: Name of the operation, used in the error
        allow_zero: Whether zero is considered valid

    Returns:
        The validated value

    Raises:
        DomainError: If value is not positive
    """
    if allow_zero:
        if value < 0:
            raise DomainError(operation, value, "argument must be non-negative")
    elif value <= 0:
        raise DomainError(operation, value, "argument must be positive")

    return value


def validate_factorial_argument(value: DecimalNumber) -> int:
    """
    Validate a factorial argument.

    Out-of-range values are rejected before any conversion to int, so an
    argument with thousands of digits fails like any other bad argument.

    Args:
        value: The argument to validate

    Returns:
        The argument as an int

    Raises:
        FactorialRangeError: If value is fractional or outside [0, MAX_FACTORIAL]
    """
    text = str(value)
    if not value.is_integer or value.is_negative:
        raise FactorialRangeError(text, 0, MAX_FACTORIAL)

    whole = text.partition(".")[0]
    if len(whole) > len(str(MAX_FACTORIAL)) or int(whole) > MAX_FACTORIAL:
        raise FactorialRangeError(text, 0, MAX_FACTORIAL)

    return int(whole)
