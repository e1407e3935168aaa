"""Inexact operations computed through native floats.

Division, powers, trigonometry, logarithms, square roots and factorials are
not exact. Each operand crosses into ``float`` through :func:`to_float`, the
``math`` function runs, and the result crosses back through
:func:`from_float`. Those two functions are the only places where precision
is lost, and both raise ``DomainError`` instead of producing NaN or infinity.
"""

import logging
import math
from enum import Enum

from decicalc.exceptions import DivisionByZeroError, DomainError
from decicalc.number import DecimalNumber
from decicalc.validators import (
    validate_factorial_argument,
    validate_finite,
    validate_positive,
)

logger = logging.getLogger(__name__)


class AngleMode(str, Enum):
    """Unit of the argument passed to sin, cos and tan."""

    DEGREES = "deg"
    RADIANS = "rad"


def to_float(value: DecimalNumber, operation: str = "convert") -> float:
    """
    Convert a value to the nearest float.

    Raises:
        DomainError: If the value is too large to be a finite float
    """
    return validate_finite(float(str(value)), operation)


def from_float(value: float, operation: str = "convert") -> DecimalNumber:
    """
    Rebuild a DecimalNumber from a float's shortest round-trip text.

    Scientific notation such as ``1.5e-07`` is expanded by moving the
    decimal point, so the result is always a plain fixed-point value.

    Raises:
        DomainError: If value is NaN or infinite
    """
    validate_finite(value, operation)
    mantissa, _, exponent = repr(float(value)).partition("e")
    number = DecimalNumber.parse(mantissa)
    if exponent:
        number = number.shift(int(exponent))
    return number


def _to_radians(value: float, mode: AngleMode) -> float:
    return math.radians(value) if mode == AngleMode.DEGREES else value


def divide(a: DecimalNumber, b: DecimalNumber) -> DecimalNumber:
    """
    Divide a by b.

    Raises:
        DivisionByZeroError: If b is zero, or so small it converts to 0.0
        DomainError: If either operand or the quotient is not a finite float
    """
    if b.is_zero:
        raise DivisionByZeroError(str(a))

    try:
        result = to_float(a, "divide") / to_float(b, "divide")
    except ZeroDivisionError as e:
        raise DivisionByZeroError(str(a)) from e

    logger.debug("divide(%s, %s) = %r", a, b, result)
    return from_float(result, "divide")


def power(base: DecimalNumber, exponent: DecimalNumber) -> DecimalNumber:
    """
    Raise base to the power of exponent.

    Raises:
        DomainError: For 0 raised to a negative power, a negative base with
            a non-integer exponent, or a result that overflows
    """
    x = to_float(base, "power")
    y = to_float(exponent, "power")

    if x == 0 and y < 0:
        raise DomainError("power", (str(base), str(exponent)), "0 cannot be raised to negative power")

    if x < 0 and not y.is_integer():
        raise DomainError("power", (str(base), str(exponent)), "negative base with non-integer exponent")

    try:
        result = math.pow(x, y)
    except (ValueError, OverflowError) as e:
        raise DomainError("power", (str(base), str(exponent)), str(e)) from e

    return from_float(result, "power")


def sin(value: DecimalNumber, mode: AngleMode = AngleMode.DEGREES) -> DecimalNumber:
    return from_float(math.sin(_to_radians(to_float(value, "sin"), mode)), "sin")


def cos(value: DecimalNumber, mode: AngleMode = AngleMode.DEGREES) -> DecimalNumber:
    return from_float(math.cos(_to_radians(to_float(value, "cos"), mode)), "cos")


def tan(value: DecimalNumber, mode: AngleMode = AngleMode.DEGREES) -> DecimalNumber:
    return from_float(math.tan(_to_radians(to_float(value, "tan"), mode)), "tan")


def ln(value: DecimalNumber) -> DecimalNumber:
    """
    Natural logarithm.

    Raises:
        DomainError: If value is not positive
    """
    x = validate_positive(to_float(value, "ln"), "ln")
    return from_float(math.log(x), "ln")


def log10(value: DecimalNumber) -> DecimalNumber:
    """
    Base-10 logarithm.

    Raises:
        DomainError: If value is not positive
    """
    x = validate_positive(to_float(value, "log"), "log")
    return from_float(math.log10(x), "log")


def sqrt(value: DecimalNumber) -> DecimalNumber:
    """
    Square root.

    Raises:
        DomainError: If value is negative
    """
    x = validate_positive(to_float(value, "sqrt"), "sqrt", allow_zero=True)
    return from_float(math.sqrt(x), "sqrt")


def factorial(value: DecimalNumber) -> DecimalNumber:
    """
    Factorial of an integer in [0, 170], rounded to the nearest float.

    Raises:
        FactorialRangeError: If value is fractional or out of range
    """
    n = validate_factorial_argument(value)
    return from_float(float(math.factorial(n)), "factorial")
