"""Exact arithmetic operations on DecimalNumber values.

Everything in this module is exact and total: no rounding happens and no
well-formed input raises. Inexact operations live in ``decicalc.fallback``.
"""

from decicalc.number import DecimalNumber

ONE_HUNDREDTH = DecimalNumber((1,), False, 2)


def parse(text: str) -> DecimalNumber:
    """
    Parse a decimal literal.

    Args:
        text: Text such as ``"12"``, ``"-0.5"`` or ``" 3.14 "``

    Returns:
        The parsed value

    Raises:
        ParseError: If text is not an optionally signed decimal literal
    """
    return DecimalNumber.parse(text)


def format_number(value: DecimalNumber) -> str:
    """
    Render a value in canonical form.

    Trailing fractional zeros and a bare decimal point are dropped and
    zero always renders as ``"0"``.
    """
    return str(value)


def add(a: DecimalNumber, b: DecimalNumber) -> DecimalNumber:
    """
    Add two numbers exactly.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, 0) == a
    """
    return a.add(b)


def subtract(a: DecimalNumber, b: DecimalNumber) -> DecimalNumber:
    """
    Subtract b from a exactly.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return a.subtract(b)


def multiply(a: DecimalNumber, b: DecimalNumber) -> DecimalNumber:
    """
    Multiply two numbers exactly.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Associative: multiply(multiply(a, b), c) == multiply(a, multiply(b, c))
        - Scale: multiply(a, b).scale == a.scale + b.scale
    """
    return a.multiply(b)


def percent(a: DecimalNumber) -> DecimalNumber:
    """Exact ``a / 100``, computed as ``a * 0.01``."""
    return a.multiply(ONE_HUNDREDTH)
