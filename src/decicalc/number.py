"""Arbitrary-precision signed fixed-point decimal numbers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from decicalc.validators import validate_numeric_text


def _strip(digits: list[int]) -> list[int]:
    """Drop most-significant zeros in place, keeping at least one digit."""
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _align(a: DecimalNumber, b: DecimalNumber) -> tuple[list[int], list[int], int]:
    """Pad the low end of the operand with fewer fractional digits."""
    scale = max(a.scale, b.scale)
    left = [0] * (scale - a.scale) + list(a.digits)
    right = [0] * (scale - b.scale) + list(b.digits)
    return left, right, scale


def _compare_digits(left: list[int], right: list[int]) -> int:
    """Compare two stripped LSD-first digit lists by magnitude."""
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    for i in range(len(left) - 1, -1, -1):
        if left[i] != right[i]:
            return -1 if left[i] < right[i] else 1

    return 0


def _add_digits(left: list[int], right: list[int]) -> list[int]:
    result = []
    carry = 0

    for i in range(max(len(left), len(right))):
        a = left[i] if i < len(left) else 0
        b = right[i] if i < len(right) else 0
        total = a + b + carry
        result.append(total % 10)
        carry = total // 10

    if carry:
        result.append(carry)

    return result


def _subtract_digits(larger: list[int], smaller: list[int]) -> list[int]:
    """Schoolbook subtraction; ``larger`` must not be smaller in magnitude."""
    result = []
    borrow = 0

    for i, a in enumerate(larger):
        b = smaller[i] if i < len(smaller) else 0
        diff = a - b - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return _strip(result)


@total_ordering
@dataclass(frozen=True, eq=False)
class DecimalNumber:
    """
    An exact signed decimal value with an implied decimal point.

    ``digits`` holds the unscaled magnitude least-significant first and
    ``scale`` counts how many of those digits sit after the decimal point.
    Instances are normalised on construction: most-significant zeros are
    stripped and zero is never negative.

    Addition, subtraction and multiplication are exact and never fail.
    Comparison and hashing follow the numeric value, so ``1.50 == 1.5``.

    Example:
        >>> a = DecimalNumber.parse("1.23")
        >>> str(a * DecimalNumber.parse("4.5"))
        '5.535'
        >>> (a * DecimalNumber.parse("4.5")).scale
        3
    """

    digits: tuple[int, ...]
    is_negative: bool = False
    scale: int = 0

    def __post_init__(self) -> None:
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")

        digits = _strip(list(self.digits)) or [0]
        for digit in digits:
            if not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValueError(f"digits must be integers in [0, 9], got {digit!r}")

        object.__setattr__(self, "digits", tuple(digits))
        if digits == [0]:
            object.__setattr__(self, "is_negative", False)

    @classmethod
    def parse(cls, text: str) -> DecimalNumber:
        """
        Parse a decimal literal such as ``"-12.50"``.

        Raises:
            ParseError: If text is not an optionally signed decimal literal
        """
        is_negative, integer_part, fractional_part = validate_numeric_text(text)
        digits = tuple(int(char) for char in reversed(integer_part + fractional_part))
        return cls(digits, is_negative, len(fractional_part))

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_integer(self) -> bool:
        """True when every fractional digit is zero."""
        return not any(self.digits[: self.scale])

    def negate(self) -> DecimalNumber:
        return DecimalNumber(self.digits, not self.is_negative, self.scale)

    def shift(self, places: int) -> DecimalNumber:
        """Multiply by ``10 ** places`` by moving the decimal point."""
        new_scale = self.scale - places
        if new_scale >= 0:
            return DecimalNumber(self.digits, self.is_negative, new_scale)
        return DecimalNumber((0,) * -new_scale + self.digits, self.is_negative, 0)

    def compare_magnitude(self, other: DecimalNumber) -> int:
        """Compare absolute values, returning -1, 0 or 1."""
        left, right, _ = _align(self, other)
        return _compare_digits(_strip(left), _strip(right))

    def compare(self, other: DecimalNumber) -> int:
        """Compare values, returning -1, 0 or 1."""
        if self.is_negative != other.is_negative:
            return -1 if self.is_negative else 1

        magnitude = self.compare_magnitude(other)
        return -magnitude if self.is_negative else magnitude

    def add(self, other: DecimalNumber) -> DecimalNumber:
        """
        Exact sum.

        Properties:
            - Commutative: a.add(b) == b.add(a)
            - Scale: a.add(b).scale == max(a.scale, b.scale)
        """
        return self._combine(other, other.is_negative)

    def subtract(self, other: DecimalNumber) -> DecimalNumber:
        """
        Exact difference, equivalent to ``self.add(other.negate())``.

        Properties:
            - Self-inverse: a.subtract(a) is zero
            - Scale: a.subtract(b).scale == max(a.scale, b.scale)
        """
        return self._combine(other, not other.is_negative)

    def _combine(self, other: DecimalNumber, other_negative: bool) -> DecimalNumber:
        """Add ``other`` to self, treating other as carrying ``other_negative``."""
        left, right, scale = _align(self, other)

        if self.is_negative == other_negative:
            return DecimalNumber(tuple(_add_digits(left, right)), self.is_negative, scale)

        # Subtract the smaller magnitude from the larger one
        left, right = _strip(left), _strip(right)
        negative = self.is_negative
        if _compare_digits(left, right) < 0:
            left, right = right, left
            negative = other_negative

        return DecimalNumber(tuple(_subtract_digits(left, right)), negative, scale)

    def multiply(self, other: DecimalNumber) -> DecimalNumber:
        """
        Exact product by long multiplication.

        Properties:
            - Commutative and associative
            - Scale: a.multiply(b).scale == a.scale + b.scale
        """
        result = [0] * (len(self.digits) + len(other.digits))

        for i, a in enumerate(self.digits):
            carry = 0
            for j, b in enumerate(other.digits):
                total = a * b + result[i + j] + carry
                result[i + j] = total % 10
                carry = total // 10
            result[i + len(other.digits)] += carry

        return DecimalNumber(
            tuple(result),
            self.is_negative != other.is_negative,
            self.scale + other.scale,
        )

    def _normalized(self) -> tuple[tuple[int, ...], bool, int]:
        """Value key with redundant fractional zeros removed."""
        digits = self.digits
        scale = self.scale
        while scale > 0 and digits[0] == 0:
            digits = digits[1:] or (0,)
            scale -= 1
        return digits, self.is_negative, scale

    def __add__(self, other: object) -> DecimalNumber:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> DecimalNumber:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> DecimalNumber:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> DecimalNumber:
        return self.negate()

    def __abs__(self) -> DecimalNumber:
        return DecimalNumber(self.digits, False, self.scale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._normalized())

    def __str__(self) -> str:
        text = "".join(str(digit) for digit in reversed(self.digits))

        if self.scale > 0:
            text = text.rjust(self.scale + 1, "0")
            text = f"{text[:-self.scale]}.{text[-self.scale:]}"
            text = text.rstrip("0").rstrip(".")

        if self.is_negative and not self.is_zero:
            return f"-{text}"
        return text

    def __repr__(self) -> str:
        return f"DecimalNumber({str(self)!r}, scale={self.scale})"


ZERO = DecimalNumber((0,))
