"""Custom exceptions for the decicalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class ParseError(CalculatorError):
    """Raised when text is not a well-formed decimal number."""

    def __init__(self, text: Any, reason: str = "malformed number") -> None:
        super().__init__(reason, text)
        self.text = text
        self.reason = reason


class DomainError(CalculatorError):
    """Raised when an inexact operation has no defined result for its input."""

    def __init__(self, operation: str, value: Any = None, reason: str = "") -> None:
        message = f"{operation}: {reason}" if reason else operation
        super().__init__(message, value)
        self.operation = operation
        self.reason = reason


class DivisionByZeroError(DomainError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: Any) -> None:
        super().__init__("divide", numerator, "division by zero")
        self.numerator = numerator


class FactorialRangeError(DomainError):
    """Raised when a factorial argument is not an integer in range."""

    def __init__(self, value: Any, min_val: int = 0, max_val: int = 170) -> None:
        super().__init__(
            "factorial", value, f"argument must be an integer in [{min_val}, {max_val}]"
        )
        self.min_val = min_val
        self.max_val = max_val


class InvalidEventError(CalculatorError):
    """Raised when the controller receives an input it does not understand."""

    def __init__(self, event: Any) -> None:
        super().__init__("Unknown input event", event)
        self.event = event


class ConfigError(CalculatorError):
    """Raised when a configuration value is invalid."""
