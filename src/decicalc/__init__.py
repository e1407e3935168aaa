"""
Exact decimal arithmetic and a keypad calculator controller.

This package provides:
- DecimalNumber, an immutable arbitrary-precision fixed-point value with
  exact addition, subtraction and multiplication
- A floating-point fallback for division, powers, roots, logarithms,
  trigonometry and factorials, with typed domain errors
- CalculatorController, a state machine that turns key presses into a
  running expression, committed results and a bounded history
"""

from decicalc.config import CalculatorConfig, configure_logging
from decicalc.controller import CalculatorController, ControllerState, Key, Operation
from decicalc.exceptions import (
    CalculatorError,
    ConfigError,
    DivisionByZeroError,
    DomainError,
    FactorialRangeError,
    InvalidEventError,
    ParseError,
)
from decicalc.fallback import (
    AngleMode,
    cos,
    divide,
    factorial,
    from_float,
    ln,
    log10,
    power,
    sin,
    sqrt,
    tan,
    to_float,
)
from decicalc.history import HistoryLog
from decicalc.number import ZERO, DecimalNumber
from decicalc.operations import (
    add,
    format_number,
    multiply,
    parse,
    percent,
    subtract,
)

__all__ = [
    "ZERO",
    "AngleMode",
    "CalculatorConfig",
    "CalculatorController",
    "CalculatorError",
    "ConfigError",
    "ControllerState",
    "DecimalNumber",
    "DivisionByZeroError",
    "DomainError",
    "FactorialRangeError",
    "HistoryLog",
    "InvalidEventError",
    "Key",
    "Operation",
    "ParseError",
    "add",
    "configure_logging",
    "cos",
    "divide",
    "factorial",
    "format_number",
    "from_float",
    "ln",
    "log10",
    "multiply",
    "parse",
    "percent",
    "power",
    "sin",
    "sqrt",
    "subtract",
    "tan",
    "to_float",
]

__version__ = "0.1.0"
