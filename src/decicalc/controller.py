"""Keypad-driven calculator controller."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from decicalc import fallback, operations
from decicalc.config import CalculatorConfig, parse_angle_mode
from decicalc.exceptions import CalculatorError, InvalidEventError
from decicalc.fallback import AngleMode
from decicalc.history import HistoryLog
from decicalc.number import ZERO, DecimalNumber
from decicalc.operations import format_number, parse
from decicalc.validators import DIGITS

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Operator keys. The value is the symbol shown on the display."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"
    SQRT = "√"
    PERCENT = "%"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LN = "ln"
    LOG = "log"
    FACTORIAL = "!"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_binary(self) -> bool:
        return self in _BINARY_OPERATIONS


class Key(Enum):
    """Control keys."""

    EQUALS = "="
    CLEAR = "C"
    DELETE = "⌫"
    NEGATE = "±"


Event = str | Operation | Key

# Exact: add, subtract, multiply. Inexact through floats: divide, power.
_BINARY_OPERATIONS: dict[Operation, Callable[[DecimalNumber, DecimalNumber], DecimalNumber]] = {
    Operation.ADD: operations.add,
    Operation.SUBTRACT: operations.subtract,
    Operation.MULTIPLY: operations.multiply,
    Operation.DIVIDE: fallback.divide,
    Operation.POWER: fallback.power,
}

# Percent is exact; everything else crosses the float boundary.
_UNARY_OPERATIONS: dict[Operation, Callable[[DecimalNumber], DecimalNumber]] = {
    Operation.SQRT: fallback.sqrt,
    Operation.PERCENT: operations.percent,
    Operation.LN: fallback.ln,
    Operation.LOG: fallback.log10,
    Operation.FACTORIAL: fallback.factorial,
}

_TRIG_OPERATIONS: dict[Operation, Callable[[DecimalNumber, AngleMode], DecimalNumber]] = {
    Operation.SIN: fallback.sin,
    Operation.COS: fallback.cos,
    Operation.TAN: fallback.tan,
}

_POSTFIX_OPERATIONS = frozenset({Operation.FACTORIAL, Operation.PERCENT})

_ALIASES: dict[str, Event] = {
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "**": Operation.POWER,
    "sqrt": Operation.SQRT,
    "c": Key.CLEAR,
    "ac": Key.CLEAR,
    "del": Key.DELETE,
    "backspace": Key.DELETE,
    "+/-": Key.NEGATE,
    "neg": Key.NEGATE,
}


def resolve_event(event: object) -> Event:
    """
    Map raw input to a digit string, an Operation or a Key.

    Raises:
        InvalidEventError: If the event is not recognised
    """
    if isinstance(event, (Operation, Key)):
        return event
    if not isinstance(event, str):
        raise InvalidEventError(event)

    text = event.strip()
    if text in DIGITS or text == ".":
        return text

    for enum_type in (Operation, Key):
        try:
            return enum_type(text)
        except ValueError:
            pass

    try:
        return _ALIASES[text.lower()]
    except KeyError:
        raise InvalidEventError(event) from None


@dataclass(frozen=True)
class ControllerState:
    """Immutable snapshot of the controller's input state."""

    current_operand: str
    pending_operand: str
    pending_operation: Operation | None
    reset_on_next_digit: bool

    def __str__(self) -> str:
        op = self.pending_operation.symbol if self.pending_operation else "-"
        return (
            f"current={self.current_operand!r} pending={self.pending_operand!r} "
            f"op={op} reset={self.reset_on_next_digit}"
        )


class CalculatorController:
    """
    Turns keypad events into a running expression and committed results.

    A binary operator captures the typed operand as the left-hand side;
    pressing another binary operator first commits the pending one, so
    ``3 + 4 ×`` evaluates ``3 + 4`` before waiting for the multiplier.
    Unary operators act on the operand being typed immediately.

    Failed computations never raise out of the controller: the display
    shows the configured error text and the pending state is cleared.

    Example:
        >>> calc = CalculatorController()
        >>> for key in ["1", "2", "+", "3", "="]:
        ...     calc.handle_event(key)
        >>> calc.current_display()
        '15'
        >>> calc.history()[0]
        '12 + 3 = 15'
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config if config is not None else CalculatorConfig()
        self._history = HistoryLog(self._config.history_capacity)
        self._angle_mode = self._config.angle_mode
        self._reset()

    def _reset(self) -> None:
        self._current_operand = ""
        self._pending_operand = ""
        self._pending_operation: Operation | None = None
        self._reset_on_next_digit = False
        self._error = False

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def angle_mode(self) -> AngleMode:
        return self._angle_mode

    @angle_mode.setter
    def angle_mode(self, mode: AngleMode | str) -> None:
        self._angle_mode = parse_angle_mode(mode)

    @property
    def current_operand(self) -> str:
        return self._current_operand

    @property
    def pending_operand(self) -> str:
        return self._pending_operand

    @property
    def pending_operation(self) -> Operation | None:
        return self._pending_operation

    @property
    def reset_on_next_digit(self) -> bool:
        return self._reset_on_next_digit

    @property
    def has_pending_operation(self) -> bool:
        return self._pending_operation is not None

    @property
    def has_error(self) -> bool:
        """True while the error text is being displayed."""
        return self._error

    @property
    def state(self) -> ControllerState:
        return ControllerState(
            current_operand=self._current_operand,
            pending_operand=self._pending_operand,
            pending_operation=self._pending_operation,
            reset_on_next_digit=self._reset_on_next_digit,
        )

    @property
    def history_log(self) -> HistoryLog:
        return self._history

    def history(self) -> tuple[str, ...]:
        """Completed computations, newest first."""
        return self._history.entries

    def current_display(self) -> str:
        if self._error:
            return self._config.error_text
        if self._pending_operation is not None:
            return f"{self._pending_operand} {self._pending_operation.symbol} {self._current_operand}"
        return self._current_operand or "0"

    @property
    def display(self) -> str:
        return self.current_display()

    def handle_event(self, event: Event) -> None:
        """
        Process one keypad event.

        Raises:
            InvalidEventError: If the event is not recognised
        """
        resolved = resolve_event(event)

        if isinstance(resolved, Operation):
            self.input_operation(resolved)
        elif resolved is Key.EQUALS:
            self.calculate()
        elif resolved is Key.CLEAR:
            self.clear()
        elif resolved is Key.DELETE:
            self.delete()
        elif resolved is Key.NEGATE:
            self.negate()
        else:
            self.input_digit(resolved)

    def can_start_negative(self) -> bool:
        """True when ``-`` should begin a negative number rather than subtract."""
        return self._pending_operation is None and self._current_operand in ("", "0")

    def _has_operand(self) -> bool:
        return self._current_operand not in ("", "-")

    def input_digit(self, char: str) -> None:
        """Append a digit or decimal point to the operand being typed."""
        if char not in DIGITS and char != ".":
            raise InvalidEventError(char)

        if self._reset_on_next_digit:
            self._current_operand = ""
            self._reset_on_next_digit = False
        self._error = False

        current = self._current_operand
        if char == ".":
            if "." in current:
                return
            if current in ("", "-"):
                current += "0"
            self._current_operand = current + char
        elif current == "0":
            self._current_operand = char
        elif current == "-0":
            self._current_operand = "-" + char
        else:
            self._current_operand = current + char

    def input_operation(self, operation: Operation) -> None:
        """Press an operator key."""
        if not operation.is_binary:
            self._apply_unary(operation)
            return

        if operation is Operation.SUBTRACT and self.can_start_negative():
            self.negate()
            return

        if self._has_operand():
            if self._pending_operation is not None and not self._commit():
                return
            self._pending_operand = self._current_operand
            self._current_operand = ""
            self._pending_operation = operation
        elif self._pending_operation is not None:
            self._pending_operation = operation
        else:
            logger.debug("Ignoring %s with no operand", operation.symbol)
            return

        self._reset_on_next_digit = False

    def calculate(self) -> None:
        """Commit the pending operation, if any."""
        if not self._pending_operand:
            return
        self._commit()

    def clear(self) -> None:
        self._reset()

    def delete(self) -> None:
        """Remove the last typed character. Does nothing right after a commit."""
        if self._reset_on_next_digit or not self._current_operand:
            return

        self._current_operand = self._current_operand[:-1]
        if self._current_operand in ("", "-"):
            self._current_operand = "0"

    def negate(self) -> None:
        """
        Toggle the sign of the operand being typed.

        An empty or zero operand becomes the bare ``-`` placeholder, which
        the next digit extends even right after a commit or an error.
        """
        current = self._current_operand
        if current in ("", "0"):
            self._current_operand = "-"
            self._reset_on_next_digit = False
        elif current == "-":
            self._current_operand = "0"
        elif current.startswith("-"):
            self._current_operand = current[1:]
        else:
            self._current_operand = "-" + current
        self._error = False

    def _evaluate(self, operation: Operation, left: DecimalNumber, right: DecimalNumber) -> DecimalNumber:
        if operation in _BINARY_OPERATIONS:
            return _BINARY_OPERATIONS[operation](left, right)
        if operation in _TRIG_OPERATIONS:
            return _TRIG_OPERATIONS[operation](left, self._angle_mode)
        return _UNARY_OPERATIONS[operation](left)

    def _commit(self) -> bool:
        """Resolve the pending binary operation. Returns False on failure."""
        operation = self._pending_operation
        left_text = self._pending_operand
        right_text = self._current_operand if self._has_operand() else "0"

        try:
            right = parse(right_text) if self._has_operand() else ZERO
            result = self._evaluate(operation, parse(left_text), right)
        except CalculatorError as e:
            self._fail(e)
            return False

        result_text = format_number(result)
        entry = f"{left_text} {operation.symbol} {right_text} = {result_text}"
        self._history.record(entry)
        logger.debug("Committed %s", entry)

        self._current_operand = result_text
        self._pending_operand = ""
        self._pending_operation = None
        self._reset_on_next_digit = True
        return True

    def _apply_unary(self, operation: Operation) -> None:
        operand_text = self._current_operand if self._has_operand() else "0"

        try:
            result = self._evaluate(operation, parse(operand_text), ZERO)
        except CalculatorError as e:
            self._fail(e)
            return

        result_text = format_number(result)
        if operation in _POSTFIX_OPERATIONS:
            entry = f"{operand_text}{operation.symbol} = {result_text}"
        else:
            entry = f"{operation.symbol}({operand_text}) = {result_text}"
        self._history.record(entry)
        logger.debug("Committed %s", entry)

        self._current_operand = result_text
        self._reset_on_next_digit = True
        self._error = False

    def _fail(self, error: CalculatorError) -> None:
        logger.warning("Computation failed: %s", error)
        self._current_operand = ""
        self._pending_operand = ""
        self._pending_operation = None
        self._reset_on_next_digit = True
        self._error = True

    def __repr__(self) -> str:
        return f"CalculatorController({self.state}, history_len={len(self._history)})"
