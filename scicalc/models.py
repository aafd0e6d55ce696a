"""Data models for the scicalc engine.

OperatorKind, FunctionKind, ErrorKind, Session, DisplayUpdate. All the typed
structures that flow through keymap → engine → display sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Shown while the calculator is switched off.
OFF_TEXT = "Calculator Off"
STORED_TEXT = "Memory stored"


class OperatorKind(str, Enum):
    """Binary operators, valued by the key that produces them."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


class FunctionKind(str, Enum):
    """Unary function keys."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    INVERSE = "inverse"
    CUBE = "cube"
    SQUARE = "square"
    X10 = "x10"
    NEGATE = "negate"
    ANS = "ans"
    STORE = "store"
    RECALL = "recall"

    @classmethod
    def parse(cls, name: str) -> FunctionKind:
        """Resolve a function name or a keypad button id.

        Raises:
            ValueError: if the name matches no function.
        """
        key = name.strip().lower()
        alias = _FUNCTION_ALIASES.get(key)
        if alias is not None:
            return alias
        return cls(key)


# Button ids printed on the keypad.
_FUNCTION_ALIASES: dict[str, FunctionKind] = {
    "x-1": FunctionKind.INVERSE,
    "x3": FunctionKind.CUBE,
    "xy": FunctionKind.SQUARE,
    "x2": FunctionKind.SQUARE,
    "(-)": FunctionKind.NEGATE,
    "sto": FunctionKind.STORE,
    "rcl": FunctionKind.RECALL,
}


class ErrorKind(str, Enum):
    """Non-fatal evaluation failures, valued by their display text."""

    DIVISION_BY_ZERO = "Division by zero"
    MATH_ERROR = "Math Error"


@dataclass
class Evaluation:
    """Outcome of a binary or unary evaluation.

    A failed evaluation still carries a value: division by zero yields 0,
    which the engine uses as the intermediate result.
    """

    value: float = 0.0
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def fail(cls, error: ErrorKind) -> Evaluation:
        return cls(value=0.0, error=error)


@dataclass
class Session:
    """Mutable state of one calculator."""

    display_text: str = OFF_TEXT
    pending_operand: Optional[float] = None
    pending_operator: Optional[OperatorKind] = None
    awaiting_new_operand: bool = False
    shift_active: bool = False
    memory: float = 0.0
    last_answer: float = 0.0
    powered: bool = False

    def reset_transient(self) -> None:
        """Return entry state to power-on defaults, keeping memory and answer."""
        self.display_text = "0"
        self.pending_operand = None
        self.pending_operator = None
        self.awaiting_new_operand = False
        self.shift_active = False


@dataclass(frozen=True)
class DisplayUpdate:
    """What the presentation layer needs to redraw the display."""

    text: str
    shift_active: bool = False
    powered: bool = True
    transient: bool = False
