"""Calculator engine: the keystroke-driven evaluation state machine.

Data flow per input event:
1. Power on instead of acting if the calculator is off
2. Settle any transient message still on screen (restore what it covered)
3. Mutate the Session (operand text, pending operation, registers)
4. Format results through scicalc.formatter
5. Push a DisplayUpdate to the sink

Errors never escape as exceptions: they flash a message on the display and
schedule a revert on the DeferredQueue. A revert only applies if nothing has
written to the display since it was scheduled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from scicalc.config import Settings
from scicalc.formatter import format_number, parse_number
from scicalc.functions import evaluate_binary, evaluate_unary
from scicalc.models import (
    OFF_TEXT,
    STORED_TEXT,
    DisplayUpdate,
    ErrorKind,
    FunctionKind,
    OperatorKind,
    Session,
)
from scicalc.timers import DeferredQueue

logger = logging.getLogger(__name__)

DisplaySink = Callable[[DisplayUpdate], None]

# Errors always revert to an empty operand.
_ERROR_RESTORE_TEXT = "0"

# Literal characters accepted as operand text.
SYMBOLS = ("(", ")")


@dataclass
class _Transient:
    """A message on the display and what it covers."""

    message: str
    restore: str
    generation: int


class CalculatorEngine:
    """One calculator session.

    Starts switched off; any key except power-off switches it on.

    Args:
        sink: Called with a DisplayUpdate after every operation.
        scheduler: Queue for message reverts. The owner must call
            run_pending() (or the queue's run_due()) between inputs.
        settings: Revert delays.
    """

    def __init__(
        self,
        sink: Optional[DisplaySink] = None,
        scheduler: Optional[DeferredQueue] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.session = Session()
        self.scheduler = scheduler if scheduler is not None else DeferredQueue()
        self.settings = settings if settings is not None else Settings()
        self._sink = sink
        self._generation = 0
        self._transient: Optional[_Transient] = None
        self._publish()

    # --- Read-only views ---

    @property
    def display_text(self) -> str:
        return self.session.display_text

    @property
    def shift_active(self) -> bool:
        return self.session.shift_active

    @property
    def powered(self) -> bool:
        return self.session.powered

    @property
    def memory(self) -> float:
        return self.session.memory

    @property
    def last_answer(self) -> float:
        return self.session.last_answer

    def snapshot(self) -> DisplayUpdate:
        """The current display state, as sent to the sink."""
        s = self.session
        return DisplayUpdate(
            text=s.display_text,
            shift_active=s.shift_active,
            powered=s.powered,
            transient=self._transient is not None,
        )

    def run_pending(self) -> int:
        """Apply any reverts that have come due."""
        return self.scheduler.run_due()

    # --- Operand entry ---

    def input_digit(self, digit: str) -> None:
        if not (len(digit) == 1 and digit.isdigit()):
            raise ValueError(f"not a digit: {digit!r}")
        self._enter(digit)

    def input_symbol(self, symbol: str) -> None:
        """Enter a parenthesis as literal text; it is never evaluated."""
        if symbol not in SYMBOLS:
            raise ValueError(f"not a symbol key: {symbol!r}")
        self._enter(symbol)

    def input_decimal(self) -> None:
        if self._wake():
            return
        self._settle()
        s = self.session
        if s.awaiting_new_operand:
            s.awaiting_new_operand = False
            self._set_display("0.")
        elif "." not in s.display_text:
            self._set_display(s.display_text + ".")
        self._publish()

    def _enter(self, token: str) -> None:
        if self._wake():
            return
        self._settle()
        s = self.session
        if s.awaiting_new_operand:
            s.awaiting_new_operand = False
            text = token
        elif s.display_text == "0":
            text = token
        else:
            text = s.display_text + token
        self._set_display(text)
        self._publish()

    # --- Binary operations ---

    def apply_operator(self, op: Union[OperatorKind, str]) -> None:
        """Press a binary operator key.

        With an operation already pending, it is evaluated first and its
        result becomes the new left operand, so chains run left to right.

        Overflow is not flashed: an infinite result is kept as the operand
        and last answer and stays on the display as "Error" until the next
        entry replaces it. Only division by zero reverts on its own.
        """
        op = OperatorKind(op)
        if self._wake():
            return
        self._settle()
        s = self.session
        value = parse_number(s.display_text)
        error: Optional[ErrorKind] = None

        if s.pending_operand is None:
            s.pending_operand = value
        elif s.pending_operator is not None:
            result = evaluate_binary(s.pending_operand, value, s.pending_operator)
            logger.debug("%s %s %s -> %s", s.pending_operand, s.pending_operator.value, value, result)
            # A failed evaluation still yields 0 as the running total
            s.pending_operand = result.value
            if result.ok:
                s.last_answer = result.value
                self._set_display(format_number(result.value))
            else:
                error = result.error

        s.awaiting_new_operand = True
        s.pending_operator = op
        self._finish(error)

    def equals(self) -> None:
        """Complete the pending operation, if there is one."""
        if self._wake():
            return
        self._settle()
        s = self.session
        if s.pending_operand is None or s.pending_operator is None:
            self._publish()
            return

        value = parse_number(s.display_text)
        result = evaluate_binary(s.pending_operand, value, s.pending_operator)
        logger.debug("%s %s %s = %s", s.pending_operand, s.pending_operator.value, value, result)
        s.pending_operand = None
        s.pending_operator = None
        s.awaiting_new_operand = True
        if result.ok:
            s.last_answer = result.value
            self._set_display(format_number(result.value))
        self._finish(result.error)

    # --- Unary functions ---

    def apply_function(self, fn: Union[FunctionKind, str]) -> None:
        """Press a function key; shift mode selects the inverse meaning."""
        if not isinstance(fn, FunctionKind):
            fn = FunctionKind.parse(fn)
        if self._wake():
            return
        self._settle()
        s = self.session
        x = parse_number(s.display_text)

        if fn == FunctionKind.STORE:
            s.memory = x
            logger.debug("memory <- %s", x)
            self._flash(STORED_TEXT, restore=s.display_text, delay_s=self.settings.message_revert_s)
            return

        result = evaluate_unary(
            fn, x, shifted=s.shift_active, last_answer=s.last_answer, memory=s.memory,
        )
        logger.debug("%s%s(%s) -> %s", "shift-" if s.shift_active else "", fn.value, x, result)
        if result.ok:
            s.last_answer = result.value
            s.awaiting_new_operand = True
            self._set_display(format_number(result.value))
        self._finish(result.error)

    # --- Mode and clearing ---

    def toggle_shift(self) -> None:
        if self._wake():
            return
        self.session.shift_active = not self.session.shift_active
        self._publish()

    def clear_entry(self) -> None:
        """Clear the operand being typed; the pending operation survives."""
        if self._wake():
            return
        self._set_display("0")
        self._publish()

    def all_clear(self) -> None:
        """Reset entry state; memory and the last answer survive."""
        if self._wake():
            return
        self.session.reset_transient()
        self._set_display("0")
        self._publish()

    def power_on(self) -> None:
        self.session.reset_transient()
        self.session.powered = True
        self._set_display("0")
        logger.debug("power on")
        self._publish()

    def power_off(self) -> None:
        self.session.powered = False
        self._set_display(OFF_TEXT)
        logger.debug("power off")
        self._publish()

    # --- Internals ---

    def _wake(self) -> bool:
        """Power on if off. True means the key press was consumed by it."""
        if self.session.powered:
            return False
        self.power_on()
        return True

    def _set_display(self, text: str) -> None:
        self.session.display_text = text
        self._generation += 1
        self._transient = None

    def _settle(self) -> None:
        """Put back whatever a transient message is covering."""
        if self._transient is not None:
            self._set_display(self._transient.restore)

    def _finish(self, error: Optional[ErrorKind]) -> None:
        if error is None:
            self._publish()
            return
        logger.info("%s (display %r)", error.value, self.session.display_text)
        self._flash(error.value, restore=_ERROR_RESTORE_TEXT, delay_s=self.settings.error_revert_s)

    def _flash(self, message: str, restore: str, delay_s: float) -> None:
        self._set_display(message)
        transient = _Transient(message=message, restore=restore, generation=self._generation)
        self._transient = transient
        self.scheduler.call_later(delay_s, lambda: self._revert(transient))
        self._publish()

    def _revert(self, transient: _Transient) -> None:
        # Stale if anything has written to the display since the flash
        if (
            transient is not self._transient
            or transient.generation != self._generation
            or self.session.display_text != transient.message
        ):
            logger.debug("skipping stale revert of %r", transient.message)
            return
        self._set_display(transient.restore)
        self._publish()

    def _publish(self) -> None:
        if self._sink is not None:
            self._sink(self.snapshot())
