"""Translation from physical keys and keypad buttons to engine calls.

KEY_BINDINGS is the keyboard table. Keyboard input is ignored while the
calculator is off; only a button press (press()) can switch it on.
"""

from __future__ import annotations

from typing import Callable

from scicalc.engine import CalculatorEngine
from scicalc.models import FunctionKind, OperatorKind

Action = Callable[[CalculatorEngine], None]


def _digit(d: str) -> Action:
    return lambda engine: engine.input_digit(d)


def _operator(op: OperatorKind) -> Action:
    return lambda engine: engine.apply_operator(op)


def _symbol(ch: str) -> Action:
    return lambda engine: engine.input_symbol(ch)


KEY_BINDINGS: dict[str, Action] = {
    **{d: _digit(d) for d in "0123456789"},
    ".": CalculatorEngine.input_decimal,
    **{op.value: _operator(op) for op in OperatorKind},
    "Enter": CalculatorEngine.equals,
    "=": CalculatorEngine.equals,
    "Escape": CalculatorEngine.all_clear,
    "Backspace": CalculatorEngine.clear_entry,
    "(": _symbol("("),
    ")": _symbol(")"),
}

# Keypad buttons that have no keyboard key.
CONTROL_BUTTONS: dict[str, Action] = {
    "shift": CalculatorEngine.toggle_shift,
    "ac": CalculatorEngine.all_clear,
    "ce": CalculatorEngine.clear_entry,
    "on": CalculatorEngine.power_on,
    "off": CalculatorEngine.power_off,
}


def handle_key(engine: CalculatorEngine, key: str) -> bool:
    """Dispatch a keyboard key.

    Returns:
        True if the key is bound and the calculator is on, False otherwise.
    """
    if not engine.powered:
        return False
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    action(engine)
    return True


def press(engine: CalculatorEngine, button: str) -> None:
    """Press a keypad button by name.

    Accepts keyboard keys ("7", "+", "Enter"), control buttons ("shift",
    "ac", "ce", "on", "off") and function names or keypad ids ("sin", "x-1",
    "sto"). Unlike handle_key, any button switches the calculator on.

    Raises:
        ValueError: if the name is not a known button.
    """
    action = KEY_BINDINGS.get(button)
    if action is None:
        action = CONTROL_BUTTONS.get(button.lower())
    if action is None:
        fn = FunctionKind.parse(button)
        action = lambda e: e.apply_function(fn)  # noqa: E731
    action(engine)


_SPLITTABLE = set("0123456789.()")


def tokenize(line: str) -> list[str]:
    """Split a line of typed input into button names.

    Words are separated by whitespace; a word made only of digits, points and
    parentheses ("12.5", "(3)") is split into single keys.
    """
    tokens: list[str] = []
    for word in line.split():
        if word not in KEY_BINDINGS and set(word) <= _SPLITTABLE:
            tokens.extend(word)
        else:
            tokens.append(word)
    return tokens
