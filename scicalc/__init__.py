"""scicalc: a keystroke-driven scientific calculator.

The engine turns button presses into arithmetic and trigonometric results,
with a memory cell, a last-answer register and a shift mode for inverse
functions. Any front end drives it through one method per key and redraws
from the DisplayUpdate it pushes after each press.

Usage:
    python -m scicalc press 2 + 3 "*" 4 =    # Feed buttons, print the display
    python -m scicalc repl                   # Interactive keypad
"""

from scicalc.engine import CalculatorEngine
from scicalc.models import DisplayUpdate, ErrorKind, FunctionKind, OperatorKind

__all__ = [
    "CalculatorEngine",
    "DisplayUpdate",
    "ErrorKind",
    "FunctionKind",
    "OperatorKind",
]

__version__ = "0.1.0"
