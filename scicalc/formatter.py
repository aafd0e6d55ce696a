"""Conversion between display text and numbers.

Parsing is lenient and never raises: the longest numeric prefix wins and text
without one reads as zero. Formatting maps any float to the text the display
shows.
"""

from __future__ import annotations

import math
import re

ERROR_TEXT = "Error"

# Beyond these magnitudes values are shown in scientific notation.
_SCI_UPPER = 1e10
_SCI_LOWER = 1e-10

_NUMBER_PREFIX_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PLAIN_NUMBER_RE = re.compile(r"-?\d+(?:\.\d*)?")


def parse_number(text: str) -> float:
    """Parse the leading decimal number of ``text``.

    ``"12("`` → 12.0, ``"5."`` → 5.0, ``"("`` → 0.0.
    """
    m = _NUMBER_PREFIX_RE.match(text or "")
    if not m:
        return 0.0
    try:
        value = float(m.group(0))
    except ValueError:
        return 0.0
    # Exponent overflow ("1e999") reads as a bad number, not as infinity.
    return value if math.isfinite(value) else 0.0


def format_number(value: float) -> str:
    """Render a value as display text."""
    if not math.isfinite(value):
        return ERROR_TEXT

    magnitude = abs(value)
    if magnitude > _SCI_UPPER or (magnitude < _SCI_LOWER and value != 0):
        return f"{value:.6e}"

    if value.is_integer():
        # int() folds -0.0 into "0"
        return str(int(value))

    # Round to 10 places, then show the shortest text for the rounded value
    rounded = float(f"{value:.10f}")
    if rounded.is_integer():
        return str(int(rounded))
    text = repr(rounded)
    if "e" in text:
        text = f"{rounded:.10f}".rstrip("0").rstrip(".")
    return text


def fit_display(text: str, width: int = 12) -> str:
    """Shorten a long plain number to scientific notation for a narrow display.

    Messages and text that already carries an exponent pass through.
    """
    if len(text) <= width or not _PLAIN_NUMBER_RE.fullmatch(text):
        return text
    return f"{parse_number(text):.6e}"
