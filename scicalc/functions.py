"""Pure arithmetic for the calculator engine.

Binary operators and the unary function table. Nothing here raises for bad
input: every evaluation returns an Evaluation, with the error set when the
result is undefined or non-finite.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from scicalc.models import ErrorKind, Evaluation, FunctionKind, OperatorKind

# Largest n whose factorial is still a finite double.
MAX_FACTORIAL = 170

# Domain failures the math module reports by raising instead of returning NaN.
_MATH_FAILURES = (ValueError, ZeroDivisionError, OverflowError)

_BINARY: dict[OperatorKind, Callable[[float, float], float]] = {
    OperatorKind.ADD: lambda a, b: a + b,
    OperatorKind.SUB: lambda a, b: a - b,
    OperatorKind.MUL: lambda a, b: a * b,
    OperatorKind.DIV: lambda a, b: a / b,
    # Truncated remainder: the sign follows the dividend.
    OperatorKind.MOD: math.fmod,
}

_ZERO_DIVISOR_OPS = (OperatorKind.DIV, OperatorKind.MOD)


def evaluate_binary(a: float, b: float, op: Optional[OperatorKind]) -> Evaluation:
    """Apply ``op`` to ``a`` and ``b``.

    An operator outside the table passes ``b`` through unchanged.
    Overflow is not an error here: the infinite result is returned as is and
    formats as a persistent "Error" on the display.
    """
    if op in _ZERO_DIVISOR_OPS and b == 0:
        return Evaluation.fail(ErrorKind.DIVISION_BY_ZERO)
    fn = _BINARY.get(op) if op is not None else None
    if fn is None:
        return Evaluation(value=b)
    try:
        return Evaluation(value=fn(a, b))
    except ValueError:
        # fmod of an infinite dividend
        return Evaluation(value=math.nan)


def factorial(n: float) -> float:
    """n! as a float; NaN outside the non-negative integers, inf above 170."""
    if n < 0 or not float(n).is_integer():
        return math.nan
    if n > MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(int(n)))


def _cube_root(x: float) -> float:
    # math.pow refuses a negative base with a fractional exponent
    return math.pow(x, 1 / 3)


# (normal, shifted) for each key whose meaning depends on shift mode.
_UNARY: dict[FunctionKind, tuple[Callable[[float], float], Callable[[float], float]]] = {
    FunctionKind.SIN: (
        lambda x: math.sin(math.radians(x)),
        lambda x: math.degrees(math.asin(x)),
    ),
    FunctionKind.COS: (
        lambda x: math.cos(math.radians(x)),
        lambda x: math.degrees(math.acos(x)),
    ),
    FunctionKind.TAN: (
        lambda x: math.tan(math.radians(x)),
        lambda x: math.degrees(math.atan(x)),
    ),
    FunctionKind.LOG: (math.log10, lambda x: math.pow(10, x)),
    FunctionKind.LN: (math.log, math.exp),
    FunctionKind.SQRT: (math.sqrt, lambda x: x * x),
    FunctionKind.INVERSE: (lambda x: 1 / x, factorial),
    FunctionKind.CUBE: (lambda x: math.pow(x, 3), _cube_root),
    FunctionKind.SQUARE: (lambda x: math.pow(x, 2), lambda x: math.pow(x, 2)),
    FunctionKind.X10: (lambda x: x * 10, lambda x: x * 10),
    FunctionKind.NEGATE: (lambda x: -x, lambda x: -x),
}

# Human-readable rendering of the table, for help screens.
FUNCTION_LABELS: dict[FunctionKind, tuple[str, str]] = {
    FunctionKind.SIN: ("sin(x°)", "asin(x) in degrees"),
    FunctionKind.COS: ("cos(x°)", "acos(x) in degrees"),
    FunctionKind.TAN: ("tan(x°)", "atan(x) in degrees"),
    FunctionKind.LOG: ("log10(x)", "10^x"),
    FunctionKind.LN: ("ln(x)", "e^x"),
    FunctionKind.SQRT: ("√x", "x²"),
    FunctionKind.INVERSE: ("1/x", "x!"),
    FunctionKind.CUBE: ("x³", "∛x"),
    FunctionKind.SQUARE: ("x²", "x²"),
    FunctionKind.X10: ("x×10", "x×10"),
    FunctionKind.NEGATE: ("-x", "-x"),
    FunctionKind.ANS: ("last answer", "last answer"),
    FunctionKind.STORE: ("memory ← x", "memory ← x"),
    FunctionKind.RECALL: ("memory", "memory"),
}


def evaluate_unary(
    fn: FunctionKind,
    x: float,
    shifted: bool = False,
    last_answer: float = 0.0,
    memory: float = 0.0,
) -> Evaluation:
    """Evaluate a unary function key against ``x``.

    ANS and RECALL read the registers passed in. STORE has no numeric result
    of its own and is handled by the engine.
    """
    if fn == FunctionKind.ANS:
        result = last_answer
    elif fn == FunctionKind.RECALL:
        result = memory
    elif fn == FunctionKind.STORE:
        raise ValueError("store is not a computed function")
    else:
        normal, alternate = _UNARY[fn]
        try:
            result = (alternate if shifted else normal)(x)
        except _MATH_FAILURES:
            return Evaluation.fail(ErrorKind.MATH_ERROR)

    if not math.isfinite(result):
        return Evaluation.fail(ErrorKind.MATH_ERROR)
    return Evaluation(value=result)
