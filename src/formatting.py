"""Rounding and display strings for statistics output."""

import math

DEFAULT_DIGITS = 4


def round_value(value: float, digits: int = DEFAULT_DIGITS) -> float:
    """Round a finite value to `digits` decimals; pass NaN and infinities through."""
    if not math.isfinite(value):
        return value
    rounded = round(value, digits)
    # round() keeps the sign of a negative value that rounds to zero
    return rounded + 0.0 if rounded == 0 else rounded


def format_number(value: float) -> str:
    """Render a number for display: 3 rather than 3.0, NaN and Infinity spelled out."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # integral floats from 1e16 up print in exponent form
    if abs(value) < 1e16 and value == int(value):
        return str(int(value))
    return repr(value)


def format_mode(modes: tuple[float, ...] | None, no_mode_label: str = "no mode") -> str:
    if modes is None:
        return no_mode_label
    return ", ".join(format_number(m) for m in modes)
