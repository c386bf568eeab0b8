"""Extract finite numbers from free-form text."""

import logging
import math
import re

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s;]+")

# ASCII decimal literal with optional sign, fraction and exponent: 1, -2.5, .5, 3., 1e3
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Unsigned integer literals in other bases: 0x1f, 0o17, 0b101
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _to_number(token: str) -> float | None:
    """Coerce a single token, returning None when it is not a finite number."""
    if _DECIMAL.fullmatch(token):
        value = float(token)
    elif _PREFIXED.fullmatch(token):
        try:
            value = float(int(token, 0))
        except OverflowError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_numbers(text: str) -> list[float]:
    """Split text on commas, whitespace and semicolons and keep the numbers.

    Tokens that are not finite numbers (words, "nan", "inf", literals that
    overflow) are dropped. Input order is preserved; the result may be empty.
    """
    numbers = []
    dropped = []
    for token in _SEPARATORS.split(text):
        if not token:
            continue
        value = _to_number(token)
        if value is None:
            dropped.append(token)
            continue
        numbers.append(value)

    if dropped:
        logger.debug("Dropped %d non-numeric token(s): %s", len(dropped), dropped)
    return numbers
