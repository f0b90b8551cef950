"""Measurement unit whitelist and quantity token conversion."""

from __future__ import annotations

import math
import re

# Recognized unit tokens (lowercase). Extending the vocabulary is a data change.
UNIT_WHITELIST: frozenset[str] = frozenset({
    "tsp",
    "tbsp",
    "cup",
    "cups",
    "oz",
    "ounce",
    "ounces",
    "lb",
    "lbs",
    "pound",
    "pounds",
    "g",
    "kg",
    "ml",
    "l",
    "clove",
    "cloves",
    "pinch",
    "dash",
    "can",
    "cans",
    "slice",
    "slices",
    "package",
    "packages",
})

# Leading quantity: decimal or simple fraction, then at least one whitespace
QUANTITY_PATTERN = re.compile(r"^([0-9]+(?:\.[0-9]+)?|[0-9]+/[0-9]+)\s+")

_NUMBER_PATTERN = re.compile(r"^[0-9]+(?:\.[0-9]+)?$")


def is_known_unit(word: str) -> bool:
    """Return True if ``word`` is a whitelisted unit (case-insensitive)."""
    return word.lower() in UNIT_WHITELIST


def parse_quantity(token: str) -> float | None:
    """Convert a quantity token to a number.

    Args:
        token: e.g. "2", "1.5", "1/2"

    Returns:
        The numeric value, or None if the token cannot be converted
        (zero denominator, non-numeric side, or a non-finite result).
    """
    token = token.strip()
    if "/" in token:
        num_str, _, den_str = token.partition("/")
        num = _to_number(num_str)
        den = _to_number(den_str)
        if num is None or den is None or den == 0:
            return None
        return num / den

    return _to_number(token)


def _to_number(s: str) -> float | None:
    """Parse a plain decimal string, rejecting anything non-finite."""
    s = s.strip()
    if not _NUMBER_PATTERN.match(s):
        return None
    value = float(s)
    # Very long digit strings overflow to inf
    if not math.isfinite(value):
        return None
    return value
