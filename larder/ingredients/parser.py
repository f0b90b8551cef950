"""Rule-based parser for free-text ingredient lists.

Each non-blank line becomes one ``ParsedIngredient``. The parser is a
deterministic line tagger meant to pre-fill a review step: it never raises,
and anything it cannot interpret is left as ``None`` for a human to fill in.
"""

from __future__ import annotations

from .models import ParsedIngredient
from .units import QUANTITY_PATTERN, UNIT_WHITELIST, parse_quantity

_BASE_CONFIDENCE = 0.5
_QUANTITY_WEIGHT = 0.2
_UNIT_WEIGHT = 0.2
_ITEM_WEIGHT = 0.1

# Phrases picked up as notes when the line has no explicit comma remainder
_TO_TASTE = "to taste"
_OPTIONAL = "optional"


def parse_ingredients_text(text: str) -> list[ParsedIngredient]:
    """Parse a block of ingredient text into structured records.

    Args:
        text: Newline-separated ingredient lines, e.g. a textarea's contents.

    Returns:
        One record per non-blank line, numbered from 1 in input order.
        Empty or whitespace-only input returns an empty list.
    """
    return [
        parse_line(raw, line_no)
        for line_no, raw in enumerate(split_lines(text), 1)
    ]


def split_lines(text: str) -> list[str]:
    """Split text on newlines, trim each line and drop blank ones."""
    lines = (_trim(line) for line in text.split("\n"))
    return [line for line in lines if line]


def parse_line(raw: str, line_no: int) -> ParsedIngredient:
    """Interpret one non-empty ingredient line.

    The line is trimmed first, so ``raw_line`` never carries surrounding
    whitespace. Handles lines such as:
        "2 cups rice"
        "1/2 tsp salt"
        "1 lb chicken breast, diced"
        "salt to taste"
    """
    raw = _trim(raw)
    lower = raw.lower()
    quantity: float | None = None
    rest = raw

    # 1. Leading quantity. A fraction that fails to convert is still consumed.
    m = QUANTITY_PATTERN.match(raw)
    if m:
        quantity = parse_quantity(m.group(1))
        rest = raw[m.end():].strip()

    # 2. Unit word
    unit: str | None = None
    words = rest.split()
    if words and words[0].lower() in UNIT_WHITELIST:
        unit = words[0].lower()
        rest = " ".join(words[1:])

    # 3. Item name and notes
    item_name, notes = _split_item_and_notes(rest, lower)

    return ParsedIngredient(
        line_no=line_no,
        raw_line=raw,
        quantity=quantity,
        unit=unit,
        item_name=item_name,
        notes=notes,
        category=None,
        confidence=_score(quantity, unit, item_name),
    )


def _trim(line: str) -> str:
    # str.strip() keeps a byte order mark; treat it as whitespace
    return line.strip().strip("\ufeff").strip()


def _split_item_and_notes(
    rest: str, lower_line: str
) -> tuple[str | None, str | None]:
    """Partition the remainder into (item_name, notes).

    An explicit comma wins: everything after the first comma is notes.
    Without one, notes are detected from phrases in the full original line.
    """
    if "," in rest:
        item, _, remainder = rest.partition(",")
        return item.strip() or None, remainder.strip() or None

    notes: str | None = None
    if _TO_TASTE in lower_line:
        notes = _TO_TASTE
    if _OPTIONAL in lower_line:
        notes = f"{notes}; {_OPTIONAL}" if notes else _OPTIONAL
    return rest.strip() or None, notes


def _score(
    quantity: float | None, unit: str | None, item_name: str | None
) -> float:
    """Heuristic completeness score in [0.5, 1.0]."""
    confidence = _BASE_CONFIDENCE
    if quantity is not None:
        confidence += _QUANTITY_WEIGHT
    if unit is not None:
        confidence += _UNIT_WEIGHT
    if item_name:
        confidence += _ITEM_WEIGHT
    # Rounding keeps the score on exact tenths (0.5 + 0.2 + 0.2 + 0.1 drifts)
    return round(min(1.0, confidence), 2)
