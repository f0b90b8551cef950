"""Editable review rows for parsed ingredients.

Parsed records are immutable. A human corrects them on ``ReviewRow`` copies,
which are then turned into storage rows keyed by recipe id and line number.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from .models import ParsedIngredient
from .parser import parse_ingredients_text
from .units import parse_quantity

_EDITABLE_FIELDS = ("quantity", "unit", "item_name", "notes", "category")


class InvalidQuantityError(ValueError):
    """Raised when a quantity edit is not a usable number."""


@dataclass
class ReviewRow:
    """Mutable copy of a ParsedIngredient shown in the review table."""

    line_no: int
    raw_line: str
    quantity: float | None = None
    unit: str | None = None
    item_name: str | None = None
    notes: str | None = None
    category: str | None = None
    confidence: float = 0.5

    @classmethod
    def from_parsed(cls, record: ParsedIngredient) -> ReviewRow:
        return cls(**asdict(record))

    def needs_review(self, min_confidence: float) -> bool:
        """True if the parser was unsure about this line."""
        return self.confidence < min_confidence


def start_review(text: str) -> list[ReviewRow]:
    """Parse ingredient text and return editable rows."""
    return [ReviewRow.from_parsed(r) for r in parse_ingredients_text(text)]


def parse_quantity_edit(value: str) -> float | None:
    """Validate a quantity typed into the review table.

    Args:
        value: e.g. "2", "0.75", "1/2", or "" to clear the quantity.

    Returns:
        The number, or None for a blank value.

    Raises:
        InvalidQuantityError: If the value is not a finite number or fraction.
    """
    value = value.strip()
    if not value:
        return None

    if "/" in value:
        quantity = parse_quantity(value)
        if quantity is None:
            raise InvalidQuantityError(f"Invalid quantity: {value!r}")
        return quantity

    try:
        quantity = float(value)
    except ValueError:
        raise InvalidQuantityError(f"Invalid quantity: {value!r}") from None
    if not math.isfinite(quantity):
        raise InvalidQuantityError(f"Invalid quantity: {value!r}")
    return quantity


def apply_edit(row: ReviewRow, **fields: object) -> ReviewRow:
    """Apply manual edits to a review row in place.

    Text fields are trimmed and a blank value clears the field. ``quantity``
    accepts a string (validated), a number, or None.

    Raises:
        ValueError: If a field is not editable.
        InvalidQuantityError: If a quantity edit is rejected.
    """
    for name, value in fields.items():
        if name not in _EDITABLE_FIELDS:
            raise ValueError(f"Field is not editable: {name!r}")

        if name == "quantity":
            row.quantity = _coerce_quantity(value)
        elif value is None:
            setattr(row, name, None)
        else:
            setattr(row, name, str(value).strip() or None)
    return row


def to_storage_rows(recipe_id: str, rows: list[ReviewRow]) -> list[dict]:
    """Build per-line storage records for a recipe.

    Raises:
        ValueError: If recipe_id is empty.
    """
    if not recipe_id or not recipe_id.strip():
        raise ValueError("recipe_id is required")

    return [
        {
            "recipe_id": recipe_id,
            "line_no": r.line_no,
            "raw_line": r.raw_line,
            "quantity": _finite_or_none(r.quantity),
            "unit": r.unit,
            "item_name": r.item_name,
            "notes": r.notes,
            "category": r.category,
            "confidence": r.confidence,
        }
        for r in rows
    ]


def _coerce_quantity(value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        return parse_quantity_edit(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidQuantityError(f"Invalid quantity: {value!r}")
    if not math.isfinite(value):
        raise InvalidQuantityError(f"Invalid quantity: {value!r}")
    return float(value)


def _finite_or_none(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value
