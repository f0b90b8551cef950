"""Data models for parsed ingredient lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedIngredient:
    """A single ingredient line extracted from free-text recipe input."""

    line_no: int                 # 1-based among non-blank lines
    raw_line: str                # Trimmed original text
    quantity: float | None = None
    unit: str | None = None      # Lowercase whitelist token
    item_name: str | None = None
    notes: str | None = None
    category: str | None = None  # Filled in by the classifier stage only
    confidence: float = 0.5
