"""Free-text ingredient parsing, review and storage."""

from .categories import classify, classify_all, guess_category
from .config import (
    CategoryConfig,
    DatabaseConfig,
    LarderConfig,
    ReviewConfig,
    load_config,
)
from .models import ParsedIngredient
from .parser import parse_ingredients_text, parse_line, split_lines
from .review import (
    InvalidQuantityError,
    ReviewRow,
    apply_edit,
    parse_quantity_edit,
    start_review,
    to_storage_rows,
)
from .units import UNIT_WHITELIST, is_known_unit, parse_quantity

__all__ = [
    "ParsedIngredient",
    "parse_ingredients_text",
    "parse_line",
    "split_lines",
    "UNIT_WHITELIST",
    "is_known_unit",
    "parse_quantity",
    "guess_category",
    "classify",
    "classify_all",
    "ReviewRow",
    "InvalidQuantityError",
    "start_review",
    "apply_edit",
    "parse_quantity_edit",
    "to_storage_rows",
    "LarderConfig",
    "DatabaseConfig",
    "ReviewConfig",
    "CategoryConfig",
    "load_config",
]
