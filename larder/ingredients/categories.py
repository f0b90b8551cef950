"""Keyword-based ingredient category classification.

Runs as a separate stage after parsing; the parser itself always leaves
``category`` empty.
"""

from __future__ import annotations

import re
from dataclasses import replace
from functools import lru_cache

from .models import ParsedIngredient

DEFAULT_CATEGORY = "other"

# Keyword → category mapping; the first category with a match wins.
CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "meat": [
        "chicken", "beef", "pork", "lamb", "turkey", "bacon", "ham",
        "sausage", "steak", "ground beef", "chorizo", "prosciutto", "veal",
    ],
    "seafood": [
        "salmon", "tuna", "shrimp", "prawn", "cod", "fish", "crab",
        "lobster", "scallop", "anchovy", "mussel", "clam", "tilapia",
    ],
    "dairy": [
        "milk", "butter", "cheese", "cream", "yogurt", "parmesan",
        "mozzarella", "cheddar", "ricotta", "sour cream", "buttermilk",
    ],
    "eggs": ["egg", "egg yolk", "egg white"],
    "spices": [
        "salt", "black pepper", "cumin", "paprika", "cinnamon", "oregano",
        "thyme", "rosemary", "chili powder", "nutmeg", "turmeric",
        "bay leaf", "curry powder",
    ],
    "produce": [
        "onion", "garlic", "tomato", "potato", "carrot", "celery",
        "pepper", "bell pepper", "spinach", "lettuce", "cabbage",
        "broccoli", "zucchini", "mushroom", "cucumber", "lemon", "lime",
        "apple", "banana", "orange", "ginger", "scallion", "shallot",
        "parsley", "cilantro", "basil", "avocado", "kale", "corn",
    ],
    "grains": [
        "rice", "pasta", "noodle", "bread", "oats", "quinoa", "tortilla",
        "spaghetti", "couscous", "barley",
    ],
    "baking": [
        "flour", "sugar", "brown sugar", "baking soda", "baking powder",
        "yeast", "cornstarch", "vanilla", "cocoa", "chocolate", "honey",
    ],
    "condiments": [
        "oil", "olive oil", "vinegar", "soy sauce", "ketchup", "mustard",
        "mayonnaise", "hot sauce", "broth", "stock", "sauce",
    ],
    "legumes": ["beans", "black beans", "chickpea", "lentil", "tofu"],
}


def guess_category(
    item_name: str | None,
    keywords: dict[str, list[str]] | None = None,
    default: str = DEFAULT_CATEGORY,
) -> str | None:
    """Guess a category for an item name.

    Args:
        item_name: Parsed item name, e.g. "chicken breast".
        keywords: Category → keywords table. Defaults to CATEGORY_KEYWORDS.
        default: Category returned when nothing matches.

    Returns:
        The category name, or None if there is no item name to classify.
    """
    if not item_name or not item_name.strip():
        return None

    table = CATEGORY_KEYWORDS if keywords is None else keywords
    name = item_name.lower()
    for category, words in table.items():
        for word in words:
            if _keyword_pattern(word.lower()).search(name):
                return category
    return default


def classify(
    record: ParsedIngredient,
    keywords: dict[str, list[str]] | None = None,
    default: str = DEFAULT_CATEGORY,
) -> ParsedIngredient:
    """Return a copy of ``record`` with its category filled in."""
    return replace(
        record, category=guess_category(record.item_name, keywords, default)
    )


def classify_all(
    records: list[ParsedIngredient],
    keywords: dict[str, list[str]] | None = None,
    default: str = DEFAULT_CATEGORY,
) -> list[ParsedIngredient]:
    return [classify(r, keywords, default) for r in records]


def merge_keywords(custom: dict[str, list[str]]) -> dict[str, list[str]]:
    """Merge custom keyword lists over the defaults.

    Existing categories get the custom keywords checked first; new
    categories are appended after the built-in ones. A bare string is
    taken as a single keyword.

    Raises:
        ValueError: If a category's keywords are not a string or a list
            of strings.
    """
    merged = {cat: list(words) for cat, words in CATEGORY_KEYWORDS.items()}
    for category, words in custom.items():
        if isinstance(words, str):
            words = [words]
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError(
                f"Keywords for category {category!r} must be a list of strings"
            )
        merged[category] = list(words) + [
            w for w in merged.get(category, []) if w not in words
        ]
    return merged


@lru_cache(maxsize=512)
def _keyword_pattern(word: str) -> re.Pattern[str]:
    # Whole words only, with simple plurals ("tomatoes", "eggs")
    return re.compile(rf"\b{re.escape(word)}(?:s|es)?\b")
