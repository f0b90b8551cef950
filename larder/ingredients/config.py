"""TOML configuration loader for the ingredients module."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .categories import DEFAULT_CATEGORY, merge_keywords
from .db.recipe_ingredients import DEFAULT_DB_PATH

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    path: str = DEFAULT_DB_PATH


@dataclass
class ReviewConfig:
    # Rows scoring below this are flagged for a closer look
    min_confidence: float = 0.8


@dataclass
class CategoryConfig:
    enabled: bool = False
    default: str = DEFAULT_CATEGORY
    keywords: dict[str, list[str]] = field(default_factory=lambda: merge_keywords({}))


@dataclass
class LarderConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    categories: CategoryConfig = field(default_factory=CategoryConfig)


def load_config(path: str | Path | None = None) -> LarderConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The database path can be supplied via LARDER_DB_PATH when the file
    leaves it unset.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)
            logger.debug("Loaded config from %s", p)
        else:
            logger.debug("Config file %s not found, using defaults", p)

    dbs = raw.get("database", {})
    rev = raw.get("review", {})
    cat = raw.get("categories", {})

    # Resolve database path: config file → environment variable → default
    db_path = (
        dbs.get("path", "")
        or os.environ.get("LARDER_DB_PATH", "")
        or DEFAULT_DB_PATH
    )

    return LarderConfig(
        database=DatabaseConfig(path=db_path),
        review=ReviewConfig(
            min_confidence=float(rev.get("min_confidence", 0.8)),
        ),
        categories=CategoryConfig(
            enabled=cat.get("enabled", False),
            default=cat.get("default", DEFAULT_CATEGORY),
            keywords=merge_keywords(cat.get("keywords", {})),
        ),
    )
