"""Storage for reviewed recipe ingredient rows."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from .schema import ensure_schema

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "~/.config/larder/recipes.db"


class RecipeIngredientsDB:
    """Manages the recipe_ingredients table."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def replace_ingredients(self, recipe_id: str, rows: list[dict]) -> int:
        """Replace all stored rows for a recipe.

        The delete and inserts run in one transaction, so a failed insert
        leaves the previous rows in place.

        Args:
            recipe_id: Recipe the rows belong to.
            rows: Storage rows as built by ``review.to_storage_rows``.

        Returns:
            Number of rows inserted.
        """
        conn = self._get_conn()
        with conn:
            conn.execute(
                "DELETE FROM recipe_ingredients WHERE recipe_id = ?",
                (recipe_id,),
            )
            conn.executemany(
                """INSERT INTO recipe_ingredients
                   (recipe_id, line_no, raw_line, quantity, unit,
                    item_name, notes, category, confidence)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                [
                    (
                        recipe_id,
                        row["line_no"],
                        row["raw_line"],
                        row.get("quantity"),
                        row.get("unit"),
                        row.get("item_name"),
                        row.get("notes"),
                        row.get("category"),
                        row.get("confidence", 0.5),
                    )
                    for row in rows
                ],
            )
        logger.info("Stored %d ingredient rows for recipe %s", len(rows), recipe_id)
        return len(rows)

    def get_ingredients(self, recipe_id: str) -> list[dict]:
        """Return the stored rows for a recipe, ordered by line number."""
        conn = self._get_conn()
        rows = conn.execute(
            """SELECT recipe_id, line_no, raw_line, quantity, unit,
                      item_name, notes, category, confidence
               FROM recipe_ingredients
               WHERE recipe_id = ?
               ORDER BY line_no""",
            (recipe_id,),
        ).fetchall()
        return [dict(r) for r in rows]

    def delete_ingredients(self, recipe_id: str) -> int:
        """Delete all rows for a recipe.

        Returns:
            Number of rows deleted.
        """
        conn = self._get_conn()
        cur = conn.execute(
            "DELETE FROM recipe_ingredients WHERE recipe_id = ?", (recipe_id,)
        )
        conn.commit()
        return cur.rowcount

    def list_recipe_ids(self) -> list[str]:
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT DISTINCT recipe_id FROM recipe_ingredients ORDER BY recipe_id"
        ).fetchall()
        return [r["recipe_id"] for r in rows]
