"""Tests for RecipeIngredientsDB storage."""

import sqlite3

import pytest

from larder.ingredients.db.recipe_ingredients import RecipeIngredientsDB
from larder.ingredients.review import start_review, to_storage_rows


@pytest.fixture
def db(tmp_path):
    """Create a temporary RecipeIngredientsDB."""
    store = RecipeIngredientsDB(db_path=tmp_path / "test.db")
    yield store
    store.close()


@pytest.fixture
def sample_rows():
    rows = start_review("2 cups rice\n1/2 tsp salt\nsalt to taste\n1 lb chicken, diced")
    return to_storage_rows("r1", rows)


def test_replace_ingredients(db, sample_rows):
    assert db.replace_ingredients("r1", sample_rows) == 4

    stored = db.get_ingredients("r1")
    assert [s["line_no"] for s in stored] == [1, 2, 3, 4]
    assert stored[0]["quantity"] == 2.0
    assert stored[0]["unit"] == "cups"
    assert stored[2]["quantity"] is None
    assert stored[2]["notes"] == "to taste"
    assert stored[3]["item_name"] == "chicken"
    assert stored[3]["confidence"] == 1.0


def test_stored_rows_match_storage_rows(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    assert db.get_ingredients("r1") == sample_rows


def test_replace_overwrites_previous_rows(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    new_rows = to_storage_rows("r1", start_review("3 eggs"))
    db.replace_ingredients("r1", new_rows)

    stored = db.get_ingredients("r1")
    assert len(stored) == 1
    assert stored[0]["raw_line"] == "3 eggs"


def test_recipes_are_independent(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    db.replace_ingredients("r2", to_storage_rows("r2", start_review("3 eggs")))

    assert len(db.get_ingredients("r1")) == 4
    assert len(db.get_ingredients("r2")) == 1
    assert db.list_recipe_ids() == ["r1", "r2"]


def test_failed_replace_keeps_previous_rows(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    duplicate = [sample_rows[0], dict(sample_rows[0])]

    with pytest.raises(sqlite3.IntegrityError):
        db.replace_ingredients("r1", duplicate)

    assert len(db.get_ingredients("r1")) == 4


def test_get_ingredients_unknown_recipe(db):
    assert db.get_ingredients("missing") == []


def test_delete_ingredients(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    assert db.delete_ingredients("r1") == 4
    assert db.get_ingredients("r1") == []
    assert db.list_recipe_ids() == []


def test_replace_with_no_rows_clears_recipe(db, sample_rows):
    db.replace_ingredients("r1", sample_rows)
    assert db.replace_ingredients("r1", []) == 0
    assert db.get_ingredients("r1") == []


def test_close_and_reopen(tmp_path, sample_rows):
    path = tmp_path / "test.db"
    store = RecipeIngredientsDB(path)
    store.replace_ingredients("r1", sample_rows)
    store.close()

    reopened = RecipeIngredientsDB(path)
    assert len(reopened.get_ingredients("r1")) == 4
    reopened.close()
