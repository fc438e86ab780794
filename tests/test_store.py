import os
import sqlite3

import pytest

from recipeserver.errors import InvalidDbUri
from recipeserver.recipe import JsonRecipe, get
from recipeserver.store import (
    db_path,
    extract_db_dir,
    get_db_uri,
    load_recipes,
    migrate,
    open_database,
)


def _recipe(recipe_id, title="Soup", ingredients=("water", "salt")):
    return JsonRecipe.from_dict(
        {
            "id": recipe_id,
            "title": title,
            "category": "Mains",
            "ingredient_amount": list(ingredients),
            "preparation": "Boil.",
        }
    )


def test_get_db_uri_prefers_argument(monkeypatch):
    monkeypatch.setenv("DB_URI", "sqlite://env.db")
    assert get_db_uri("sqlite://arg.db") == "sqlite://arg.db"


def test_get_db_uri_uses_environment(monkeypatch):
    monkeypatch.setenv("DB_URI", "sqlite://env.db")
    assert get_db_uri(None) == "sqlite://env.db"


def test_get_db_uri_default(monkeypatch):
    monkeypatch.delenv("DB_URI", raising=False)
    assert get_db_uri() == "sqlite://db.db"


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("sqlite://db.db", ""),
        ("sqlite://data/recipes.db", "data"),
        ("sqlite://a/b/c.db", "a/b"),
    ],
)
def test_extract_db_dir(uri, expected):
    assert extract_db_dir(uri) == expected


@pytest.mark.parametrize("uri", ["postgres://x.db", "sqlite://db.sqlite", "db.db"])
def test_extract_db_dir_rejects(uri):
    with pytest.raises(InvalidDbUri) as info:
        extract_db_dir(uri)
    assert info.value.uri == uri


def test_db_path_strips_scheme():
    assert db_path("sqlite://data/recipes.db") == "data/recipes.db"
    assert db_path("sqlite::memory:") == ":memory:"


def test_db_path_rejects_other_schemes():
    with pytest.raises(InvalidDbUri):
        db_path("mysql://host/db")


def test_migrate_is_idempotent():
    db = sqlite3.connect(":memory:", isolation_level=None)
    migrate(db)
    migrate(db)
    names = {row[0] for row in db.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {"recipes", "ingredients"} <= names


def test_open_database_creates_directory_and_file(tmp_path):
    target = tmp_path / "nested" / "store.db"
    db = open_database(f"sqlite://{target}")
    try:
        assert target.exists()
        assert load_recipes(db, [_recipe(1)]) == 1
    finally:
        db.close()
    reopened = open_database(f"sqlite://{target}")
    try:
        recipe, _ = get(reopened, 1)
        assert recipe.title == "Soup"
    finally:
        reopened.close()


def test_open_database_rejects_bad_new_uri(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(InvalidDbUri):
        open_database("sqlite://fresh.sqlite")
    assert not os.path.exists(tmp_path / "fresh.sqlite")


def test_load_recipes_skips_duplicate_ids(capsys):
    db = open_database("sqlite::memory:")
    stored = load_recipes(db, [_recipe(1), _recipe(1, title="Other"), _recipe(2, title="Stew")])
    assert stored == 2
    assert "error: recipe insert: 1:" in capsys.readouterr().err
    recipe, ingredients = get(db, 1)
    assert recipe.title == "Soup"
    assert sorted(ingredients) == ["salt", "water"]
    count = db.execute("SELECT COUNT(*) FROM ingredients").fetchone()[0]
    assert count == 4