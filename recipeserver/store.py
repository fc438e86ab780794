"""Database location, schema and bulk loading of recipes."""

import os
import sqlite3
import sys

from .errors import InvalidDbUri

DEFAULT_DB_URI = "sqlite://db.db"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS recipes (id INTEGER PRIMARY KEY NOT NULL, "
    "title TEXT NOT NULL, category TEXT NOT NULL, preparation TEXT NOT NULL);",
    "CREATE TABLE IF NOT EXISTS ingredients (recipe_id INTEGER NOT NULL "
    "REFERENCES recipes (id), ingredient_amount TEXT NOT NULL);",
)


def get_db_uri(db_uri=None):
    """Choose the database URI: the argument, then $DB_URI, then the default."""
    if db_uri is not None:
        return db_uri
    return os.environ.get("DB_URI", DEFAULT_DB_URI)


def extract_db_dir(db_uri):
    """Return the directory part of an ``sqlite://...db`` URI."""
    if not (db_uri.startswith("sqlite://") and db_uri.endswith(".db")):
        raise InvalidDbUri(db_uri)
    path = db_uri[db_uri.index(":") + 3:]
    return path.rpartition("/")[0]


def db_path(db_uri):
    """Return the file path an SQLite URI refers to, or ``:memory:``."""
    if not db_uri.startswith("sqlite:"):
        raise InvalidDbUri(db_uri)
    path = db_uri[len("sqlite:"):]
    path = path.removeprefix("//").split("?", 1)[0]
    return path if path not in ("", ":memory:") else ":memory:"


def migrate(db):
    """Create the recipe tables if they do not exist yet."""
    for statement in _SCHEMA:
        db.execute(statement)
    if db.in_transaction:
        db.commit()


def open_database(db_uri):
    """Open the database, creating its file and schema when needed."""
    path = db_path(db_uri)
    if path != ":memory:" and not os.path.exists(path):
        db_dir = extract_db_dir(db_uri)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
    db = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
    migrate(db)
    return db


def _insert(db, recipe, ingredients):
    """Insert one recipe and its ingredients; report and return False on failure."""
    try:
        db.execute(
            "INSERT INTO recipes (id, title, category, preparation) VALUES (?, ?, ?, ?);",
            (recipe.id, recipe.title, recipe.category, recipe.preparation),
        )
    except sqlite3.Error as exc:
        print(f"error: recipe insert: {recipe.id}: {exc}", file=sys.stderr)
        return False
    for amount in ingredients:
        try:
            db.execute(
                "INSERT INTO ingredients (recipe_id, ingredient_amount) VALUES (?, ?);",
                (recipe.id, amount),
            )
        except sqlite3.Error as exc:
            print(f"error: ingredient insert: {recipe.id} {amount}: {exc}", file=sys.stderr)
            return False
    return True


def load_recipes(db, recipes):
    """Insert recipes, each in its own transaction; return how many were stored."""
    stored = 0
    for json_recipe in recipes:
        recipe, ingredients = json_recipe.to_recipe()
        db.execute("BEGIN")
        try:
            ok = _insert(db, recipe, ingredients)
        except BaseException:
            db.execute("ROLLBACK")
            raise
        db.execute("COMMIT" if ok else "ROLLBACK")
        stored += ok
    return stored