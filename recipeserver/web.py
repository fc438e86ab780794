"""HTTP front end: the recipe page, the JSON API and static assets."""

from __future__ import annotations

import logging
import os
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from flask import Flask, Response, jsonify, redirect, request, send_from_directory

from . import recipe as recipes
from .errors import RecipeLookupError
from .recipe import JsonRecipe, Recipe
from .store import get_db_uri, open_database
from .templates import IndexPage

log = logging.getLogger(__name__)

DEFAULT_STATIC_DIR = os.path.join("assets", "static")
FAVICON_MIME = "image/vnd.microsoft.icon"
CSS_MIME = "text/css; charset=utf-8"

_STATE_KEY = "recipeserver"


@dataclass
class _AppState:
    db: sqlite3.Connection
    current_recipe: Recipe
    lock: threading.Lock = field(default_factory=threading.Lock)


@contextmanager
def _transaction(db: sqlite3.Connection) -> Iterator[None]:
    db.execute("BEGIN")
    try:
        yield
    except BaseException:
        db.execute("ROLLBACK")
        raise
    db.execute("COMMIT")


def clean_ingredients(text: str) -> str:
    """Keep only letters and commas from a query, lower-cased."""
    return "".join(c.lower() for c in text if c.isalpha() or c == ",")


def recipe_by_ingredients(db: sqlite3.Connection, ingredients: str) -> Any | None:
    """Pick a random recipe id whose ingredients match any comma-separated term."""
    with _transaction(db):
        db.execute("DROP TABLE IF EXISTS qingredients;")
        db.execute("CREATE TEMPORARY TABLE qingredients (ingredient_amount VARCHAR(200));")
        db.executemany(
            "INSERT INTO qingredients VALUES (?);",
            ((term,) for term in ingredients.split(",")),
        )
        rows = db.execute(
            "SELECT DISTINCT recipe_id FROM ingredients JOIN qingredients "
            "ON ingredients.ingredient_amount LIKE '%' || qingredients.ingredient_amount || '%' "
            "ORDER BY RANDOM() LIMIT 1;"
        ).fetchall()
    if len(rows) == 1:
        return rows[0][0]
    return None


def random_recipe_id(db: sqlite3.Connection) -> Any:
    """Return the id of a random recipe, raising RecipeLookupError if there are none."""
    try:
        row = db.execute("SELECT id FROM recipes ORDER BY RANDOM() LIMIT 1;").fetchone()
    except sqlite3.Error as exc:
        raise RecipeLookupError("random", str(exc)) from exc
    if row is None:
        raise RecipeLookupError("random", "no recipes in database")
    return row[0]


def _redirect_to(recipe_id: Any) -> Response:
    return redirect(f"/?id={recipe_id}", code=303)


def create_app(db_uri: str | None = None, static_dir: str | None = None) -> Flask:
    """Build the web application backed by the database at ``db_uri``."""
    db = open_database(get_db_uri(db_uri))
    static_dir = os.path.abspath(static_dir if static_dir is not None else DEFAULT_STATIC_DIR)
    app = Flask(__name__)
    app.extensions[_STATE_KEY] = _AppState(
        db=db,
        current_recipe=Recipe(id=0, title="thing", category="thingies", preparation="notreal"),
    )

    def state() -> _AppState:
        return app.extensions[_STATE_KEY]

    @app.get("/")
    def index() -> Response:
        st = state()
        with st.lock:
            recipe_id = request.args.get("id")
            if recipe_id is not None:
                try:
                    found, ingredients = recipes.get(st.db, recipe_id)
                except RecipeLookupError as exc:
                    log.warning("recipe fetch failed: %s", exc)
                    return Response(status=404)
                st.current_recipe = found
                page = IndexPage(found, ", ".join(ingredients))
                return Response(page.render(), mimetype="text/html")

            wanted = request.args.get("ingredients")
            if wanted is not None:
                log.info("recipe ingredients: %s", wanted)
                try:
                    chosen = recipe_by_ingredients(st.db, clean_ingredients(wanted))
                except sqlite3.Error as exc:
                    log.error("recipe by ingredients selection database error: %s", exc)
                    return Response(status=500)
                if chosen is not None:
                    return _redirect_to(chosen)
                log.info("recipe by ingredients selection was empty")

            try:
                chosen = random_recipe_id(st.db)
            except RecipeLookupError as exc:
                log.error("recipe selection failed: %s", exc)
                return Response(status=500)
            return _redirect_to(chosen)

    @app.get("/api/v1/recipe/<recipe_id>")
    def api_recipe(recipe_id: str) -> Response:
        st = state()
        with st.lock:
            try:
                found, ingredients = recipes.get(st.db, recipe_id)
            except RecipeLookupError as exc:
                log.warning("recipe fetch failed: %s", exc)
                return Response(status=404)
        return jsonify(JsonRecipe.from_parts(found, ingredients).to_dict())

    @app.get("/style.css")
    def stylesheet() -> Response:
        return send_from_directory(static_dir, "style.css", mimetype=CSS_MIME)

    @app.get("/favicon.ico")
    def favicon() -> Response:
        return send_from_directory(static_dir, "favicon.ico", mimetype=FAVICON_MIME)

    @app.errorhandler(404)
    def not_found(_error: Exception) -> Response:
        return Response("404 Not Found", status=404, mimetype="text/plain")

    @app.after_request
    def add_cors(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        if request.method == "OPTIONS":
            response.headers["Access-Control-Allow-Methods"] = "GET"
        return response

    return app