"""Recipe records, the JSON recipe format and recipe lookup."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass

from .errors import RecipeLookupError, RecipeMisformat, RecipesNotFound

_FIELDS = ("id", "title", "category", "ingredient_amount", "preparation")


@dataclass(frozen=True)
class Recipe:
    """A recipe as stored in the ``recipes`` table."""

    id: int
    title: str
    category: str
    preparation: str


@dataclass(frozen=True)
class JsonRecipe:
    """A recipe together with its set of ingredient amounts."""

    id: int
    title: str
    category: str
    ingredient_amount: frozenset = frozenset()
    preparation: str = ""

    @classmethod
    def from_parts(cls, recipe, ingredients):
        """Combine a stored recipe with its ingredients."""
        return cls(recipe.id, recipe.title, recipe.category,
                   frozenset(ingredients), recipe.preparation)

    @classmethod
    def from_dict(cls, data):
        """Build a recipe from decoded JSON, raising RecipeMisformat if it is invalid."""
        try:
            values = {name: data[name] for name in _FIELDS}
        except (KeyError, TypeError, IndexError) as exc:
            raise RecipeMisformat(f"invalid recipe: {exc}") from None
        ingredients = values["ingredient_amount"]
        valid = (
            type(values["id"]) is int
            and -(2**63) <= values["id"] < 2**63
            and all(isinstance(values[n], str) for n in ("title", "category", "preparation"))
            and isinstance(ingredients, list)
            and all(isinstance(i, str) for i in ingredients)
        )
        if not valid:
            raise RecipeMisformat(f"invalid recipe: {data!r}")
        return cls(**{**values, "ingredient_amount": frozenset(ingredients)})

    def to_recipe(self):
        """Split into the stored recipe and an iterator over its ingredients."""
        recipe = Recipe(self.id, self.title, self.category, self.preparation)
        return recipe, iter(sorted(self.ingredient_amount))

    def to_dict(self):
        """Return the JSON-ready form of this recipe."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "ingredient_amount": sorted(self.ingredient_amount),
            "preparation": self.preparation,
        }


def read_recipes(path):
    """Read a JSON file holding a list of recipes."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise RecipesNotFound(exc) from exc
    except ValueError as exc:
        raise RecipeMisformat(exc) from exc
    if not isinstance(data, list):
        raise RecipeMisformat("expected a list of recipes")
    return [JsonRecipe.from_dict(item) for item in data]


def get(db: sqlite3.Connection, recipe_id):
    """Fetch a recipe and its ingredient amounts, raising RecipeLookupError if absent."""
    try:
        row = db.execute(
            "SELECT id, title, category, preparation FROM recipes WHERE id = ?;",
            (recipe_id,),
        ).fetchone()
        if row is None:
            raise RecipeLookupError(recipe_id)
        rows = db.execute(
            "SELECT ingredient_amount FROM ingredients WHERE recipe_id = ?;",
            (recipe_id,),
        ).fetchall()
    except sqlite3.Error as exc:
        raise RecipeLookupError(recipe_id, str(exc)) from exc
    return Recipe(*row), [amount for (amount,) in rows]