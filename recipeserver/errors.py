"""Exceptions raised while loading, storing and looking up recipes."""


class RecipeError(Exception):
    """Base class for every recipe server error."""


class RecipesNotFound(RecipeError):
    """The recipe file could not be opened."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"could not find recipe file: {cause}")


class RecipeMisformat(RecipeError):
    """The recipe file does not hold valid recipes."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"could not read recipe file: {cause}")


class InvalidDbUri(RecipeError):
    """A database URI that does not name an SQLite database file."""

    def __init__(self, uri):
        self.uri = uri
        super().__init__(f"invalid database uri: {uri}")


class RecipeLookupError(RecipeError):
    """A recipe could not be fetched from the database."""

    def __init__(self, recipe_id, reason="no such recipe"):
        self.recipe_id = recipe_id
        self.reason = reason
        super().__init__(f"recipe {recipe_id}: {reason}")