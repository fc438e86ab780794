import pytest

from recipeserver.errors import (
    InvalidDbUri,
    RecipeError,
    RecipeLookupError,
    RecipeMisformat,
    RecipesNotFound,
)


def test_invalid_db_uri_message_and_attribute():
    err = InvalidDbUri("mysql://nope")
    assert str(err) == "invalid database uri: mysql://nope"
    assert err.uri == "mysql://nope"


def test_recipes_not_found_wraps_os_error():
    cause = FileNotFoundError(2, "No such file or directory")
    err = RecipesNotFound(cause)
    assert err.cause is cause
    assert str(err) == f"could not find recipe file: {cause}"


def test_recipe_misformat_wraps_cause():
    cause = ValueError("bad json")
    err = RecipeMisformat(cause)
    assert err.cause is cause
    assert str(err) == "could not read recipe file: bad json"


def test_lookup_error_keeps_id():
    err = RecipeLookupError("42")
    assert err.recipe_id == "42"
    assert "42" in str(err)


@pytest.mark.parametrize(
    "exc",
    [
        InvalidDbUri("x"),
        RecipesNotFound(OSError("x")),
        RecipeMisformat("x"),
        RecipeLookupError(1),
    ],
)
def test_all_errors_caught_as_recipe_error(exc):
    with pytest.raises(RecipeError) as info:
        raise exc
    assert info.value is exc