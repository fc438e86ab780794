# recipeserver

A small web server that shows recipes kept in an SQLite database. It picks a
random recipe, shows a recipe by id, or finds one that uses the ingredients you
name. It also offers a JSON API.

## Installing

```
pip install .
```

## Running

```
recipeserver
```

The server listens on `http://127.0.0.1:3000`.

### Options

- `-d`, `--db-uri URI`: the database to use. It must have the form
  `sqlite://path/to/file.db`. If this option is not given, the `DB_URI`
  environment variable is used. If that is not set either, the default is
  `sqlite://db.db`. The database and the directory that holds it are created
  if they do not exist yet.
- `-i`, `--init-from FILE`: load recipes from a JSON file before the server
  starts. Each recipe goes in as a single transaction. A recipe that cannot be
  inserted, for example because its id is already taken, is reported on
  standard error and skipped.

The JSON file holds a list of recipes:

```json
[
  {
    "id": 1,
    "title": "Pancakes",
    "category": "breakfast",
    "ingredient_amount": ["2 eggs", "1 cup flour", "1 cup milk"],
    "preparation": "Whisk everything together and fry in a hot pan."
  }
]
```

## Pages and endpoints

- `GET /`: redirects to a random recipe.
- `GET /?id=<id>`: shows the recipe with that id as an HTML page.
- `GET /?ingredients=egg,flour`: redirects to a random recipe whose
  ingredients contain any of the listed words. Only letters and commas in the
  query are kept, and case is ignored. If no recipe matches, it redirects to a
  random recipe instead.
- `GET /api/v1/recipe/<id>`: the recipe as JSON, in the same shape as the
  input file. It answers 404 if there is no such recipe.
- `/style.css` and `/favicon.ico` are served from `assets/static/`.

Any other path answers `404 Not Found`.

## Using it from Python

```python
from recipeserver.web import create_app

app = create_app("sqlite://recipes/db.db")
app.run(host="127.0.0.1", port=3000)
```

`recipeserver.store` opens and migrates a database (`open_database`) and loads
recipes into it (`load_recipes`). `recipeserver.recipe.read_recipes` reads a
recipe JSON file.