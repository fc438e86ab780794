"""HTML rendering of the recipe index page."""

from dataclasses import dataclass
from html import escape

from .recipe import Recipe

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<link rel="stylesheet" href="{stylesheet}">
</head>
<body>
<h1>{title}</h1>
<p class="category">{category}</p>
<h2>Ingredients</h2>
<p class="ingredients">{ingredients}</p>
<h2>Preparation</h2>
<p class="preparation">{preparation}</p>
</body>
</html>
"""


@dataclass(frozen=True)
class IndexPage:
    """The index page showing one recipe."""

    recipe: Recipe
    ingredients: str
    stylesheet: str = "style.css"

    def render(self):
        """Return the page as HTML with every value escaped."""
        return _PAGE.format(
            title=escape(self.recipe.title),
            stylesheet=escape(self.stylesheet),
            category=escape(self.recipe.category),
            ingredients=escape(self.ingredients),
            preparation=escape(self.recipe.preparation),
        )

    __str__ = render