"""Command line entry point that loads recipes and runs the server."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from collections.abc import Sequence

from .errors import RecipeError
from .recipe import read_recipes
from .store import get_db_uri, load_recipes, open_database
from .web import create_app

HOST = "127.0.0.1"
PORT = 3000


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="recipes-server", description="Serve recipes over HTTP.")
    parser.add_argument("-i", "--init-from", dest="init_from", help="JSON file of recipes to load")
    parser.add_argument("-d", "--db-uri", dest="db_uri", help="SQLite database URI")
    return parser.parse_args(argv)


def serve(argv: Sequence[str] | None = None) -> None:
    """Prepare the database, optionally load recipes, and run the server."""
    args = parse_args(argv)
    db_uri = get_db_uri(args.db_uri)

    db = open_database(db_uri)
    try:
        if args.init_from is not None:
            load_recipes(db, read_recipes(args.init_from))
    finally:
        db.close()

    logging.basicConfig(level=logging.INFO)
    app = create_app(db_uri)
    app.run(host=HOST, port=PORT)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server, reporting fatal errors on stderr; return the exit status."""
    try:
        serve(argv)
    except (RecipeError, OSError, sqlite3.Error) as err:
        print(f"recipes-server: error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())