"""WSGI entry point for the catalog application."""

import os

from app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))


if __name__ == "__main__":
    app.run(
        host=app.config["CATALOG_HOST"],
        port=app.config["CATALOG_PORT"],
        use_reloader=False,
    )
