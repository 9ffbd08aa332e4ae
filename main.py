"""Development entrypoint.

Exposes `app` without shadowing the `inventory/` package, so platforms
that look for an `app` object in `main.py` pick it up as well.
"""

from inventory import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=int(app.config["PORT"]), debug=bool(app.config.get("DEBUG")))
