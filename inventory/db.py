"""SQLAlchemy engine construction and store wiring.

The store is built once per application and kept in ``app.extensions``;
request handlers reach it through :func:`get_store`.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from inventory.repositories.item_store import ItemStore

logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_app_engine(database_url: str) -> Engine:
    # An in-memory sqlite database lives inside one connection, so every
    # checkout has to share it.
    if _is_memory_sqlite(database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )

    return create_engine(database_url, pool_pre_ping=True, future=True)


def init_db(app: Flask, store: ItemStore | None = None) -> ItemStore:
    """Attach an item store to the app and make sure its table exists.

    Args:
        app: Flask application being configured.
        store: Pre-built store to use instead of one built from
            ``DATABASE_URL``.

    Returns:
        The store registered on the app.
    """

    if store is None:
        engine = create_app_engine(str(app.config["DATABASE_URL"]))
        store = ItemStore(engine)

    # Create-if-absent; production would use migrations.
    store.create_schema()
    logger.info("Item store ready on %s", store.engine.url.render_as_string(hide_password=True))

    app.extensions["store"] = store
    return store


def get_store() -> ItemStore:
    """Get the item store of the current application."""

    store: ItemStore | None = current_app.extensions.get("store")
    if store is None:
        raise RuntimeError("Item store not initialized")
    return store
