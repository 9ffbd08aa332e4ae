from __future__ import annotations

import pytest

from inventory import create_app
from inventory.db import create_app_engine, get_store
from inventory.repositories.item_store import ItemStore


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'items.db'}"


@pytest.fixture()
def store(database_url):
    item_store = ItemStore(create_app_engine(database_url))
    item_store.create_schema()
    yield item_store
    item_store.engine.dispose()


@pytest.fixture()
def app(database_url):
    flask_app = create_app({"TESTING": True, "DATABASE_URL": database_url})
    yield flask_app
    with flask_app.app_context():
        get_store().engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()
