"""Service layer for item business logic."""

from __future__ import annotations

from collections.abc import Sequence

from inventory.errors import NotFoundError
from inventory.models.item import Item
from inventory.repositories.item_store import ItemStore


class ItemService:
    """Item use-cases."""

    def __init__(self, store: ItemStore) -> None:
        self._store = store

    def list_items(self) -> Sequence[Item]:
        return self._store.list_all()

    def create_item(self, name: str, qty: int | None = None) -> int:
        return self._store.insert(name, qty)

    def update_item(self, item_id: int, name: str, qty: int | None = None) -> None:
        if self._store.update(item_id, name, qty) == 0:
            raise NotFoundError()

    def delete_item(self, item_id: int) -> None:
        if self._store.delete(item_id) == 0:
            raise NotFoundError()
