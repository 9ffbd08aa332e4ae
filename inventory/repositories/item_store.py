"""Persistence for Item rows.

Every operation runs in its own short transaction. Driver failures are
re-raised as :class:`StorageError` with the driver's message untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from inventory.errors import StorageError, ValidationError
from inventory.models.base import Base
from inventory.models.item import Item

logger = logging.getLogger(__name__)

DEFAULT_QTY = 1

# sqlite INTEGER is a signed 64-bit value; wider ids cannot exist.
MAX_ROW_ID = 2**63 - 1


def _storage_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _require_name(name: Any) -> None:
    if not name:
        raise ValidationError("name required")


def _storable_id(item_id: int) -> bool:
    return -MAX_ROW_ID - 1 <= item_id <= MAX_ROW_ID


def _qty_or_default(qty: Any) -> Any:
    # Falsy values (None, 0, "") fall back to the default; no range check.
    return qty or DEFAULT_QTY


class ItemStore:
    """CRUD operations over the ``items`` table."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        try:
            with self._session_factory.begin() as session:
                yield session
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Item store failed to %s", action, exc_info=exc)
            raise StorageError(_storage_message(exc)) from exc

    def create_schema(self) -> None:
        """Create the items table if it does not exist yet."""

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StorageError(_storage_message(exc)) from exc

    def list_all(self) -> Sequence[Item]:
        """Return every item, newest id first."""

        with self._transaction("list items") as session:
            stmt = select(Item).order_by(Item.id.desc())
            return list(session.scalars(stmt).all())

    def insert(self, name: str, qty: int | None = None) -> int:
        """Store a new item and return its assigned id."""

        _require_name(name)
        with self._transaction("insert item") as session:
            item = Item(name=name, qty=_qty_or_default(qty))
            session.add(item)
            session.flush()  # assign PK
            item_id = item.id

        logger.info("Created item %s", item_id)
        return item_id

    def update(self, item_id: int, name: str, qty: int | None = None) -> int:
        """Overwrite name and qty of an item; returns the affected row count."""

        _require_name(name)
        if not _storable_id(item_id):
            return 0
        with self._transaction("update item") as session:
            stmt = (
                update(Item)
                .where(Item.id == item_id)
                .values(name=name, qty=_qty_or_default(qty))
                .execution_options(synchronize_session=False)
            )
            changed = session.execute(stmt).rowcount

        if changed:
            logger.info("Updated item %s", item_id)
        return changed

    def delete(self, item_id: int) -> int:
        """Remove an item; returns the affected row count."""

        if not _storable_id(item_id):
            return 0
        with self._transaction("delete item") as session:
            stmt = delete(Item).where(Item.id == item_id).execution_options(synchronize_session=False)
            removed = session.execute(stmt).rowcount

        if removed:
            logger.info("Deleted item %s", item_id)
        return removed
