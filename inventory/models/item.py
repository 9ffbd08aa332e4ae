"""Item ORM model."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory.models.base import Base


class Item(Base):
    """A named stock entry with a quantity."""

    __tablename__ = "items"
    # AUTOINCREMENT keeps sqlite from reusing ids of deleted rows.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    qty: Mapped[int | None] = mapped_column(Integer, nullable=True, default=1, server_default="1")

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, name={self.name!r}, qty={self.qty!r})"
