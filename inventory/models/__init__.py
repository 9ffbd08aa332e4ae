"""ORM models."""

from inventory.models.item import Item

__all__ = ["Item"]
