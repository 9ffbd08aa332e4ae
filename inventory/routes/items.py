"""Item routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from inventory.db import get_store
from inventory.schemas.item import ItemPayloadSchema, ItemSchema
from inventory.services.item_service import ItemService
from inventory.utils.responses import ok

items_bp = Blueprint("items", __name__)

_items_schema = ItemSchema(many=True)
_payload_schema = ItemPayloadSchema()


def _service() -> ItemService:
    return ItemService(get_store())


def _load_payload() -> dict:
    # Missing, malformed or non-object JSON behaves like an empty object.
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    return _payload_schema.load(payload)


@items_bp.get("/items")
def list_items():
    """List all items, newest first."""

    items = _service().list_items()
    return ok(_items_schema.dump(items))


@items_bp.post("/items")
def create_item():
    """Create a new item."""

    data = _load_payload()
    item_id = _service().create_item(name=data["name"], qty=data["qty"])
    return ok({"id": item_id}, status_code=201)


@items_bp.put("/items/<int:item_id>")
def update_item(item_id: int):
    """Replace name and qty of an item."""

    data = _load_payload()
    _service().update_item(item_id, name=data["name"], qty=data["qty"])
    return ok({"updated": True})


@items_bp.delete("/items/<int:item_id>")
def delete_item(item_id: int):
    """Delete an item."""

    _service().delete_item(item_id)
    return ok({"deleted": True})
