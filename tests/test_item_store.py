from __future__ import annotations

import pytest
from sqlalchemy import text

from inventory.errors import StorageError, ValidationError


def test_insert_then_list_contains_item(store):
    item_id = store.insert("Pen", 3)

    items = store.list_all()
    matching = [it for it in items if it.id == item_id]
    assert len(matching) == 1
    assert (matching[0].name, matching[0].qty) == ("Pen", 3)


def test_insert_assigns_fresh_ids(store):
    first = store.insert("Pen")
    second = store.insert("Pen")
    assert second > first


@pytest.mark.parametrize("qty", [None, 0, ""])
def test_falsy_qty_defaults_to_one(store, qty):
    item_id = store.insert("Stapler", qty)
    assert store.list_all()[0].id == item_id
    assert store.list_all()[0].qty == 1


def test_insert_without_qty_defaults_to_one(store):
    store.insert("Stapler")
    assert store.list_all()[0].qty == 1


def test_negative_qty_is_kept(store):
    store.insert("Eraser", -2)
    assert store.list_all()[0].qty == -2


def test_insert_requires_name(store):
    with pytest.raises(ValidationError) as excinfo:
        store.insert("", 2)
    assert excinfo.value.message == "name required"
    assert store.list_all() == []


def test_list_all_orders_by_id_descending(store):
    for name in ("a", "b", "c", "d"):
        store.insert(name)

    ids = [it.id for it in store.list_all()]
    assert ids == sorted(ids, reverse=True)
    assert len(set(ids)) == 4


def test_list_all_empty(store):
    assert store.list_all() == []


def test_update_round_trip(store):
    item_id = store.insert("Pencil", 5)

    assert store.update(item_id, "Marker", 7) == 1

    (item,) = store.list_all()
    assert (item.id, item.name, item.qty) == (item_id, "Marker", 7)


def test_update_with_falsy_qty_resets_to_one(store):
    item_id = store.insert("Pencil", 5)
    store.update(item_id, "Pencil", 0)
    assert store.list_all()[0].qty == 1


def test_update_missing_id_returns_zero(store):
    assert store.update(999, "Ghost", 1) == 0


def test_update_requires_name(store):
    item_id = store.insert("Pencil", 5)
    with pytest.raises(ValidationError):
        store.update(item_id, "", 1)
    assert store.list_all()[0].name == "Pencil"


def test_delete_existing_and_missing(store):
    item_id = store.insert("Pen")

    assert store.delete(item_id) == 1
    assert store.delete(item_id) == 0
    assert store.delete(12345) == 0
    assert store.list_all() == []


def test_ids_not_reused_after_delete(store):
    first = store.insert("Pen")
    store.delete(first)
    assert store.insert("Pen") > first


def test_create_schema_is_idempotent(store):
    store.insert("Pen")
    store.create_schema()
    assert len(store.list_all()) == 1


def test_storage_fault_raises_storage_error(store):
    with store.engine.begin() as conn:
        conn.execute(text("DROP TABLE items"))

    with pytest.raises(StorageError) as excinfo:
        store.list_all()
    assert "no such table: items" in excinfo.value.message

    with pytest.raises(StorageError):
        store.insert("Pen")


def test_update_and_delete_out_of_range_id_return_zero(store):
    store.insert("Pen")
    huge = 2**64

    assert store.update(huge, "Ghost", 1) == 0
    assert store.delete(huge) == 0
    assert store.delete(-huge) == 0
    assert len(store.list_all()) == 1


def test_oversized_qty_raises_storage_error(store):
    with pytest.raises(StorageError) as excinfo:
        store.insert("Pen", 10**20)
    assert "too large" in excinfo.value.message
    assert store.list_all() == []
