"""Marshmallow schemas for Item."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validates_schema


class WholeNumber(fields.Int):
    """Integer field that refuses to truncate fractional numbers."""

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(value, float) and not value.is_integer():
            raise self.make_error("invalid", input=value)
        return super()._deserialize(value, attr, data, **kwargs)


class ItemSchema(Schema):
    """Serialize Item."""

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    qty = fields.Int(allow_none=True)


class ItemPayloadSchema(Schema):
    """Validate create/update Item payload."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(load_default=None, allow_none=True)
    qty = WholeNumber(load_default=None, allow_none=True)

    @pre_load
    def _blank_qty(self, data, **kwargs):  # type: ignore[no-untyped-def]
        # Any falsy qty means "use the default", even ones Int() would reject.
        if isinstance(data, dict) and "qty" in data and not data["qty"]:
            data = dict(data)
            data["qty"] = None
        return data

    @validates_schema
    def _require_name(self, data, **kwargs):  # type: ignore[no-untyped-def]
        if not data.get("name"):
            raise ValidationError("name required", field_name="name")
