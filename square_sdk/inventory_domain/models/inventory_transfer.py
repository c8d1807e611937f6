"""Inventory transfer record model."""

from dataclasses import dataclass, fields
from typing import Any, Optional

from square_sdk.common.serialization import json_codec
from square_sdk.common.serialization.json_codec import wire_field

from .source_application import SourceApplication


@dataclass(frozen=True)
class InventoryTransfer:
    """Records the movement of a quantity of a catalog object from one location to another.

    Every field is optional and None means absent. Values are stored as given:
    timestamps are RFC 3339 strings and ``quantity`` is a decimal string with up to
    5 fractional digits, but neither is checked here. ``occurred_at`` may be at most
    24 hours old and not in the future for write requests, and ``catalog_object_type``
    only supports ``ITEM_VARIATION``; the server enforces both (see
    ``transfer_validation`` for an opt-in client-side check).
    """

    id: Optional[str] = wire_field("id")  # assigned by Square
    reference_id: Optional[str] = wire_field("reference_id")
    state: Optional[str] = wire_field("state")  # see constants.InventoryState
    from_location_id: Optional[str] = wire_field("from_location_id")
    to_location_id: Optional[str] = wire_field("to_location_id")
    catalog_object_id: Optional[str] = wire_field("catalog_object_id")
    catalog_object_type: Optional[str] = wire_field("catalog_object_type")
    quantity: Optional[str] = wire_field("quantity")
    occurred_at: Optional[str] = wire_field("occurred_at")
    created_at: Optional[str] = wire_field("created_at")  # read-only
    source: Optional[SourceApplication] = wire_field("source", model=SourceApplication)
    employee_id: Optional[str] = wire_field("employee_id")

    @classmethod
    def wire_mapping(cls) -> dict[str, str]:
        """Attribute name to JSON key table."""
        return json_codec.field_mapping(cls)

    @classmethod
    def builder(cls) -> "InventoryTransferBuilder":
        return InventoryTransferBuilder()

    def to_builder(self) -> "InventoryTransferBuilder":
        """Returns a builder seeded with this transfer's values."""
        builder = InventoryTransferBuilder()
        builder._values.update(self._field_values())
        return builder

    def set_fields(self) -> list[str]:
        """Names of the attributes that hold a value, in declaration order."""
        return [name for name, value in self._field_values().items() if value is not None]

    def to_dict(self, include_nulls: bool | None = None) -> dict[str, Any]:
        return json_codec.to_dict(self, include_nulls=include_nulls)

    def to_json(self, include_nulls: bool | None = None, indent: int | None = None) -> str:
        return json_codec.to_json(self, include_nulls=include_nulls, indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InventoryTransfer":
        return json_codec.from_dict(cls, data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "InventoryTransfer":
        return json_codec.from_json(cls, text)

    def _field_values(self) -> dict[str, Any]:
        # Shallow on purpose: asdict() would turn ``source`` into a plain dict
        return {f.name: getattr(self, f.name) for f in fields(self)}


class InventoryTransferBuilder:
    """Accumulates transfer fields and produces immutable ``InventoryTransfer`` snapshots.

    Setters return the builder so calls can be chained. ``build()`` may be called
    any number of times; later setter calls never affect transfers already built.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {f.name: None for f in fields(InventoryTransfer)}

    def id(self, id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["id"] = id
        return self

    def reference_id(self, reference_id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["reference_id"] = reference_id
        return self

    def state(self, state: Optional[str]) -> "InventoryTransferBuilder":
        self._values["state"] = state
        return self

    def from_location_id(self, from_location_id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["from_location_id"] = from_location_id
        return self

    def to_location_id(self, to_location_id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["to_location_id"] = to_location_id
        return self

    def catalog_object_id(self, catalog_object_id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["catalog_object_id"] = catalog_object_id
        return self

    def catalog_object_type(self, catalog_object_type: Optional[str]) -> "InventoryTransferBuilder":
        self._values["catalog_object_type"] = catalog_object_type
        return self

    def quantity(self, quantity: Optional[str]) -> "InventoryTransferBuilder":
        self._values["quantity"] = quantity
        return self

    def occurred_at(self, occurred_at: Optional[str]) -> "InventoryTransferBuilder":
        self._values["occurred_at"] = occurred_at
        return self

    def created_at(self, created_at: Optional[str]) -> "InventoryTransferBuilder":
        self._values["created_at"] = created_at
        return self

    def source(self, source: Optional[SourceApplication]) -> "InventoryTransferBuilder":
        self._values["source"] = source
        return self

    def employee_id(self, employee_id: Optional[str]) -> "InventoryTransferBuilder":
        self._values["employee_id"] = employee_id
        return self

    def build(self) -> InventoryTransfer:
        return InventoryTransfer(**self._values)
