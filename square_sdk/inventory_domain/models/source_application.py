"""Source application value object."""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from square_sdk.common.serialization import json_codec
from square_sdk.common.serialization.json_codec import wire_field


@dataclass(frozen=True)  # Value objects are immutable
class SourceApplication:
    """Information about the application that generated an inventory change."""

    product: Optional[str] = wire_field("product")  # see constants.Product
    application_id: Optional[str] = wire_field("application_id")
    name: Optional[str] = wire_field("name")

    @classmethod
    def builder(cls) -> "SourceApplicationBuilder":
        return SourceApplicationBuilder()

    def to_builder(self) -> "SourceApplicationBuilder":
        return SourceApplicationBuilder(**asdict(self))

    def to_dict(self, include_nulls: bool | None = None) -> dict[str, Any]:
        return json_codec.to_dict(self, include_nulls=include_nulls)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceApplication":
        return json_codec.from_dict(cls, data)


class SourceApplicationBuilder:
    def __init__(
        self, product: Optional[str] = None, application_id: Optional[str] = None, name: Optional[str] = None
    ) -> None:
        self._product = product
        self._application_id = application_id
        self._name = name

    def product(self, product: Optional[str]) -> "SourceApplicationBuilder":
        self._product = product
        return self

    def application_id(self, application_id: Optional[str]) -> "SourceApplicationBuilder":
        self._application_id = application_id
        return self

    def name(self, name: Optional[str]) -> "SourceApplicationBuilder":
        self._name = name
        return self

    def build(self) -> SourceApplication:
        return SourceApplication(product=self._product, application_id=self._application_id, name=self._name)
