"""Generic JSON codec for record models that declare their wire mapping on dataclass fields.

A record model is a dataclass whose every field was declared with :func:`wire_field`.
The codec never validates values: strings stay opaque and are passed through as-is.
"""

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from square_sdk.common.config.settings import settings
from square_sdk.common.exceptions.custom_exceptions import SerializationError

logger = logging.getLogger(__name__)

WIRE_NAME = "wire_name"
NESTED_MODEL = "model"

T = TypeVar("T")


def wire_field(wire_name: str, model: type | None = None) -> Any:
    """Declares an optional model field stored under ``wire_name`` in JSON.

    ``model`` names the record class of a nested JSON object.
    """
    return dataclasses.field(default=None, metadata={WIRE_NAME: wire_name, NESTED_MODEL: model})


def is_model(obj: Any) -> bool:
    """True for record model classes and instances."""
    if not dataclasses.is_dataclass(obj):
        return False
    fields = dataclasses.fields(obj)
    return bool(fields) and all(WIRE_NAME in f.metadata for f in fields)


def field_mapping(model_cls: type) -> dict[str, str]:
    """Returns the ``{attribute_name: wire_key}`` table declared on a record model."""
    if not is_model(model_cls):
        raise SerializationError(f"{getattr(model_cls, '__name__', model_cls)!r} is not a record model")
    mapping = {f.name: f.metadata[WIRE_NAME] for f in dataclasses.fields(model_cls)}
    if len(set(mapping.values())) != len(mapping):
        raise SerializationError(f"Duplicate wire keys declared on {model_cls.__name__}")
    return mapping


def to_dict(model: Any, include_nulls: bool | None = None) -> dict[str, Any]:
    """Encodes a record model into a JSON-ready dict keyed by wire names.

    Absent (None) fields are omitted, or written as null when ``include_nulls`` is true.
    ``include_nulls`` defaults to ``settings.SERIALIZE_NULLS``.
    """
    if include_nulls is None:
        include_nulls = settings.SERIALIZE_NULLS
    if not is_model(model) or isinstance(model, type):
        raise SerializationError(f"Cannot encode {type(model).__name__}: not a record model instance")

    encoded: dict[str, Any] = {}
    for f in dataclasses.fields(model):
        value = getattr(model, f.name)
        if value is None:
            if include_nulls:
                encoded[f.metadata[WIRE_NAME]] = None
            continue
        if f.metadata.get(NESTED_MODEL) is not None:
            value = to_dict(value, include_nulls=include_nulls)
        encoded[f.metadata[WIRE_NAME]] = value
    return encoded


def from_dict(model_cls: type[T], data: Mapping[str, Any]) -> T:
    """Decodes a wire-keyed mapping into ``model_cls``. Missing keys and nulls become None."""
    if not isinstance(data, Mapping):
        raise SerializationError(f"Expected a JSON object for {model_cls.__name__}, got {type(data).__name__}")

    field_mapping(model_cls)  # rejects classes that aren't record models
    kwargs: dict[str, Any] = {}
    known_keys = set()
    for f in dataclasses.fields(model_cls):
        wire_name = f.metadata[WIRE_NAME]
        known_keys.add(wire_name)
        value = data.get(wire_name)
        nested_cls = f.metadata.get(NESTED_MODEL)
        if value is not None and nested_cls is not None:
            value = from_dict(nested_cls, value)
        kwargs[f.name] = value

    unknown = set(data) - known_keys
    if unknown:
        logger.debug(f"Ignoring unknown keys for {model_cls.__name__}: {sorted(unknown)}")

    return model_cls(**kwargs)


def to_json(model: Any, include_nulls: bool | None = None, indent: int | None = None) -> str:
    """Encodes a record model (or a list of them) as a JSON string."""
    if isinstance(model, list):
        payload: Any = [to_dict(item, include_nulls=include_nulls) for item in model]
    else:
        payload = to_dict(model, include_nulls=include_nulls)
    try:
        return json.dumps(payload, indent=indent)
    except (TypeError, ValueError) as e:
        raise SerializationError("Model holds values that cannot be written as JSON", original_exception=e)


def from_json(model_cls: type[T], text: str | bytes) -> T:
    """Decodes a JSON object string into ``model_cls``."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise SerializationError(f"Invalid JSON for {model_cls.__name__}", original_exception=e)
    return from_dict(model_cls, data)
