from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import (
    ConfigDict,
    PydanticSchemaGenerationError,
    PydanticUserError,
    TypeAdapter,
    ValidationError,
)

from .errors import DeserializationError, SerializationError

T = TypeVar("T")

# Raw bytes travel as base64 inside the JSON payload.
_BYTES_CONFIG = ConfigDict(val_json_bytes="base64")


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(type_, config=_BYTES_CONFIG)
    except PydanticSchemaGenerationError:
        raise
    except PydanticUserError:
        # Models, dataclasses and TypedDicts carry their own config.
        return TypeAdapter(type_)


def encode_value(value: Any) -> bytes:
    """
    Encode a value to JSON bytes.

    The payload carries no type information; the reader must supply the
    same type the writer used.
    """
    try:
        return pydantic_core.to_json(value, bytes_mode="base64")
    except pydantic_core.PydanticSerializationError as e:
        raise SerializationError(f"cannot encode value of type {type(value).__name__}: {e}") from e


def decode_value(raw: bytes, type_: type[T]) -> T:
    try:
        adapter = _adapter(type_)
    except (PydanticSchemaGenerationError, TypeError) as e:
        raise DeserializationError(f"cannot decode into {type_!r}: {e}") from e
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        raise DeserializationError(f"stored bytes are not a valid {type_!r}: {e}") from e
