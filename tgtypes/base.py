"""Base model shared by every wire type."""

import json
from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError, model_serializer

from .errors import FieldDecodeError, decode_error_from


def drop_none(data: Any) -> Any:
    """Remove ``None`` values from a serialized object (optional fields are omitted, never null)."""
    if isinstance(data, Mapping):
        return {key: value for key, value in data.items() if value is not None}
    return data


class WireModel(BaseModel):
    """Immutable record mirroring one Bot API object.

    Unknown wire keys are ignored. ``None`` fields are left out of the
    serialized form.
    """

    # Strict: a wire value of the wrong JSON type is an error, never coerced
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", strict=True)

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler):
        return drop_none(handler(self))

    @classmethod
    def from_wire(cls, data: Any) -> Self:
        """Decode a parsed JSON object, raising only ``DecodeError`` subclasses."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise decode_error_from(e) from e

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise FieldDecodeError(None, f"invalid JSON: {e}") from e
        return cls.from_wire(data)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON object the Bot API expects."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with some fields changed (builder-style setter)."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        try:
            return type(self)(**values)
        except ValidationError as e:
            raise decode_error_from(e) from e
