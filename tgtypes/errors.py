"""Decoding errors raised while turning wire records into typed values.

Every failure is local to the record being decoded: nothing is partially
constructed, and the caller gets one of the exceptions below.
"""

from collections.abc import Sequence
from typing import Self

from pydantic import ValidationError


class DecodeError(ValueError):
    """Base class for wire-record decoding failures.

    Subclasses ``ValueError`` so pydantic reports it like any other validator
    failure; ``decode_error_from`` unwraps it again at the public boundary.
    """

    def __init__(self, reason: str, key: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.key = key

    def at(self, prefix: str) -> Self:
        """Prefix the offending key with the path of the enclosing field."""
        if prefix:
            self.key = f"{prefix}.{self.key}" if self.key else prefix
        return self

    def __str__(self) -> str:
        if self.key:
            return f"{self.key}: {self.reason}"
        return self.reason


class FieldDecodeError(DecodeError):
    """A present field has the wrong shape or type for its target."""

    def __init__(self, key: str | None, reason: str):
        super().__init__(reason, key)


class CodecRangeError(FieldDecodeError):
    """A numeric wire value does not fit the width of its target type."""

    def __init__(self, value: int, reason: str, key: str | None = None):
        super().__init__(key, reason)
        self.value = value


class MissingVariantError(DecodeError):
    """No candidate of an untagged union matched the record."""

    def __init__(self, union: str, keys: Sequence[str] = (), key: str | None = None):
        if union == "MessageKind":
            reason = "no matching message kind"
        else:
            reason = f"no matching {union} variant"
        super().__init__(reason, key)
        self.union = union
        self.keys = tuple(keys)


def decode_error_from(exc: ValidationError) -> DecodeError:
    """Translate a pydantic ``ValidationError`` into the decode taxonomy.

    Only the first error is reported. Errors that already belong to the
    taxonomy keep their class and get the dotted field path prepended.
    """
    errors = exc.errors(include_url=False)
    if not errors:
        return FieldDecodeError(None, str(exc))
    first = errors[0]
    path = ".".join(str(part) for part in first["loc"])
    cause = first.get("ctx", {}).get("error")
    if isinstance(cause, DecodeError):
        return cause.at(path)
    return FieldDecodeError(path or None, first["msg"])
