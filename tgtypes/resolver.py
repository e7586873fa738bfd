"""Structural (untagged) discrimination of wire records.

The Bot API does not tag its unions: the kind of a message, of its media,
or of a forward origin is implied by which keys are present. A union is
described here as an ordered tuple of ``Variant`` entries and resolved
first-match-wins. The order is part of the contract because the API
duplicates some fields for backward compatibility (a venue also carries a
bare ``location``, an animation also carries a bare ``document``).
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

from loguru import logger
from pydantic import BaseModel, ValidationError

from .errors import FieldDecodeError, MissingVariantError, decode_error_from

Record = Mapping[str, Any]


class Variant(NamedTuple):
    """One candidate of an untagged union: a presence test and a constructor."""

    name: str
    matches: Callable[[Record], bool]
    build: Callable[[Record], Any]


def _present(data: Record, key: str) -> bool:
    # An explicit null counts as absent
    return data.get(key) is not None


def requires(*keys: str) -> Callable[[Record], bool]:
    """Match records carrying every one of ``keys``."""

    def matches(data: Record) -> bool:
        return all(_present(data, key) for key in keys)

    return matches


def requires_any(*keys: str) -> Callable[[Record], bool]:
    """Match records carrying at least one of ``keys``."""

    def matches(data: Record) -> bool:
        return any(_present(data, key) for key in keys)

    return matches


def model_variant(name: str, model: type[BaseModel], *keys: str) -> Variant:
    return Variant(name, requires(*keys), model.model_validate)


def classify(variants: Sequence[Variant], data: Record) -> str | None:
    """Name of the first variant whose keys are present, without building it."""
    for variant in variants:
        if variant.matches(data):
            return variant.name
    return None


def resolve(union: str, variants: Sequence[Variant], data: Any) -> Any:
    """Build the first matching variant of ``union`` from ``data``.

    Raises:
        FieldDecodeError: ``data`` is not an object, or the chosen variant
            has a malformed field. Later variants are not tried.
        MissingVariantError: no variant's keys are present.
    """
    if not isinstance(data, Mapping):
        raise FieldDecodeError(None, f"expected an object for {union}, got {type(data).__name__}")

    for variant in variants:
        if not variant.matches(data):
            continue
        try:
            return variant.build(data)
        except ValidationError as e:
            logger.debug("{} record matched {} but failed to decode", union, variant.name)
            raise decode_error_from(e) from e

    logger.debug("{} record matched no variant (keys: {})", union, sorted(data))
    raise MissingVariantError(union, sorted(data))
