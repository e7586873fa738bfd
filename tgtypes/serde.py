"""Field-level codecs for scalars the Bot API encodes unusually.

Each codec is a pair of plain functions plus an ``Annotated`` alias that
attaches the pair to a pydantic field:

- ``UnixTimestamp`` / ``OptionalUnixTimestamp``: integer seconds since epoch.
- ``OptionalUrl``: a URL carried as a string, with ``""`` meaning "not set".
- ``DurationSecs``: a non-negative integer number of seconds.
- ``Url``: a required URL string.
"""

from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from loguru import logger
from pydantic import (
    AnyUrl,
    BeforeValidator,
    PlainSerializer,
    PlainValidator,
    TypeAdapter,
    ValidationError,
)

from .errors import CodecRangeError, FieldDecodeError

U64_MAX = (1 << 64) - 1

_URL_ADAPTER = TypeAdapter(AnyUrl)
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _require_int(wire: Any, what: str) -> int:
    # bool is an int subclass but never a valid wire integer
    if isinstance(wire, bool) or not isinstance(wire, int):
        raise FieldDecodeError(None, f"expected an integer {what}, got {type(wire).__name__}")
    return wire


# =============================================================================
# Unix timestamps
# =============================================================================


def decode_timestamp(wire: Any) -> datetime:
    """Decode seconds since the Unix epoch into an aware UTC datetime."""
    seconds = _require_int(wire, "timestamp")
    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise FieldDecodeError(None, f"timestamp {seconds} is out of range") from e


def encode_timestamp(value: datetime) -> int:
    """Encode a datetime as whole seconds since the epoch (sub-second part dropped)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // timedelta(seconds=1)


def decode_optional_timestamp(wire: Any) -> datetime | None:
    if wire is None:
        return None
    return decode_timestamp(wire)


def encode_optional_timestamp(value: datetime | None) -> int | None:
    # None is dropped from the output object by WireModel
    if value is None:
        return None
    return encode_timestamp(value)


def _validate_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return decode_timestamp(value)


def _validate_optional_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    return _validate_timestamp(value)


# =============================================================================
# Optional URL carried as a string
# =============================================================================


def decode_optional_url(wire: Any) -> AnyUrl | None:
    """Decode a string into a URL, or ``None``.

    Never fails on strings: the empty string and anything that does not
    parse as a URL both decode to ``None``. Non-string values are rejected.
    """
    if not isinstance(wire, str):
        raise FieldDecodeError(None, f"expected a URL string, got {type(wire).__name__}")
    if not wire:
        return None
    try:
        return _URL_ADAPTER.validate_python(wire)
    except ValidationError:
        logger.debug("Discarding unparsable URL: {!r}", wire)
        return None


def encode_optional_url(value: AnyUrl | None) -> str:
    if value is None:
        return ""
    return str(value)


def _validate_optional_url(value: Any) -> AnyUrl | None:
    if value is None or isinstance(value, AnyUrl):
        return value
    return decode_optional_url(value)


# =============================================================================
# Durations in whole seconds
# =============================================================================


def decode_duration_secs(wire: Any) -> timedelta:
    """Decode a non-negative integer number of seconds.

    Raises ``CodecRangeError`` when the value is negative or does not fit an
    unsigned 64-bit integer (or ``timedelta`` itself).
    """
    seconds = _require_int(wire, "duration")
    if seconds < 0 or seconds > U64_MAX:
        raise CodecRangeError(seconds, f"duration {seconds} does not fit an unsigned 64-bit integer")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise CodecRangeError(seconds, f"duration {seconds} is too large") from e


def encode_duration_secs(value: timedelta) -> int:
    return value // timedelta(seconds=1)


def _validate_duration(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise CodecRangeError(encode_duration_secs(value), "duration must not be negative")
        return value
    return decode_duration_secs(value)


UnixTimestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(encode_timestamp, return_type=int),
]

OptionalUnixTimestamp = Annotated[
    datetime | None,
    PlainValidator(_validate_optional_timestamp),
    PlainSerializer(encode_optional_timestamp, return_type=int | None),
]

OptionalUrl = Annotated[
    AnyUrl | None,
    PlainValidator(_validate_optional_url),
    PlainSerializer(encode_optional_url, return_type=str),
]

DurationSecs = Annotated[
    timedelta,
    PlainValidator(_validate_duration),
    PlainSerializer(encode_duration_secs, return_type=int),
]


def _parse_url(value: Any) -> Any:
    if isinstance(value, str):
        return _URL_ADAPTER.validate_python(value)
    return value


# A required URL; unlike ``OptionalUrl`` an unparsable string is an error
Url = Annotated[AnyUrl, BeforeValidator(_parse_url)]
