"""Tests for tgtypes/serde.py."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import AnyUrl

from tgtypes.bot import WebhookInfo
from tgtypes.errors import CodecRangeError, FieldDecodeError
from tgtypes.serde import (
    U64_MAX,
    decode_duration_secs,
    decode_optional_timestamp,
    decode_optional_url,
    decode_timestamp,
    encode_duration_secs,
    encode_optional_url,
    encode_timestamp,
)


class TestTimestamp:
    """Tests for the Unix timestamp codec."""

    def test_decode_is_utc(self):
        assert decode_timestamp(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_encode_decode_identity(self):
        assert encode_timestamp(decode_timestamp(1640359576)) == 1640359576

    def test_encode_drops_subseconds(self):
        value = datetime(2021, 12, 24, 15, 26, 16, 999999, tzinfo=UTC)
        assert encode_timestamp(value) == 1640359576

    def test_naive_datetime_treated_as_utc(self):
        assert encode_timestamp(datetime(1970, 1, 1, 0, 1)) == 60

    def test_rejects_non_integer(self):
        with pytest.raises(FieldDecodeError):
            decode_timestamp("1640359576")

    def test_rejects_bool(self):
        with pytest.raises(FieldDecodeError):
            decode_timestamp(True)

    def test_out_of_range(self):
        with pytest.raises(FieldDecodeError):
            decode_timestamp(10**20)

    def test_optional_none(self):
        assert decode_optional_timestamp(None) is None


class TestOptionalUrl:
    """Tests for the string-encoded optional URL codec."""

    def test_empty_string_is_none(self):
        assert decode_optional_url("") is None

    def test_garbage_is_none(self):
        assert decode_optional_url("not a url") is None

    def test_valid_url(self):
        url = decode_optional_url("https://example.com/hook")
        assert isinstance(url, AnyUrl)
        assert str(url) == "https://example.com/hook"

    def test_non_string_rejected(self):
        with pytest.raises(FieldDecodeError):
            decode_optional_url(42)

    def test_encode_none_is_empty_string(self):
        assert encode_optional_url(None) == ""

    def test_encode_url(self):
        assert encode_optional_url(AnyUrl("https://example.com/hook")) == "https://example.com/hook"

    def test_webhook_url_round_trip(self):
        """An unset webhook is sent back as "", not omitted or null."""
        info = WebhookInfo.from_wire(
            {"url": "", "has_custom_certificate": False, "pending_update_count": 0}
        )
        assert info.url is None
        assert info.to_wire()["url"] == ""


class TestDurationSecs:
    """Tests for the whole-seconds duration codec."""

    def test_decode(self):
        assert decode_duration_secs(13) == timedelta(seconds=13)

    def test_encode_truncates(self):
        assert encode_duration_secs(timedelta(seconds=13, milliseconds=900)) == 13

    def test_zero(self):
        assert decode_duration_secs(0) == timedelta(0)

    def test_negative_is_range_error(self):
        with pytest.raises(CodecRangeError) as exc_info:
            decode_duration_secs(-1)
        assert exc_info.value.value == -1

    def test_above_u64_is_range_error(self):
        with pytest.raises(CodecRangeError):
            decode_duration_secs(U64_MAX + 1)

    def test_u64_max_overflows_timedelta(self):
        """Fits the wire width but not timedelta: still a range error."""
        with pytest.raises(CodecRangeError):
            decode_duration_secs(U64_MAX)

    def test_range_error_is_field_error(self):
        assert issubclass(CodecRangeError, FieldDecodeError)
