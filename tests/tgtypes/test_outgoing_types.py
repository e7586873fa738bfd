"""Tests for types sent to the Bot API: files, media, keyboards, inline results."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from tgtypes.bot import BotCommand
from tgtypes.inline_query_result import InlineQueryResultLocation, InputTextMessageContent
from tgtypes.input_file import InputFile
from tgtypes.input_media import InputMediaPhoto, InputMediaVideo, ParseMode
from tgtypes.markup import InlineKeyboardButton, InlineKeyboardMarkup


class TestInputFile:
    """Tests for InputFile."""

    def test_string_url(self):
        assert InputFile.model_validate("https://example.com/a.webp").url == "https://example.com/a.webp"

    def test_string_file_id(self):
        assert InputFile.model_validate("CAADAgADIwAD").file_id == "CAADAgADIwAD"

    def test_file_id_serializes_as_string(self):
        assert InputFile.from_file_id("CAADAgADIwAD").to_wire() == "CAADAgADIwAD"

    def test_upload_serializes_as_attach(self):
        upload = InputFile.from_bytes(b"RIFF", "s.webp")
        assert upload.is_upload
        assert upload.to_wire() == f"attach://{upload.attach_id}"
        assert upload.read() == b"RIFF"

    def test_from_path(self, tmp_path: Path):
        path = tmp_path / "sticker.webp"
        path.write_bytes(b"data")
        upload = InputFile.from_path(path)
        assert upload.filename == "sticker.webp"
        assert upload.read() == b"data"

    def test_exactly_one_source(self):
        with pytest.raises(ValidationError):
            InputFile(file_id="a", url="https://example.com")
        with pytest.raises(ValidationError):
            InputFile()

    def test_remote_file_has_no_contents(self):
        with pytest.raises(ValueError):
            InputFile.from_url("https://example.com/a").read()

    def test_path_accepts_string(self):
        assert InputFile(path="stickers/a.webp").path == Path("stickers/a.webp")


class TestInputMedia:
    """Tests for album items."""

    def test_photo_wire(self):
        media = InputMediaPhoto(media=InputFile.from_file_id("p"), caption="*hi*", parse_mode=ParseMode.MARKDOWN_V2)
        assert media.to_wire() == {
            "type": "photo",
            "media": "p",
            "caption": "*hi*",
            "parse_mode": "MarkdownV2",
        }

    def test_video_duration(self):
        media = InputMediaVideo(media="https://example.com/v.mp4", duration=timedelta(seconds=90))
        wire = media.to_wire()
        assert wire["type"] == "video"
        assert wire["duration"] == 90

    def test_parse_mode_from_string(self):
        media = InputMediaPhoto(media="p", parse_mode="HTML")
        assert media.parse_mode is ParseMode.HTML



class TestMarkup:
    """Tests for keyboards and commands."""

    def test_append_row(self):
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton.callback("a", "1")]])
        grown = markup.append_row([InlineKeyboardButton.with_url("b", "https://example.com")])
        assert len(grown.inline_keyboard) == 2
        assert len(markup.inline_keyboard) == 1
        assert grown.to_wire()["inline_keyboard"][1] == [{"text": "b", "url": "https://example.com"}]

    def test_command_length(self):
        with pytest.raises(ValidationError):
            BotCommand(command="", description="empty")
        with pytest.raises(ValidationError):
            BotCommand(command="x" * 33, description="too long")


class TestInlineQueryResultLocation:
    """Tests for InlineQueryResultLocation."""

    def test_wire(self):
        result = InlineQueryResultLocation(
            id="1",
            latitude=55.75,
            longitude=37.62,
            title="Moscow",
            live_period=timedelta(minutes=5),
            input_message_content=InputTextMessageContent(message_text="here"),
        )
        assert result.to_wire() == {
            "type": "location",
            "id": "1",
            "latitude": 55.75,
            "longitude": 37.62,
            "title": "Moscow",
            "live_period": 300,
            "input_message_content": {"message_text": "here"},
        }

    def test_heading_range(self):
        with pytest.raises(ValidationError):
            InlineQueryResultLocation(id="1", latitude=0, longitude=0, title="t", heading=0)

    def test_id_length(self):
        with pytest.raises(ValidationError):
            InlineQueryResultLocation(id="x" * 65, latitude=0, longitude=0, title="t")
