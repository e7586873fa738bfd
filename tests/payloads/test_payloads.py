"""Tests for method payloads (payloads/)."""

import pytest
from pydantic import ValidationError

from payloads import GetWebhookInfo, SendMediaGroup, SendSticker, SetGameScoreInline, SetMyCommands
from tgtypes.bot import BotCommand, WebhookInfo
from tgtypes.errors import DecodeError
from tgtypes.input_file import InputFile
from tgtypes.input_media import InputMediaPhoto, InputMediaVideo
from tgtypes.markup import ForceReply
from tgtypes.message import Message

MESSAGE = {
    "message_id": 10,
    "date": 1568290188,
    "chat": {"id": 250918540, "first_name": "f", "type": "private"},
    "sticker": {
        "file_id": "CAADAgADIwADsND4DGmmygHGlyggFgQ",
        "file_unique_id": "u",
        "width": 512,
        "height": 512,
        "is_animated": True,
    },
}


class TestSendSticker:
    """Tests for SendSticker."""

    def test_wire_omits_unset_options(self):
        payload = SendSticker(chat_id=250918540, sticker=InputFile.from_file_id("CAAD"))
        assert payload.to_wire() == {"chat_id": 250918540, "sticker": "CAAD"}
        assert not payload.is_multipart()

    def test_upload_is_multipart(self):
        upload = InputFile.from_bytes(b"RIFF", "s.webp")
        payload = SendSticker(chat_id="@channel", sticker=upload)
        assert payload.is_multipart()
        assert payload.files() == [upload]
        assert payload.to_wire()["sticker"] == f"attach://{upload.attach_id}"

    def test_replace_sets_optional(self):
        payload = SendSticker(chat_id=1, sticker="CAAD")
        updated = payload.replace(disable_notification=True, reply_markup=ForceReply())
        assert updated.to_wire() == {
            "chat_id": 1,
            "sticker": "CAAD",
            "disable_notification": True,
            "reply_markup": {"force_reply": True},
        }
        assert payload.disable_notification is None

    def test_unknown_parameter_rejected(self):
        with pytest.raises(ValidationError):
            SendSticker(chat_id=1, sticker="CAAD", caption="no captions here")

    def test_parse_output(self):
        message = SendSticker.parse_output(MESSAGE)
        assert isinstance(message, Message)
        assert message.sticker.is_animated

    def test_parse_output_malformed(self):
        with pytest.raises(DecodeError):
            SendSticker.parse_output({"message_id": 1})


class TestSendMediaGroup:
    """Tests for SendMediaGroup."""

    def test_media_wire(self):
        payload = SendMediaGroup(
            chat_id=1,
            media=[
                InputMediaPhoto(media="photo-id"),
                InputMediaVideo(media="https://example.com/v.mp4"),
            ],
        )
        assert payload.to_wire()["media"] == [
            {"type": "photo", "media": "photo-id"},
            {"type": "video", "media": "https://example.com/v.mp4"},
        ]

    def test_nested_uploads_collected(self):
        upload = InputFile.from_bytes(b"jpeg", "a.jpg")
        payload = SendMediaGroup(
            chat_id=1,
            media=[InputMediaPhoto(media=upload), InputMediaPhoto(media="photo-id")],
        )
        assert payload.files() == [upload]

    def test_media_from_wire_dicts(self):
        payload = SendMediaGroup(
            chat_id=1,
            media=[{"type": "photo", "media": "a"}, {"type": "document", "media": "b"}],
        )
        assert payload.media[1].type == "document"

    def test_album_size(self):
        with pytest.raises(ValidationError):
            SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media="a")])

    def test_parse_output_list(self):
        messages = SendMediaGroup.parse_output([MESSAGE, {**MESSAGE, "message_id": 11}])
        assert [message.id for message in messages] == [10, 11]


class TestOtherPayloads:
    """Tests for SetGameScoreInline, SetMyCommands and GetWebhookInfo."""

    def test_set_game_score_inline(self):
        payload = SetGameScoreInline(user_id=5, score=100, inline_message_id="abc")
        assert payload.METHOD == "setGameScore"
        assert payload.to_wire() == {"user_id": 5, "score": 100, "inline_message_id": "abc"}

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            SetGameScoreInline(user_id=5, score=-1, inline_message_id="abc")

    def test_set_my_commands(self):
        payload = SetMyCommands(commands=[BotCommand(command="start", description="Start the bot")])
        assert payload.to_wire() == {"commands": [{"command": "start", "description": "Start the bot"}]}
        assert SetMyCommands.parse_output(True) is True

    @pytest.mark.parametrize("result", [1, "true"])
    def test_set_my_commands_output_must_be_bool(self, result):
        with pytest.raises(DecodeError):
            SetMyCommands.parse_output(result)

    def test_get_webhook_info(self):
        assert GetWebhookInfo().to_wire() == {}
        info = GetWebhookInfo.parse_output(
            {"url": "", "has_custom_certificate": False, "pending_update_count": 3}
        )
        assert isinstance(info, WebhookInfo)
        assert info.url is None
        assert info.pending_update_count == 3
