from typing import ClassVar

from pydantic import Field

from tgtypes.input_media import InputMedia
from tgtypes.message import Message

from .base import Payload


class SendMediaGroup(Payload):
    """Send 2-10 photos, videos, audios or documents as an album.

    Returns the sent messages.
    """

    METHOD: ClassVar[str] = "sendMediaGroup"
    OUTPUT: ClassVar = list[Message]

    # Chat id or "@channelusername"
    chat_id: int | str
    media: list[InputMedia] = Field(min_length=2, max_length=10)
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
