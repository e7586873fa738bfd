from typing import ClassVar

from tgtypes.input_file import InputFile
from tgtypes.markup import ReplyMarkup
from tgtypes.message import Message

from .base import Payload


class SendSticker(Payload):
    """Send a static .WEBP or animated .TGS sticker."""

    METHOD: ClassVar[str] = "sendSticker"
    OUTPUT: ClassVar = Message

    chat_id: int | str
    sticker: InputFile
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None
    reply_markup: ReplyMarkup | None = None
