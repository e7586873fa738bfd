"""Media sent in albums and edits."""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field

from .base import WireModel
from .input_file import InputFile
from .message_entity import MessageEntity
from .serde import DurationSecs


class ParseMode(StrEnum):
    """Formatting applied to text and captions by the server."""

    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"
    # Legacy; kept for backward compatibility
    MARKDOWN = "Markdown"


class _InputMediaBase(WireModel):
    media: InputFile
    caption: str | None = Field(None, max_length=1024)
    parse_mode: Annotated[ParseMode, BeforeValidator(ParseMode)] | None = None
    caption_entities: list[MessageEntity] | None = None


class InputMediaPhoto(_InputMediaBase):
    type: Literal["photo"] = "photo"


class InputMediaVideo(_InputMediaBase):
    type: Literal["video"] = "video"
    thumb: InputFile | None = None
    width: int | None = None
    height: int | None = None
    duration: DurationSecs | None = None
    supports_streaming: bool | None = None


class InputMediaAudio(_InputMediaBase):
    type: Literal["audio"] = "audio"
    thumb: InputFile | None = None
    duration: DurationSecs | None = None
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(_InputMediaBase):
    type: Literal["document"] = "document"
    thumb: InputFile | None = None
    disable_content_type_detection: bool | None = None


InputMedia = Annotated[
    InputMediaPhoto | InputMediaVideo | InputMediaAudio | InputMediaDocument,
    Field(discriminator="type"),
]
