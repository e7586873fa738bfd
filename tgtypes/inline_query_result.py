"""Results a bot returns for inline queries."""

from typing import Literal

from pydantic import Field

from .base import WireModel
from .markup import InlineKeyboardMarkup
from .message_entity import MessageEntity
from .serde import DurationSecs


class InputTextMessageContent(WireModel):
    message_text: str = Field(min_length=1, max_length=4096)
    parse_mode: str | None = None
    entities: list[MessageEntity] | None = None
    disable_web_page_preview: bool | None = None


class InputLocationMessageContent(WireModel):
    latitude: float
    longitude: float
    horizontal_accuracy: float | None = Field(None, ge=0, le=1500)
    live_period: DurationSecs | None = None
    heading: int | None = Field(None, ge=1, le=360)
    proximity_alert_radius: int | None = Field(None, ge=1, le=100000)


InputMessageContent = InputTextMessageContent | InputLocationMessageContent


class InlineQueryResultLocation(WireModel):
    """A location on a map.

    Sent as a location by default; ``input_message_content`` replaces it
    with other content.
    """

    type: Literal["location"] = "location"
    id: str = Field(min_length=1, max_length=64)
    latitude: float
    longitude: float
    title: str
    # Radius of uncertainty in meters
    horizontal_accuracy: float | None = Field(None, ge=0, le=1500)
    live_period: DurationSecs | None = None
    heading: int | None = Field(None, ge=1, le=360)
    proximity_alert_radius: int | None = Field(None, ge=1, le=100000)
    reply_markup: InlineKeyboardMarkup | None = None
    input_message_content: InputMessageContent | None = None
    thumb_url: str | None = None
    thumb_width: int | None = None
    thumb_height: int | None = None
