"""Files and other attachments carried by messages."""

from enum import StrEnum
from typing import Annotated

from pydantic import BeforeValidator, Field

from .base import WireModel
from .message_entity import MessageEntity
from .serde import DurationSecs, OptionalUnixTimestamp


class PhotoSize(WireModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


class Animation(WireModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: DurationSecs
    thumb: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Audio(WireModel):
    file_id: str
    file_unique_id: str
    duration: DurationSecs
    performer: str | None = None
    title: str | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    thumb: PhotoSize | None = None


class Document(WireModel):
    file_id: str
    file_unique_id: str
    thumb: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Video(WireModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: DurationSecs
    thumb: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class VideoNote(WireModel):
    file_id: str
    file_unique_id: str
    length: int
    duration: DurationSecs
    thumb: PhotoSize | None = None
    file_size: int | None = None


class Voice(WireModel):
    file_id: str
    file_unique_id: str
    duration: DurationSecs
    mime_type: str | None = None
    file_size: int | None = None


class Sticker(WireModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    is_video: bool = False
    thumb: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    file_size: int | None = None


class Contact(WireModel):
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None
    vcard: str | None = None


class Location(WireModel):
    longitude: float
    latitude: float
    horizontal_accuracy: float | None = None
    live_period: DurationSecs | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class Venue(WireModel):
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None


class PollType(StrEnum):
    regular = "regular"
    quiz = "quiz"


class PollOption(WireModel):
    text: str
    voter_count: int


class Poll(WireModel):
    id: str
    question: str
    options: list[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: Annotated[PollType, BeforeValidator(PollType)]
    allows_multiple_answers: bool
    correct_option_id: int | None = None
    explanation: str | None = None
    explanation_entities: list[MessageEntity] | None = None
    open_period: DurationSecs | None = None
    close_date: OptionalUnixTimestamp = None


class Game(WireModel):
    title: str
    description: str
    photo: list[PhotoSize]
    text: str | None = None
    text_entities: list[MessageEntity] | None = None
    animation: Animation | None = None


class Dice(WireModel):
    emoji: str
    value: int = Field(ge=1)
