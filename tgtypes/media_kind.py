"""Content of a common message: exactly one kind of media per message."""

from typing import Any

from pydantic import Field

from .base import WireModel
from .media import (
    Animation,
    Audio,
    Contact,
    Document,
    Game,
    Location,
    PhotoSize,
    Poll,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .message_entity import MessageEntity
from .resolver import Variant, model_variant, requires_any, resolve


class MediaAnimation(WireModel):
    # The API also sends a duplicate `document` field; it is ignored
    animation: Animation
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)


class MediaAudio(WireModel):
    audio: Audio
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)
    media_group_id: str | None = None


class MediaContact(WireModel):
    contact: Contact


class MediaDocument(WireModel):
    document: Document
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)
    media_group_id: str | None = None


class MediaGame(WireModel):
    game: Game


class MediaVenue(WireModel):
    # The API also sends a duplicate `location` field; it is ignored
    venue: Venue


class MediaLocation(WireModel):
    location: Location


class MediaPhoto(WireModel):
    photo: list[PhotoSize]
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)
    media_group_id: str | None = None


class MediaPoll(WireModel):
    poll: Poll


class MediaSticker(WireModel):
    sticker: Sticker


class MediaText(WireModel):
    text: str
    entities: list[MessageEntity] = Field(default_factory=list)


class MediaVideo(WireModel):
    video: Video
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)
    media_group_id: str | None = None


class MediaVideoNote(WireModel):
    video_note: VideoNote


class MediaVoice(WireModel):
    voice: Voice
    caption: str | None = None
    caption_entities: list[MessageEntity] = Field(default_factory=list)


# =============================================================================
# Chat migration
# =============================================================================


class ChatMigrationTo(WireModel):
    """The group has been migrated to the supergroup ``chat_id``."""

    chat_id: int = Field(alias="migrate_to_chat_id")


class ChatMigrationFrom(WireModel):
    """The supergroup has been migrated from the group ``chat_id``."""

    chat_id: int = Field(alias="migrate_from_chat_id")


ChatMigration = ChatMigrationTo | ChatMigrationFrom
"""Group to supergroup migration.

A single migration reaches the bot twice, as two unrelated messages: one in
the old group (``ChatMigrationTo``) and one in the new supergroup
(``ChatMigrationFrom``).
"""

CHAT_MIGRATION_VARIANTS: tuple[Variant, ...] = (
    model_variant("to", ChatMigrationTo, "migrate_to_chat_id"),
    model_variant("from", ChatMigrationFrom, "migrate_from_chat_id"),
)


def resolve_chat_migration(data: Any) -> ChatMigration:
    return resolve("ChatMigration", CHAT_MIGRATION_VARIANTS, data)


MediaKind = (
    MediaAnimation
    | MediaAudio
    | MediaContact
    | MediaDocument
    | MediaGame
    | MediaVenue
    | MediaLocation
    | MediaPhoto
    | MediaPoll
    | MediaSticker
    | MediaText
    | MediaVideo
    | MediaVideoNote
    | MediaVoice
    | ChatMigrationTo
    | ChatMigrationFrom
)

# Venue must precede Location and Animation must precede Document: the API
# duplicates `location` into venues and `document` into animations.
MEDIA_KIND_VARIANTS: tuple[Variant, ...] = (
    model_variant("animation", MediaAnimation, "animation"),
    model_variant("audio", MediaAudio, "audio"),
    model_variant("contact", MediaContact, "contact"),
    model_variant("document", MediaDocument, "document"),
    model_variant("game", MediaGame, "game"),
    model_variant("venue", MediaVenue, "venue"),
    model_variant("location", MediaLocation, "location"),
    model_variant("photo", MediaPhoto, "photo"),
    model_variant("poll", MediaPoll, "poll"),
    model_variant("sticker", MediaSticker, "sticker"),
    model_variant("text", MediaText, "text"),
    model_variant("video", MediaVideo, "video"),
    model_variant("video_note", MediaVideoNote, "video_note"),
    model_variant("voice", MediaVoice, "voice"),
    Variant(
        "migration",
        requires_any("migrate_to_chat_id", "migrate_from_chat_id"),
        resolve_chat_migration,
    ),
)


def resolve_media_kind(data: Any) -> MediaKind:
    return resolve("MediaKind", MEDIA_KIND_VARIANTS, data)
