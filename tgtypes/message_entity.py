"""Special entities (mentions, links, formatting) inside message text.

Offsets and lengths are measured in UTF-16 code units, as the Bot API does.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal, Self

from pydantic import Field, model_serializer, model_validator

from .base import WireModel, drop_none
from .serde import Url
from .user import User


class MessageEntityType(StrEnum):
    mention = "mention"
    hashtag = "hashtag"
    cashtag = "cashtag"
    bot_command = "bot_command"
    url = "url"
    email = "email"
    phone_number = "phone_number"
    bold = "bold"
    italic = "italic"
    underline = "underline"
    strikethrough = "strikethrough"
    spoiler = "spoiler"
    code = "code"
    pre = "pre"
    text_link = "text_link"
    text_mention = "text_mention"


class PlainEntity(WireModel):
    """Entity kinds that carry nothing beyond their type."""

    type: Literal[
        "mention",
        "hashtag",
        "cashtag",
        "bot_command",
        "url",
        "email",
        "phone_number",
        "bold",
        "italic",
        "underline",
        "strikethrough",
        "spoiler",
        "code",
    ]


class PreEntity(WireModel):
    type: Literal["pre"] = "pre"
    language: str | None = None


class TextLinkEntity(WireModel):
    type: Literal["text_link"] = "text_link"
    url: Url


class TextMentionEntity(WireModel):
    """Mention of a user without a username."""

    type: Literal["text_mention"] = "text_mention"
    user: User


MessageEntityKind = Annotated[
    PlainEntity | PreEntity | TextLinkEntity | TextMentionEntity,
    Field(discriminator="type"),
]

_POSITION_KEYS = ("offset", "length")


class MessageEntity(WireModel):
    """https://core.telegram.org/bots/api#messageentity

    On the wire the kind's fields (``type``, ``url``, ...) sit next to
    ``offset`` and ``length`` in one object.
    """

    kind: MessageEntityKind
    offset: int = Field(ge=0)
    length: int = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def nest_kind(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "kind" not in data:
            kind = {key: value for key, value in data.items() if key not in _POSITION_KEYS}
            return {"kind": kind, **{key: data[key] for key in _POSITION_KEYS if key in data}}
        return data

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler):
        data = handler(self)
        kind = data.pop("kind")
        return drop_none({**kind, **data})

    @classmethod
    def new(cls, kind: Any, offset: int, length: int) -> Self:
        return cls(kind=kind, offset=offset, length=length)

    @classmethod
    def user_mention(cls, user_id: int, offset: int, length: int) -> Self:
        """``text_link`` entity pointing at ``tg://user/?id=<user_id>``."""
        return cls(kind=TextLinkEntity(url=f"tg://user/?id={user_id}"), offset=offset, length=length)

    @property
    def type(self) -> MessageEntityType:
        return MessageEntityType(self.kind.type)


def entity_text(text: str, entity: MessageEntity) -> str:
    """Slice the part of ``text`` an entity covers, using UTF-16 offsets.

    Raises:
        ValueError: the entity reaches past the end of ``text`` or splits a
            surrogate pair.
    """
    encoded = text.encode("utf-16-le")
    start = entity.offset * 2
    end = start + entity.length * 2
    if end > len(encoded):
        raise ValueError(f"entity [{entity.offset}, +{entity.length}) is out of bounds for text")
    return encoded[start:end].decode("utf-16-le")
