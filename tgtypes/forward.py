"""Information about forwarded messages."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, model_serializer, model_validator

from .base import WireModel, drop_none
from .chat import Chat
from .resolver import Variant, model_variant, resolve
from .serde import UnixTimestamp
from .user import User


class ForwardedFromUser(WireModel):
    user: User = Field(alias="forward_from")


class ForwardedFromChat(WireModel):
    """Sent by an anonymous admin on behalf of a group, or posted in a channel."""

    chat: Chat = Field(alias="forward_from_chat")


class ForwardedFromSenderName(WireModel):
    """Sent by a user who hides their account in forwards."""

    sender_name: str = Field(alias="forward_sender_name")


ForwardedFrom = ForwardedFromUser | ForwardedFromChat | ForwardedFromSenderName

FORWARDED_FROM_VARIANTS: tuple[Variant, ...] = (
    model_variant("user", ForwardedFromUser, "forward_from"),
    model_variant("chat", ForwardedFromChat, "forward_from_chat"),
    model_variant("sender_name", ForwardedFromSenderName, "forward_sender_name"),
)


class Forward(WireModel):
    """Forward details; flattened into the message object on the wire."""

    date: UnixTimestamp = Field(alias="forward_date")
    origin: ForwardedFrom
    signature: str | None = Field(None, alias="forward_signature")
    message_id: int | None = Field(None, alias="forward_from_message_id")

    @model_validator(mode="before")
    @classmethod
    def resolve_origin(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "origin" not in data:
            return {**data, "origin": resolve("ForwardedFrom", FORWARDED_FROM_VARIANTS, data)}
        return data

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler):
        data = handler(self)
        origin = data.pop("origin")
        return drop_none({**data, **origin})
