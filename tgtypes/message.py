"""The ``Message`` envelope.

On the wire a message is one flat JSON object. ``Message`` keeps the fields
every message has (id, date, chat, via_bot) and moves the rest into
``kind``, chosen by which keys are present. ``to_wire()`` flattens it back.
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import Field, model_serializer, model_validator

from .accessors import MessageGetters
from .base import WireModel, drop_none
from .chat import Chat
from .message_kind import MESSAGE_KIND_VARIANTS, MessageCommon, MessageKind, MessagePinned
from .permalink import message_url
from .resolver import classify, resolve
from .serde import UnixTimestamp
from .user import User


def resolve_message_kind(data: Any) -> MessageKind:
    return resolve("MessageKind", MESSAGE_KIND_VARIANTS, data)


def classify_message(data: Mapping[str, Any]) -> str | None:
    """Name of the kind a wire record would decode to, or ``None``."""
    return classify(MESSAGE_KIND_VARIANTS, data)


class Message(WireModel, MessageGetters):
    """https://core.telegram.org/bots/api#message

    ``id`` is unique within ``chat`` only. Messages are immutable; use
    ``replace`` to derive an edited copy.
    """

    id: int = Field(alias="message_id")
    date: UnixTimestamp
    chat: Chat
    # Bot through which the message was sent
    via_bot: User | None = None
    kind: MessageKind

    @model_validator(mode="before")
    @classmethod
    def resolve_kind(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "kind" not in data:
            return {**data, "kind": resolve_message_kind(data)}
        return data

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler):
        data = handler(self)
        kind = data.pop("kind")
        return drop_none({**data, **kind})

    def without_reply(self) -> Self:
        """Copy of this message with its own ``reply_to_message`` cleared."""
        if isinstance(self.kind, MessageCommon) and self.kind.reply_to_message is not None:
            return self.replace(kind=self.kind.replace(reply_to_message=None))
        return self

    def url(self) -> str | None:
        """Direct ``t.me`` link to this message; see ``permalink.message_url``."""
        return message_url(self)


# The kinds refer back to Message (replies, pinned messages)
MessageCommon.model_rebuild()
MessagePinned.model_rebuild()
Message.model_rebuild()
