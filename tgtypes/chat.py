"""Chats and chat identifiers.

The Bot API packs three id spaces into one signed integer ("marked" ids):
users are positive, basic groups are ``-id`` and supergroups/channels are
``-1000000000000 - id``. ``t.me`` links use the unmarked ("bare") id.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated

from pydantic import BeforeValidator

from .base import WireModel

MIN_MARKED_CHANNEL_ID = -1997852516352
MAX_MARKED_CHANNEL_ID = -1000000000000
MIN_MARKED_CHAT_ID = MAX_MARKED_CHANNEL_ID + 1
MAX_MARKED_CHAT_ID = -1
MIN_USER_ID = 0
MAX_USER_ID = (1 << 40) - 1


class ChatType(StrEnum):
    private = "private"
    group = "group"
    supergroup = "supergroup"
    channel = "channel"


class BareChatKind(StrEnum):
    user = "user"
    group = "group"
    channel = "channel"


@dataclass(frozen=True)
class BareChatId:
    """Chat id with the marking removed, plus the id space it came from."""

    kind: BareChatKind
    id: int

    def to_marked(self) -> int:
        if self.kind is BareChatKind.user:
            return self.id
        if self.kind is BareChatKind.group:
            return -self.id
        return MAX_MARKED_CHANNEL_ID - self.id


def to_bare(chat_id: int) -> BareChatId:
    """Split a marked chat id into its id space and bare id.

    Raises:
        ValueError: ``chat_id`` is outside every known id range.
    """
    if MIN_MARKED_CHAT_ID <= chat_id <= MAX_MARKED_CHAT_ID:
        return BareChatId(BareChatKind.group, -chat_id)
    if MIN_MARKED_CHANNEL_ID <= chat_id <= MAX_MARKED_CHANNEL_ID:
        return BareChatId(BareChatKind.channel, MAX_MARKED_CHANNEL_ID - chat_id)
    if MIN_USER_ID <= chat_id <= MAX_USER_ID:
        return BareChatId(BareChatKind.user, chat_id)
    raise ValueError(f"malformed chat id: {chat_id}")


def is_user(chat_id: int) -> bool:
    return MIN_USER_ID <= chat_id <= MAX_USER_ID


def is_group(chat_id: int) -> bool:
    return MIN_MARKED_CHAT_ID <= chat_id <= MAX_MARKED_CHAT_ID


def is_channel_or_supergroup(chat_id: int) -> bool:
    return MIN_MARKED_CHANNEL_ID <= chat_id <= MAX_MARKED_CHANNEL_ID


class Chat(WireModel):
    """https://core.telegram.org/bots/api#chat"""

    id: int
    type: Annotated[ChatType, BeforeValidator(ChatType)]
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    description: str | None = None
    invite_link: str | None = None
    has_protected_content: bool | None = None

    def is_private(self) -> bool:
        return self.type is ChatType.private

    def is_group(self) -> bool:
        return self.type is ChatType.group

    def is_supergroup(self) -> bool:
        return self.type is ChatType.supergroup

    def is_channel(self) -> bool:
        return self.type is ChatType.channel

    def to_bare(self) -> BareChatId:
        return to_bare(self.id)
