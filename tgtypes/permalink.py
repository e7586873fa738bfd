"""Direct ``t.me`` links to messages."""

from typing import TYPE_CHECKING

from .chat import BareChatKind

if TYPE_CHECKING:
    from .message import Message

T_ME = "https://t.me"


def message_url(message: "Message") -> str | None:
    """Produce a direct link to ``message``.

    Returns ``None`` for private chats (DMs) and basic groups, which have no
    ``t.me`` links. Public supergroups and channels get a link anyone can
    open; private ones get a ``/c/`` link that only resolves for members.
    Usernames are ``[a-zA-Z0-9_]{5,32}`` and ids are integers, so the
    result is always a valid URL.
    """
    bare = message.chat.to_bare()
    # Basic groups are never public: public groups are always supergroups
    if bare.kind is not BareChatKind.channel:
        return None

    if message.chat.username:
        return f"{T_ME}/{message.chat.username}/{message.id}/"
    return f"{T_ME}/c/{bare.id}/{message.id}/"
