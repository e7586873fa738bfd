"""Tests for tgtypes/permalink.py."""

from tgtypes.message import Message
from tgtypes.permalink import message_url


def _message(chat: dict, message_id: int = 42) -> Message:
    return Message.from_wire({"message_id": message_id, "date": 0, "chat": chat, "text": "x"})


class TestMessageUrl:
    """Tests for message_url."""

    def test_private_chat_has_no_link(self):
        message = _message({"id": 250918540, "first_name": "f", "type": "private"})
        assert message_url(message) is None

    def test_basic_group_has_no_link(self):
        message = _message({"id": -599075523, "title": "g", "type": "group"})
        assert message_url(message) is None

    def test_public_supergroup(self):
        chat = {"id": -1000000000123, "title": "s", "username": "foo", "type": "supergroup"}
        assert message_url(_message(chat)) == "https://t.me/foo/42/"

    def test_private_supergroup_uses_bare_id(self):
        chat = {"id": -1000000000123, "title": "s", "type": "supergroup"}
        assert message_url(_message(chat)) == "https://t.me/c/123/42/"

    def test_public_channel(self):
        chat = {"id": -1001331354980, "title": "c", "username": "cpptogether", "type": "channel"}
        assert message_url(_message(chat, 198295)) == "https://t.me/cpptogether/198295/"

    def test_message_method(self):
        chat = {"id": -1001160242915, "title": "a", "type": "supergroup"}
        assert _message(chat, 1).url() == "https://t.me/c/1160242915/1/"
