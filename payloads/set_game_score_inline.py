from typing import ClassVar

from pydantic import Field

from tgtypes.message import Message

from .base import Payload


class SetGameScoreInline(Payload):
    """Set a user's score in a game sent via an inline message.

    The server rejects scores that are not higher than the current one
    unless ``force`` is set.
    """

    METHOD: ClassVar[str] = "setGameScore"
    OUTPUT: ClassVar = Message

    user_id: int
    score: int = Field(ge=0)
    inline_message_id: str
    # Allow the high score to decrease
    force: bool | None = None
    disable_edit_message: bool | None = None
