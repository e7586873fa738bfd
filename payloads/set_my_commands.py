from typing import ClassVar

from pydantic import Field, StrictBool

from tgtypes.bot import BotCommand

from .base import Payload


class SetMyCommands(Payload):
    METHOD: ClassVar[str] = "setMyCommands"
    # setMyCommands returns ``true`` on success, not a count. Strict, so 1 or "true" is an error
    OUTPUT: ClassVar = StrictBool

    commands: list[BotCommand] = Field(max_length=100)
