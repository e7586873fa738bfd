"""Parameters of Bot API methods."""

from .base import Payload
from .get_webhook_info import GetWebhookInfo
from .send_media_group import SendMediaGroup
from .send_sticker import SendSticker
from .set_game_score_inline import SetGameScoreInline
from .set_my_commands import SetMyCommands

__all__ = [
    "GetWebhookInfo",
    "Payload",
    "SendMediaGroup",
    "SendSticker",
    "SetGameScoreInline",
    "SetMyCommands",
]
