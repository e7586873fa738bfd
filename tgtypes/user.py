"""Telegram users and bots."""

from .base import WireModel

# Sender of messages from anonymous group administrators
ANONYMOUS_ADMIN_ID = 1087968824
# Sender of channel posts automatically forwarded to a linked group
TELEGRAM_SERVICE_ID = 777000
# Sender of messages sent on behalf of a channel
CHANNEL_BOT_ID = 136817688


class User(WireModel):
    """https://core.telegram.org/bots/api#user"""

    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    is_premium: bool | None = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name

    @property
    def url(self) -> str:
        """``tg://`` link that mentions this user without a username."""
        return f"tg://user/?id={self.id}"

    @property
    def is_anonymous(self) -> bool:
        """True for the placeholder sender of anonymous group admins."""
        return self.id == ANONYMOUS_ADMIN_ID

    @property
    def is_channel(self) -> bool:
        return self.id == CHANNEL_BOT_ID

    @property
    def is_telegram(self) -> bool:
        return self.id == TELEGRAM_SERVICE_ID
