"""Bot-level objects: command lists and webhook status."""

from pydantic import Field

from .base import WireModel
from .serde import OptionalUnixTimestamp, OptionalUrl


class BotCommand(WireModel):
    command: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1, max_length=256)


class WebhookInfo(WireModel):
    """https://core.telegram.org/bots/api#webhookinfo

    ``url`` is always present on the wire; the API sends ``""`` when no
    webhook is set, which decodes to ``None``.
    """

    url: OptionalUrl
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: OptionalUnixTimestamp = None
    last_error_message: str | None = None
    max_connections: int | None = None
    allowed_updates: list[str] | None = None
