from typing import ClassVar

from tgtypes.bot import WebhookInfo

from .base import Payload


class GetWebhookInfo(Payload):
    """Current webhook status. ``url`` is empty when long polling is used."""

    METHOD: ClassVar[str] = "getWebhookInfo"
    OUTPUT: ClassVar = WebhookInfo
