"""Payloads of service messages (payments, video chats, web apps, ...)."""

from typing import Any

from pydantic import Field

from .base import WireModel
from .serde import DurationSecs, UnixTimestamp
from .user import User


class Invoice(WireModel):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class SuccessfulPayment(WireModel):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: str | None = None
    order_info: dict[str, Any] | None = None


class PassportData(WireModel):
    """Telegram Passport data; the encrypted elements are kept as raw objects."""

    data: list[dict[str, Any]]
    credentials: dict[str, Any]


class ProximityAlertTriggered(WireModel):
    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(WireModel):
    message_auto_delete_time: DurationSecs


class VideoChatScheduled(WireModel):
    start_date: UnixTimestamp


class VideoChatStarted(WireModel):
    pass


class VideoChatEnded(WireModel):
    duration: DurationSecs


class VideoChatParticipantsInvited(WireModel):
    users: list[User] | None = None


class WebAppData(WireModel):
    data: str
    button_text: str = Field(min_length=1)
