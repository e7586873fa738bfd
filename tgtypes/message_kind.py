"""The variants a ``Message`` can take.

A message is either a *common* message (sender, optional forward/reply
context, and one kind of media) or one of the service messages below. The
kind is never tagged on the wire; ``MESSAGE_KIND_VARIANTS`` lists the order
in which candidates are tried.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal

from pydantic import AliasChoices, Field, field_validator, model_serializer, model_validator

from .base import WireModel, drop_none
from .chat import Chat
from .forward import Forward
from .markup import InlineKeyboardMarkup
from .media import Dice, PhotoSize
from .media_kind import MEDIA_KIND_VARIANTS, MediaKind, resolve_media_kind
from .resolver import Variant, classify, model_variant, requires_any
from .serde import OptionalUnixTimestamp
from .service import (
    Invoice,
    MessageAutoDeleteTimerChanged,
    PassportData,
    ProximityAlertTriggered,
    SuccessfulPayment,
    VideoChatEnded,
    VideoChatParticipantsInvited,
    VideoChatScheduled,
    VideoChatStarted,
    WebAppData,
)
from .user import User

if TYPE_CHECKING:
    from .message import Message


def _truncated(message: "Message | None") -> "Message | None":
    # A nested message never carries its own reply
    if message is None:
        return None
    return message.without_reply()


class MessageCommon(WireModel):
    """Ordinary message: text or media, possibly forwarded or replying."""

    # Empty for messages sent to channels
    from_user: User | None = Field(None, alias="from")
    # The channel for channel posts, the group for anonymous admins
    sender_chat: Chat | None = None
    author_signature: str | None = None
    forward: Forward | None = None
    reply_to_message: "Message | None" = None
    edit_date: OptionalUnixTimestamp = None
    media_kind: MediaKind
    reply_markup: InlineKeyboardMarkup | None = None
    is_automatic_forward: bool = False
    has_protected_content: bool = False

    @model_validator(mode="before")
    @classmethod
    def unflatten(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        if "media_kind" not in data:
            data["media_kind"] = resolve_media_kind(data)
        if "forward" not in data and data.get("forward_date") is not None:
            data["forward"] = {
                key: value for key, value in data.items() if key.startswith("forward_")
            }
        return data

    @field_validator("reply_to_message", mode="after")
    @classmethod
    def truncate_reply(cls, value):
        return _truncated(value)

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler):
        data = handler(self)
        media = data.pop("media_kind")
        forward = data.pop("forward", None) or {}
        return drop_none({**data, **forward, **media})


class MessageNewChatMembers(WireModel):
    # The bot itself may be among them
    new_chat_members: list[User]


class MessageLeftChatMember(WireModel):
    left_chat_member: User


class MessageNewChatTitle(WireModel):
    new_chat_title: str


class MessageNewChatPhoto(WireModel):
    new_chat_photo: list[PhotoSize]


class MessageDeleteChatPhoto(WireModel):
    delete_chat_photo: Literal[True] = True


class MessageGroupChatCreated(WireModel):
    group_chat_created: Literal[True] = True


class MessageSupergroupChatCreated(WireModel):
    """Only seen in ``reply_to_message``: bots can't be members of a supergroup at creation."""

    supergroup_chat_created: Literal[True] = True


class MessageChannelChatCreated(WireModel):
    """Only seen in ``reply_to_message``: bots can't be members of a channel at creation."""

    channel_chat_created: Literal[True] = True


class MessageAutoDeleteTimerChangedKind(WireModel):
    message_auto_delete_timer_changed: MessageAutoDeleteTimerChanged


class MessagePinned(WireModel):
    pinned: "Message" = Field(alias="pinned_message")

    @field_validator("pinned", mode="after")
    @classmethod
    def truncate_reply(cls, value):
        return _truncated(value)


class MessageInvoice(WireModel):
    invoice: Invoice


class MessageSuccessfulPayment(WireModel):
    successful_payment: SuccessfulPayment


class MessageConnectedWebsite(WireModel):
    # Domain the user logged in on via Telegram Login
    connected_website: str


class MessagePassportData(WireModel):
    passport_data: PassportData


class MessageDice(WireModel):
    dice: Dice


class MessageProximityAlertTriggered(WireModel):
    proximity_alert_triggered: ProximityAlertTriggered


# Voice chats were renamed to video chats; older `voice_chat_*` keys still decode.


class MessageVoiceChatScheduled(WireModel):
    video_chat_scheduled: VideoChatScheduled = Field(
        validation_alias=AliasChoices("video_chat_scheduled", "voice_chat_scheduled"),
        serialization_alias="video_chat_scheduled",
    )


class MessageVoiceChatStarted(WireModel):
    video_chat_started: VideoChatStarted = Field(
        validation_alias=AliasChoices("video_chat_started", "voice_chat_started"),
        serialization_alias="video_chat_started",
    )


class MessageVoiceChatEnded(WireModel):
    video_chat_ended: VideoChatEnded = Field(
        validation_alias=AliasChoices("video_chat_ended", "voice_chat_ended"),
        serialization_alias="video_chat_ended",
    )


class MessageVoiceChatParticipantsInvited(WireModel):
    video_chat_participants_invited: VideoChatParticipantsInvited = Field(
        validation_alias=AliasChoices(
            "video_chat_participants_invited", "voice_chat_participants_invited"
        ),
        serialization_alias="video_chat_participants_invited",
    )


class MessageWebAppData(WireModel):
    web_app_data: WebAppData


MessageKind = (
    MessageCommon
    | MessageNewChatMembers
    | MessageLeftChatMember
    | MessageNewChatTitle
    | MessageNewChatPhoto
    | MessageDeleteChatPhoto
    | MessageGroupChatCreated
    | MessageSupergroupChatCreated
    | MessageChannelChatCreated
    | MessageAutoDeleteTimerChangedKind
    | MessagePinned
    | MessageInvoice
    | MessageSuccessfulPayment
    | MessageConnectedWebsite
    | MessagePassportData
    | MessageDice
    | MessageProximityAlertTriggered
    | MessageVoiceChatScheduled
    | MessageVoiceChatStarted
    | MessageVoiceChatEnded
    | MessageVoiceChatParticipantsInvited
    | MessageWebAppData
)


def _has_media(data: Mapping[str, Any]) -> bool:
    return classify(MEDIA_KIND_VARIANTS, data) is not None


MESSAGE_KIND_VARIANTS: tuple[Variant, ...] = (
    Variant("common", _has_media, MessageCommon.model_validate),
    model_variant("new_chat_members", MessageNewChatMembers, "new_chat_members"),
    model_variant("left_chat_member", MessageLeftChatMember, "left_chat_member"),
    model_variant("new_chat_title", MessageNewChatTitle, "new_chat_title"),
    model_variant("new_chat_photo", MessageNewChatPhoto, "new_chat_photo"),
    model_variant("delete_chat_photo", MessageDeleteChatPhoto, "delete_chat_photo"),
    model_variant("group_chat_created", MessageGroupChatCreated, "group_chat_created"),
    model_variant(
        "supergroup_chat_created", MessageSupergroupChatCreated, "supergroup_chat_created"
    ),
    model_variant("channel_chat_created", MessageChannelChatCreated, "channel_chat_created"),
    model_variant(
        "auto_delete_timer_changed",
        MessageAutoDeleteTimerChangedKind,
        "message_auto_delete_timer_changed",
    ),
    model_variant("pinned", MessagePinned, "pinned_message"),
    model_variant("invoice", MessageInvoice, "invoice"),
    model_variant("successful_payment", MessageSuccessfulPayment, "successful_payment"),
    model_variant("connected_website", MessageConnectedWebsite, "connected_website"),
    model_variant("passport_data", MessagePassportData, "passport_data"),
    model_variant("dice", MessageDice, "dice"),
    model_variant(
        "proximity_alert_triggered", MessageProximityAlertTriggered, "proximity_alert_triggered"
    ),
    Variant(
        "voice_chat_scheduled",
        requires_any("video_chat_scheduled", "voice_chat_scheduled"),
        MessageVoiceChatScheduled.model_validate,
    ),
    Variant(
        "voice_chat_started",
        requires_any("video_chat_started", "voice_chat_started"),
        MessageVoiceChatStarted.model_validate,
    ),
    Variant(
        "voice_chat_ended",
        requires_any("video_chat_ended", "voice_chat_ended"),
        MessageVoiceChatEnded.model_validate,
    ),
    Variant(
        "voice_chat_participants_invited",
        requires_any("video_chat_participants_invited", "voice_chat_participants_invited"),
        MessageVoiceChatParticipantsInvited.model_validate,
    ),
    model_variant("web_app_data", MessageWebAppData, "web_app_data"),
)
