"""Variant-independent getters for ``Message``.

Each property returns the value when the active kind (and, for common
messages, the active media kind) carries that field, and ``None``
otherwise. None of them raise, whatever the variant.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from .chat import Chat
from .forward import (
    Forward,
    ForwardedFrom,
    ForwardedFromChat,
    ForwardedFromSenderName,
    ForwardedFromUser,
)
from .markup import InlineKeyboardMarkup
from .media import (
    Animation,
    Audio,
    Contact,
    Dice,
    Document,
    Game,
    Location,
    PhotoSize,
    Poll,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .media_kind import (
    ChatMigration,
    ChatMigrationFrom,
    ChatMigrationTo,
    MediaAnimation,
    MediaAudio,
    MediaContact,
    MediaDocument,
    MediaGame,
    MediaKind,
    MediaLocation,
    MediaPhoto,
    MediaPoll,
    MediaSticker,
    MediaText,
    MediaVenue,
    MediaVideo,
    MediaVideoNote,
    MediaVoice,
)
from .message_entity import MessageEntity, entity_text
from .message_kind import (
    MessageChannelChatCreated,
    MessageCommon,
    MessageConnectedWebsite,
    MessageDeleteChatPhoto,
    MessageDice,
    MessageGroupChatCreated,
    MessageInvoice,
    MessageLeftChatMember,
    MessageNewChatMembers,
    MessageNewChatPhoto,
    MessageNewChatTitle,
    MessagePassportData,
    MessagePinned,
    MessageProximityAlertTriggered,
    MessageSuccessfulPayment,
    MessageSupergroupChatCreated,
)
from .service import Invoice, PassportData, ProximityAlertTriggered, SuccessfulPayment
from .user import User

if TYPE_CHECKING:
    from .message import Message

# Media kinds sharing a field name
_CAPTIONED = (MediaAnimation, MediaAudio, MediaDocument, MediaPhoto, MediaVideo, MediaVoice)
_GROUPED = (MediaAudio, MediaDocument, MediaPhoto, MediaVideo)


class MessageGetters:
    """Mixed into ``Message``; reads its ``kind`` field."""

    def _common(self) -> MessageCommon | None:
        return self.kind if isinstance(self.kind, MessageCommon) else None

    def _media(self) -> MediaKind | None:
        common = self._common()
        return common.media_kind if common else None

    # -------------------------------------------------------------------------
    # Sender and context (common messages only)
    # -------------------------------------------------------------------------

    @property
    def from_user(self) -> User | None:
        common = self._common()
        return common.from_user if common else None

    @property
    def sender_chat(self) -> Chat | None:
        common = self._common()
        return common.sender_chat if common else None

    @property
    def author_signature(self) -> str | None:
        common = self._common()
        return common.author_signature if common else None

    @property
    def forward(self) -> Forward | None:
        common = self._common()
        return common.forward if common else None

    @property
    def forward_date(self) -> datetime | None:
        return self.forward.date if self.forward else None

    @property
    def forward_from(self) -> ForwardedFrom | None:
        return self.forward.origin if self.forward else None

    @property
    def forward_from_user(self) -> User | None:
        origin = self.forward_from
        return origin.user if isinstance(origin, ForwardedFromUser) else None

    @property
    def forward_from_chat(self) -> Chat | None:
        origin = self.forward_from
        return origin.chat if isinstance(origin, ForwardedFromChat) else None

    @property
    def forward_from_sender_name(self) -> str | None:
        origin = self.forward_from
        return origin.sender_name if isinstance(origin, ForwardedFromSenderName) else None

    @property
    def forward_from_message_id(self) -> int | None:
        return self.forward.message_id if self.forward else None

    @property
    def forward_signature(self) -> str | None:
        return self.forward.signature if self.forward else None

    @property
    def reply_to_message(self) -> "Message | None":
        common = self._common()
        return common.reply_to_message if common else None

    @property
    def edit_date(self) -> datetime | None:
        common = self._common()
        return common.edit_date if common else None

    @property
    def reply_markup(self) -> InlineKeyboardMarkup | None:
        common = self._common()
        return common.reply_markup if common else None

    @property
    def is_automatic_forward(self) -> bool:
        common = self._common()
        return common.is_automatic_forward if common else False

    @property
    def has_protected_content(self) -> bool:
        common = self._common()
        return common.has_protected_content if common else False

    # -------------------------------------------------------------------------
    # Media
    # -------------------------------------------------------------------------

    @property
    def media_group_id(self) -> str | None:
        media = self._media()
        return media.media_group_id if isinstance(media, _GROUPED) else None

    @property
    def text(self) -> str | None:
        media = self._media()
        return media.text if isinstance(media, MediaText) else None

    @property
    def entities(self) -> list[MessageEntity] | None:
        media = self._media()
        return media.entities if isinstance(media, MediaText) else None

    @property
    def caption(self) -> str | None:
        media = self._media()
        return media.caption if isinstance(media, _CAPTIONED) else None

    @property
    def caption_entities(self) -> list[MessageEntity] | None:
        media = self._media()
        return media.caption_entities if isinstance(media, _CAPTIONED) else None

    @property
    def animation(self) -> Animation | None:
        media = self._media()
        return media.animation if isinstance(media, MediaAnimation) else None

    @property
    def audio(self) -> Audio | None:
        media = self._media()
        return media.audio if isinstance(media, MediaAudio) else None

    @property
    def contact(self) -> Contact | None:
        media = self._media()
        return media.contact if isinstance(media, MediaContact) else None

    @property
    def document(self) -> Document | None:
        media = self._media()
        return media.document if isinstance(media, MediaDocument) else None

    @property
    def game(self) -> Game | None:
        media = self._media()
        return media.game if isinstance(media, MediaGame) else None

    @property
    def venue(self) -> Venue | None:
        media = self._media()
        return media.venue if isinstance(media, MediaVenue) else None

    @property
    def location(self) -> Location | None:
        media = self._media()
        return media.location if isinstance(media, MediaLocation) else None

    @property
    def photo(self) -> list[PhotoSize] | None:
        media = self._media()
        return media.photo if isinstance(media, MediaPhoto) else None

    @property
    def poll(self) -> Poll | None:
        media = self._media()
        return media.poll if isinstance(media, MediaPoll) else None

    @property
    def sticker(self) -> Sticker | None:
        media = self._media()
        return media.sticker if isinstance(media, MediaSticker) else None

    @property
    def video(self) -> Video | None:
        media = self._media()
        return media.video if isinstance(media, MediaVideo) else None

    @property
    def video_note(self) -> VideoNote | None:
        media = self._media()
        return media.video_note if isinstance(media, MediaVideoNote) else None

    @property
    def voice(self) -> Voice | None:
        media = self._media()
        return media.voice if isinstance(media, MediaVoice) else None

    @property
    def chat_migration(self) -> ChatMigration | None:
        media = self._media()
        return media if isinstance(media, ChatMigrationTo | ChatMigrationFrom) else None

    @property
    def migrate_to_chat_id(self) -> int | None:
        media = self._media()
        return media.chat_id if isinstance(media, ChatMigrationTo) else None

    @property
    def migrate_from_chat_id(self) -> int | None:
        media = self._media()
        return media.chat_id if isinstance(media, ChatMigrationFrom) else None

    # -------------------------------------------------------------------------
    # Service messages
    # -------------------------------------------------------------------------

    @property
    def new_chat_members(self) -> list[User] | None:
        kind = self.kind
        return kind.new_chat_members if isinstance(kind, MessageNewChatMembers) else None

    @property
    def left_chat_member(self) -> User | None:
        kind = self.kind
        return kind.left_chat_member if isinstance(kind, MessageLeftChatMember) else None

    @property
    def new_chat_title(self) -> str | None:
        kind = self.kind
        return kind.new_chat_title if isinstance(kind, MessageNewChatTitle) else None

    @property
    def new_chat_photo(self) -> list[PhotoSize] | None:
        kind = self.kind
        return kind.new_chat_photo if isinstance(kind, MessageNewChatPhoto) else None

    @property
    def delete_chat_photo(self) -> bool | None:
        kind = self.kind
        return kind.delete_chat_photo if isinstance(kind, MessageDeleteChatPhoto) else None

    @property
    def group_chat_created(self) -> bool | None:
        kind = self.kind
        return kind.group_chat_created if isinstance(kind, MessageGroupChatCreated) else None

    @property
    def super_group_chat_created(self) -> bool | None:
        kind = self.kind
        if isinstance(kind, MessageSupergroupChatCreated):
            return kind.supergroup_chat_created
        return None

    @property
    def channel_chat_created(self) -> bool | None:
        kind = self.kind
        return kind.channel_chat_created if isinstance(kind, MessageChannelChatCreated) else None

    @property
    def pinned_message(self) -> "Message | None":
        kind = self.kind
        return kind.pinned if isinstance(kind, MessagePinned) else None

    @property
    def invoice(self) -> Invoice | None:
        kind = self.kind
        return kind.invoice if isinstance(kind, MessageInvoice) else None

    @property
    def successful_payment(self) -> SuccessfulPayment | None:
        kind = self.kind
        return kind.successful_payment if isinstance(kind, MessageSuccessfulPayment) else None

    @property
    def connected_website(self) -> str | None:
        kind = self.kind
        return kind.connected_website if isinstance(kind, MessageConnectedWebsite) else None

    @property
    def passport_data(self) -> PassportData | None:
        kind = self.kind
        return kind.passport_data if isinstance(kind, MessagePassportData) else None

    @property
    def dice(self) -> Dice | None:
        kind = self.kind
        return kind.dice if isinstance(kind, MessageDice) else None

    @property
    def proximity_alert_triggered(self) -> ProximityAlertTriggered | None:
        kind = self.kind
        if isinstance(kind, MessageProximityAlertTriggered):
            return kind.proximity_alert_triggered
        return None

    # -------------------------------------------------------------------------
    # Derived
    # -------------------------------------------------------------------------

    def parse_entities(self) -> list[tuple[MessageEntity, str]] | None:
        """Pair each text or caption entity with the substring it covers."""
        if self.text is not None:
            source, entities = self.text, self.entities or []
        elif self.caption is not None:
            source, entities = self.caption, self.caption_entities or []
        else:
            return None
        return [(entity, entity_text(source, entity)) for entity in entities]
