"""Typed Telegram Bot API objects."""

from .bot import BotCommand, WebhookInfo
from .chat import BareChatId, BareChatKind, Chat, ChatType, to_bare
from .errors import CodecRangeError, DecodeError, FieldDecodeError, MissingVariantError
from .forward import (
    Forward,
    ForwardedFrom,
    ForwardedFromChat,
    ForwardedFromSenderName,
    ForwardedFromUser,
)
from .inline_query_result import (
    InlineQueryResultLocation,
    InputLocationMessageContent,
    InputMessageContent,
    InputTextMessageContent,
)
from .input_file import InputFile
from .input_media import (
    InputMedia,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    ParseMode,
)
from .markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)
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
    PollOption,
    PollType,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .media_kind import ChatMigration, ChatMigrationFrom, ChatMigrationTo, MediaKind
from .message import Message, classify_message
from .message_entity import MessageEntity, MessageEntityType, entity_text
from .message_kind import MessageCommon, MessageKind
from .permalink import message_url
from .service import (
    Invoice,
    PassportData,
    ProximityAlertTriggered,
    SuccessfulPayment,
    WebAppData,
)
from .user import User

__all__ = [
    "Animation",
    "Audio",
    "BareChatId",
    "BareChatKind",
    "BotCommand",
    "Chat",
    "ChatMigration",
    "ChatMigrationFrom",
    "ChatMigrationTo",
    "ChatType",
    "CodecRangeError",
    "Contact",
    "DecodeError",
    "Dice",
    "Document",
    "FieldDecodeError",
    "ForceReply",
    "Forward",
    "ForwardedFrom",
    "ForwardedFromChat",
    "ForwardedFromSenderName",
    "ForwardedFromUser",
    "Game",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQueryResultLocation",
    "InputFile",
    "InputLocationMessageContent",
    "InputMedia",
    "InputMediaAudio",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaVideo",
    "InputMessageContent",
    "InputTextMessageContent",
    "Invoice",
    "KeyboardButton",
    "Location",
    "MediaKind",
    "Message",
    "MessageCommon",
    "MessageEntity",
    "MessageEntityType",
    "MessageKind",
    "MissingVariantError",
    "ParseMode",
    "PassportData",
    "PhotoSize",
    "Poll",
    "PollOption",
    "PollType",
    "ProximityAlertTriggered",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "Sticker",
    "SuccessfulPayment",
    "User",
    "Venue",
    "Video",
    "VideoNote",
    "Voice",
    "WebAppData",
    "WebhookInfo",
    "classify_message",
    "entity_text",
    "message_url",
    "to_bare",
]
