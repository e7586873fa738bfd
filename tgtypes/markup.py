"""Keyboards attached to messages."""

from typing import Literal, Self

from .base import WireModel


class InlineKeyboardButton(WireModel):
    """Button of an inline keyboard.

    ``login_url`` buttons arrive as ordinary ``url`` buttons.
    """

    text: str
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    pay: bool | None = None

    @classmethod
    def with_url(cls, text: str, url: str) -> Self:
        return cls(text=text, url=url)

    @classmethod
    def callback(cls, text: str, data: str) -> Self:
        return cls(text=text, callback_data=data)


class InlineKeyboardMarkup(WireModel):
    inline_keyboard: list[list[InlineKeyboardButton]]

    def append_row(self, row: list[InlineKeyboardButton]) -> Self:
        return self.replace(inline_keyboard=[*self.inline_keyboard, row])


class KeyboardButton(WireModel):
    text: str
    request_contact: bool | None = None
    request_location: bool | None = None


class ReplyKeyboardMarkup(WireModel):
    keyboard: list[list[KeyboardButton]]
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    input_field_placeholder: str | None = None
    selective: bool | None = None


class ReplyKeyboardRemove(WireModel):
    remove_keyboard: Literal[True] = True
    selective: bool | None = None


class ForceReply(WireModel):
    force_reply: Literal[True] = True
    input_field_placeholder: str | None = None
    selective: bool | None = None


ReplyMarkup = InlineKeyboardMarkup | ReplyKeyboardMarkup | ReplyKeyboardRemove | ForceReply
