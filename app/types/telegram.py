"""Type definitions for Telegram Bot API payloads."""

from typing import NotRequired, TypedDict


class TelegramChatTD(TypedDict):
    """Telegram chat minimal info."""

    id: int
    type: str
    title: NotRequired[str]


class TelegramMessageTD(TypedDict):
    """Incoming Telegram message (only fields used by bot commands)."""

    message_id: int
    chat: TelegramChatTD
    date: int
    text: NotRequired[str]


class TelegramUpdateTD(TypedDict):
    """Telegram webhook update."""

    update_id: int
    message: NotRequired[TelegramMessageTD]
