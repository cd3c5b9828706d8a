"""Bot command handling for messages sent to the bot in Telegram."""

from __future__ import annotations

from collections.abc import Callable

from structlog import get_logger

from app.clients.telegram import telegram_client
from app.clients.telegram_messages import (
    build_help_message,
    build_start_message,
    build_status_message,
)
from app.core.config import settings

logger = get_logger()


def _status_reply(chat_id: int) -> str:
    return build_status_message(chat_id, settings.telegram_chat_id, settings.environment)


# Command dispatcher
COMMAND_REPLIES: dict[str, Callable[[int], str]] = {
    "start": build_start_message,
    "help": lambda _chat_id: build_help_message(),
    "status": _status_reply,
}


def parse_command(text: str) -> str | None:
    """
    Extract the command name from a message.

    Example input: "/status@linear_tracker_bot now"
    Example output: "status"
    """
    if not text.startswith("/") or len(text) < 2 or text[1].isspace():
        return None
    command = text[1:].split(maxsplit=1)[0].split("@", 1)[0].lower()
    return command or None


async def handle_command(chat_id: int, text: str) -> bool:
    """
    Reply to a bot command.

    Returns:
        True if a reply was sent, False if the text wasn't a known command
    """
    command = parse_command(text)
    reply_builder = COMMAND_REPLIES.get(command) if command else None

    if not reply_builder:
        logger.info("telegram_command_ignored", chat_id=chat_id, command=command)
        return False

    logger.info("telegram_command_received", chat_id=chat_id, command=command)
    await telegram_client.send_message(chat_id, reply_builder(chat_id))
    return True
