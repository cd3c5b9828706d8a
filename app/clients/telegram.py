"""Telegram Bot API client for delivering messages."""

from __future__ import annotations

from typing import Any

import aiohttp
from structlog import get_logger

from app.core.config import settings

logger = get_logger()


class TelegramAPIError(Exception):
    """Telegram answered a request with ok=false."""

    def __init__(self, method: str, description: str, error_code: int | None = None) -> None:
        super().__init__(f"Telegram API request failed ({method}): {description}")
        self.method = method
        self.description = description
        self.error_code = error_code


class TelegramClient:
    """HTTP client for the Telegram Bot API."""

    def __init__(self, bot_token: str | None = None, base_url: str | None = None) -> None:
        """Initialize Telegram client with bot token from settings."""
        token = bot_token or settings.telegram_bot_token
        self.base_url = f"{base_url or settings.telegram_api_base_url}/bot{token}"

    async def call(self, method: str, json_data: dict[str, Any]) -> dict[str, Any]:
        """
        Call a Bot API method.

        Args:
            method: API method (e.g., "sendMessage")
            json_data: Request body

        Returns:
            The "result" field of the response

        Raises:
            TelegramAPIError: If Telegram reports a failure
            aiohttp.ClientError: On transport failure
        """
        url = f"{self.base_url}/{method}"

        logger.info("telegram_api_request", method=method)

        async with aiohttp.ClientSession() as session:
            async with session.post(url, json=json_data) as response:
                # Telegram returns a JSON error body with 4xx statuses
                result: dict[str, Any] = await response.json(content_type=None)

                if not result.get("ok"):
                    description = result.get("description") or f"HTTP {response.status}"
                    logger.error(
                        "telegram_api_error",
                        method=method,
                        status=response.status,
                        error_code=result.get("error_code"),
                        description=description,
                    )
                    raise TelegramAPIError(method, description, result.get("error_code"))

                return result.get("result", {})

    async def send_message(
        self,
        chat_id: int | str,
        text: str,
        parse_mode: str = "MarkdownV2",
        disable_link_preview: bool = True,
    ) -> dict[str, Any]:
        """
        Send a text message to a chat.

        Args:
            chat_id: Telegram chat ID
            text: Message text, already escaped for parse_mode
            parse_mode: Telegram parse mode
            disable_link_preview: Suppress link previews

        Returns:
            Sent message object

        Raises:
            Exception: If message send fails
        """
        try:
            message = await self.call(
                "sendMessage",
                {
                    "chat_id": chat_id,
                    "text": text,
                    "parse_mode": parse_mode,
                    "link_preview_options": {"is_disabled": disable_link_preview},
                },
            )
            logger.info("telegram_message_sent", chat_id=chat_id)
            return message
        except Exception as e:
            logger.error("telegram_message_failed", chat_id=chat_id, error=str(e))
            raise


# Module singleton
telegram_client = TelegramClient()
