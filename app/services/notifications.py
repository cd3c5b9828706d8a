"""Relay Linear events to the configured Telegram chat."""

from __future__ import annotations

from structlog import get_logger

from app.clients.telegram import telegram_client
from app.clients.telegram_messages import format_linear_message
from app.core.config import settings
from app.models.webhooks import LinearWebhookEvent

logger = get_logger()


async def relay_linear_event(event: LinearWebhookEvent) -> str:
    """
    Format a verified Linear event and deliver it to Telegram.

    Args:
        event: Verified Linear webhook event

    Returns:
        The delivered message text

    Raises:
        Exception: If delivery fails (caller decides whether to retry)
    """
    message = format_linear_message(event)

    await telegram_client.send_message(settings.telegram_chat_id, message)

    logger.info(
        "linear_event_relayed",
        entity_type=event.type,
        action=event.action,
        webhook_id=event.webhookId,
    )
    return message
