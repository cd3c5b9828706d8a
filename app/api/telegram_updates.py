"""Telegram bot updates (commands sent to the bot)."""

from __future__ import annotations

import hmac
import json

from fastapi import APIRouter, HTTPException, Request, Response
from structlog import get_logger

from app.core.config import settings
from app.services.commands import handle_command
from app.types.telegram import TelegramUpdateTD

logger = get_logger()
router = APIRouter()


@router.post("/webhooks/telegram")
async def handle_telegram_update(request: Request) -> Response:
    """
    Handle updates Telegram pushes to the bot's webhook.

    Thin adapter layer - extracts the message and calls the command service.
    Always answers 200 for well-formed updates so Telegram doesn't redeliver.
    """
    if settings.telegram_webhook_secret:
        token = request.headers.get("X-Telegram-Bot-Api-Secret-Token", "")
        if not hmac.compare_digest(token.encode(), settings.telegram_webhook_secret.encode()):
            logger.warning("telegram_update_invalid_secret_token")
            raise HTTPException(status_code=401, detail="Invalid secret token")

    try:
        update: TelegramUpdateTD = json.loads(await request.body())
    except ValueError as e:
        logger.error("telegram_update_invalid_json")
        raise HTTPException(status_code=400, detail="Invalid JSON") from e

    message = update.get("message") if isinstance(update, dict) else None
    if not isinstance(message, dict):
        logger.info("telegram_update_ignored")
        return Response(status_code=200)

    chat = message.get("chat")
    chat_id = chat.get("id") if isinstance(chat, dict) else None
    text = message.get("text")
    if not isinstance(chat_id, int) or not isinstance(text, str) or not text:
        logger.info("telegram_update_ignored", chat_id=chat_id)
        return Response(status_code=200)

    try:
        await handle_command(chat_id, text)
    except Exception:
        logger.exception("telegram_command_failed", chat_id=chat_id)

    return Response(status_code=200)
