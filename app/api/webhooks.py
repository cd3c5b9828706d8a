"""Linear webhook handler."""

import json

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address
from structlog import get_logger

from app.core.config import settings
from app.models.webhooks import LinearWebhookEvent, WebhookAcceptedResponse
from app.services.notifications import relay_linear_event
from app.utils.security import (
    verify_linear_ip,
    verify_linear_signature,
    verify_webhook_timestamp,
)

logger = get_logger()
router = APIRouter()

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)


@router.post("/webhooks/linear")
@limiter.limit("100/minute")
async def handle_linear_webhook(request: Request) -> WebhookAcceptedResponse:
    """
    Receive Linear data-change webhooks and relay them to Telegram.

    Checks, in order: source IP (when enabled), signature over the raw
    body, JSON and payload structure, timestamp freshness.

    Returns 200 on success, 403/401/400 on rejected requests and 500 when
    delivery fails so that Linear retries.
    """
    # Get raw body (the signature covers these exact bytes)
    body = await request.body()

    if settings.linear_verify_source_ip:
        client_ip = get_remote_address(request)
        if not verify_linear_ip(client_ip):
            raise HTTPException(status_code=403, detail="Source IP not allowed")

    signature = request.headers.get("Linear-Signature")

    if not signature:
        logger.warning("webhook_missing_signature_header")
        raise HTTPException(status_code=401, detail="Missing Linear-Signature header")

    # Verify signature (constant-time comparison)
    if not verify_linear_signature(body, signature, settings.linear_webhook_secret):
        logger.warning("webhook_signature_verification_failed")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload_dict = json.loads(body)
    except ValueError as e:
        logger.error("webhook_invalid_json")
        raise HTTPException(status_code=400, detail="Invalid JSON") from e

    # Validate payload structure
    try:
        event = LinearWebhookEvent.model_validate(payload_dict)
    except ValidationError as e:
        logger.error("webhook_validation_failed", error=str(e))
        raise HTTPException(status_code=400, detail="Invalid payload structure") from e

    # Replay protection
    if not verify_webhook_timestamp(
        event.webhookTimestamp, max_age_ms=settings.linear_webhook_max_age_ms
    ):
        logger.warning("webhook_timestamp_rejected", webhook_id=event.webhookId)
        raise HTTPException(status_code=401, detail="Timestamp too old")

    logger.info(
        "webhook_received",
        entity_type=event.type,
        action=event.action,
        actor=event.actor.name,
        webhook_id=event.webhookId,
    )

    try:
        await relay_linear_event(event)
    except Exception as e:
        logger.exception("webhook_relay_failed", webhook_id=event.webhookId)
        raise HTTPException(status_code=500, detail="Internal server error") from e

    return WebhookAcceptedResponse()
