"""Security utilities for webhook verification."""

import hashlib
import hmac
import re

from structlog import get_logger

from app.utils.time import current_time_ms

logger = get_logger()

# Replay window for Linear webhooks (milliseconds, both directions)
WEBHOOK_MAX_AGE_MS = 60_000

_HEX_DIGEST_PATTERN = re.compile(r"[0-9a-fA-F]{64}")

# Source addresses Linear sends webhooks from
LINEAR_WEBHOOK_IPS = frozenset(
    {
        "35.231.147.226",
        "35.243.134.228",
        "34.140.253.14",
        "34.38.87.206",
        "34.134.222.122",
        "35.222.25.142",
    }
)


def verify_linear_signature(
    body: bytes,
    provided_signature: str | None,
    secret: str | None,
) -> bool:
    """
    Verify Linear webhook signature using HMAC-SHA256.

    The digest is computed over the raw request body exactly as received.
    Never compute it over a re-serialized payload: key order, whitespace
    and number formatting would all change the bytes.

    Linear signature format: "<hex_digest>" (no prefix)

    Args:
        body: Raw request body
        provided_signature: Linear-Signature header
        secret: Webhook signing secret

    Returns:
        True if signature valid, False otherwise (never raises)
    """
    if not provided_signature or not secret or not isinstance(secret, str):
        logger.warning(
            "webhook_signature_missing",
            has_signature=bool(provided_signature),
            has_secret=bool(secret),
        )
        return False

    # Exactly one hex SHA-256 digest: no prefix, padding or separators
    if not isinstance(provided_signature, str) or not _HEX_DIGEST_PATTERN.fullmatch(
        provided_signature
    ):
        logger.warning(
            "webhook_signature_malformed",
            provided_prefix=repr(provided_signature)[:15],
        )
        return False

    provided_digest = bytes.fromhex(provided_signature)

    # Compute expected signature
    expected_digest = hmac.new(secret.encode(), body, hashlib.sha256).digest()

    # Constant-time comparison (security critical!)
    is_valid = hmac.compare_digest(expected_digest, provided_digest)

    if not is_valid:
        logger.warning(
            "webhook_signature_invalid",
            expected_prefix=expected_digest.hex()[:15],
            provided_prefix=provided_signature[:15],
        )

    return is_valid


def verify_webhook_timestamp(
    webhook_timestamp: int,
    now_ms: int | None = None,
    max_age_ms: int = WEBHOOK_MAX_AGE_MS,
) -> bool:
    """
    Check that a webhook's claimed timestamp is within the replay window.

    Old (replayed) and future (clock-skewed) timestamps are rejected
    symmetrically.

    Args:
        webhook_timestamp: webhookTimestamp from the payload (ms since epoch)
        now_ms: Current time in ms, defaults to the wall clock
        max_age_ms: Allowed distance from now, inclusive

    Returns:
        True if fresh, False otherwise (never raises)
    """
    if now_ms is None:
        now_ms = current_time_ms()

    if isinstance(webhook_timestamp, bool) or not isinstance(webhook_timestamp, int | float):
        logger.warning("webhook_timestamp_invalid", webhook_timestamp=repr(webhook_timestamp))
        return False

    age_ms = abs(now_ms - webhook_timestamp)
    if not age_ms <= max_age_ms:
        logger.warning("webhook_timestamp_stale", age_ms=age_ms, max_age_ms=max_age_ms)
        return False

    return True


def verify_linear_ip(client_ip: str | None) -> bool:
    """Check that a request comes from one of Linear's webhook addresses."""
    is_allowed = client_ip in LINEAR_WEBHOOK_IPS
    if not is_allowed:
        logger.warning("webhook_source_ip_rejected", client_ip=client_ip)
    return is_allowed
