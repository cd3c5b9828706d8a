"""Pytest configuration for tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env.test file if it exists
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path)

# Set test environment variables before any imports (only if not already set)
os.environ.setdefault("LINEAR_WEBHOOK_SECRET", "test_webhook_secret")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:test-bot-token")
os.environ.setdefault("TELEGRAM_CHAT_ID", "-1001234567890")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def mock_telegram_client(monkeypatch):
    """Create and inject mocked Telegram client."""
    from tests.fixtures.mock_clients import MockTelegramClient

    mock_client = MockTelegramClient()

    # Patch the module-level singleton
    monkeypatch.setattr("app.clients.telegram.telegram_client", mock_client)

    # Also patch imports in modules that use telegram_client
    monkeypatch.setattr("app.services.notifications.telegram_client", mock_client)
    monkeypatch.setattr("app.services.commands.telegram_client", mock_client)

    yield mock_client

    mock_client.reset()


@pytest.fixture
def api_client(mock_telegram_client, monkeypatch):
    """FastAPI test client with rate limiting disabled."""
    from fastapi.testclient import TestClient

    from app.api.webhooks import limiter
    from app.main import app

    monkeypatch.setattr(limiter, "enabled", False)

    with TestClient(app) as client:
        yield client


@pytest.fixture
def webhook_secret():
    """Linear webhook secret the app is configured with."""
    from app.core.config import settings

    return settings.linear_webhook_secret
