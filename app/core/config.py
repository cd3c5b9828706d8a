"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    # Linear
    linear_webhook_secret: str
    linear_webhook_max_age_ms: int = 60_000
    linear_verify_source_ip: bool = False

    # Telegram
    telegram_bot_token: str
    telegram_chat_id: str
    telegram_webhook_secret: str | None = None
    telegram_api_base_url: str = "https://api.telegram.org"

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"


settings = Settings.model_validate({})
