from pydantic import ValidationError
from pydantic_settings import BaseSettings

from notifier.errors import ConfigurationError


class Settings(BaseSettings):
    # Fallback target for webhook channels without a URL
    webhook_url: str = ""

    # SMTP credentials (never part of the channel config)
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_timeout: int = 30

    # Base delay for exponential backoff between webhook attempts (seconds)
    http_retry_backoff: float = 1.0

    model_config = {"env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Read settings from the environment at call time."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid settings: {e}") from e
