from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Slack incoming webhook
    slack_webhook_url: str = ""
    slack_timeout: int = 30  # Seconds, same as slack_sdk's default

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
