"""Configuration settings from environment variables."""
import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    log_level: str = os.getenv("FUZZY_LOG_LEVEL", "INFO")

    # Request limits (the distance matrix grows with len(a) * len(b))
    max_input_chars: int = int(os.getenv("FUZZY_MAX_INPUT_CHARS", "2000"))

    class Config:
        """Pydantic config."""

        env_prefix = "FUZZY_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()
