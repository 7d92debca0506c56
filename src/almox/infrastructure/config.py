"""Application configuration loaded via pydantic settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly-typed settings; every field can be overridden by ``ALMOX_<NAME>``."""

    model_config = SettingsConfigDict(
        env_prefix="ALMOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Storage
    DATA_DIR: Path = Path("data")

    # Acting user recorded in the audit log
    ACTOR_ID: str = "1"

    # Listings
    PAGE_SIZE: int = 10

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE_PATH: str = ""


settings = Settings()
