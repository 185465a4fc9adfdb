# parcel_tracker/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tracker settings, read from TRACKER_* environment variables or .env."""

    model_config = SettingsConfigDict(env_prefix="TRACKER_", env_file=".env", case_sensitive=False)

    database_url: str = "sqlite:///tracker.db"
    db_echo: bool = False
    log_level: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    return settings
