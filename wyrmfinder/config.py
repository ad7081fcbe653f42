from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Cards revealed per "load more" step
DEFAULT_PAGE_SIZE = 30


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="WYRMFINDER_")

    app_name: str = "Wyrmfinder"
    log_level: str = "INFO"

    # Card dataset (JSON array); required unless a path is passed explicitly
    catalog_path: Path | None = None

    page_size: int = DEFAULT_PAGE_SIZE


settings = Settings()
