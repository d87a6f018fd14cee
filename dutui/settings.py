from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the scanner and browser.

    Values are loaded from environment variables and `.env`.

    Notes:
    - File logging is off unless DUTUI_LOG_DIR is set; the TUI owns the screen,
      so warnings otherwise only reach stderr before/after the browser runs.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Browser
    DUTUI_BAR_WIDTH: int = Field(default=30)

    # Logging
    DUTUI_LOG_DIR: Path | None = Field(default=None)
    DUTUI_LOG_LEVEL: str = Field(default="WARNING")
    # Timed rotation retention count (days).
    DUTUI_LOG_BACKUP_COUNT: int = Field(default=7)


def load_settings() -> Settings:
    s = Settings()
    if s.DUTUI_BAR_WIDTH < 1:
        s.DUTUI_BAR_WIDTH = 1
    return s
