"""
Application configuration loaded from the environment.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wellness import __version__


class Settings(BaseSettings):
    """Runtime settings, overridable through ``WELLNESS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WELLNESS_",
        env_file=".env",
        extra="ignore",
    )

    app_version: str = __version__
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".wellness")
    database_url: Optional[str] = None
    preferences_file: Optional[Path] = None
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def _derive_paths(self) -> "Settings":
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_dir / 'wellness.db'}"
        if self.preferences_file is None:
            self.preferences_file = self.data_dir / "wellness_prefs.json"
        return self


settings = Settings()
