"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory (relative to the working directory)."""
    return Path("data")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "PSX Spotter"
    app_version: str = "0.1.0"

    # Data directory (ledger database and snapshots live here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    # Directory of dated volume-leader snapshots (one JSON file per day)
    snapshot_dir: Optional[Path] = None

    log_level: str = "INFO"

    # Per-logger overrides, e.g. LOG_LEVELS='{"psx_spotter.services": "DEBUG"}'
    log_levels: dict[str, str] = {}

    # Log every HTTP request line from uvicorn
    access_log: bool = False

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "ledger.db"
        return f"sqlite:///{db_path}"

    def get_snapshot_dir(self) -> Path:
        """Get the snapshot directory. It is not created; the scraper owns it."""
        if self.snapshot_dir:
            return self.snapshot_dir
        return self.get_data_dir() / "snapshots"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
