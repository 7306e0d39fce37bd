"""Configuration for Worklog.

Resolves the data directory and stores user preferences in
``settings.json`` inside it.

Data directory resolution order:
1. Explicit path (``--data-dir`` CLI option)
2. WORKLOG_HOME environment variable
3. Platform user data folder (APPDATA on Windows, XDG_DATA_HOME or
   ~/.local/share elsewhere)
"""

import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from worklog.domain.shared.result import Ok, unwrap_or
from worklog.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

APP_NAME = "worklog"
DATA_DIR_ENV = "WORKLOG_HOME"
DATABASE_FILENAME = "worklog.json"
BACKUP_FILENAME = "worklog_old.json"
SETTINGS_FILENAME = "settings.json"


class Settings(BaseModel):
    """User preferences."""

    default_log_hours: int = Field(default=0, ge=0)
    default_log_minutes: int = Field(default=30, ge=0, lt=60)
    last_project_id: str | None = None


def default_data_dir() -> Path:
    """Per-user data directory for the platform."""
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        return Path(base) / APP_NAME
    base = os.environ.get("XDG_DATA_HOME") or (Path.home() / ".local" / "share")
    return Path(base) / APP_NAME


def get_data_dir(explicit: Path | None = None) -> Path:
    """Resolve and create the data directory."""
    if explicit is not None:
        data_dir = explicit
    elif os.environ.get(DATA_DIR_ENV):
        data_dir = Path(os.environ[DATA_DIR_ENV])
    else:
        data_dir = default_data_dir()
    data_dir = data_dir.expanduser()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_database_path(data_dir: Path) -> Path:
    return data_dir / DATABASE_FILENAME


def get_backup_path(data_dir: Path) -> Path:
    """Fixed location of the copy kept by the last database import."""
    return data_dir / BACKUP_FILENAME


def get_settings(data_dir: Path, storage: JsonStorage | None = None) -> Settings:
    """Load settings; defaults if the file is missing or invalid."""
    storage = storage or JsonStorage()
    settings_file = data_dir / SETTINGS_FILENAME
    if not settings_file.exists():
        return Settings()

    raw = unwrap_or(storage.load_json(settings_file), {})
    try:
        return Settings(**raw)
    except ValidationError:
        logger.warning(f"Ignoring invalid settings in {settings_file}")
        return Settings()


def save_settings(data_dir: Path, settings: Settings, storage: JsonStorage | None = None) -> bool:
    """Save settings. Returns False (and logs) if the write failed."""
    storage = storage or JsonStorage()
    result = storage.save_json(data_dir / SETTINGS_FILENAME, settings.model_dump())
    if isinstance(result, Ok):
        return True
    logger.error(f"Failed to save settings: {result.error}")
    return False
