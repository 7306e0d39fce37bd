"""Whole-file export and import of the store.

Export copies the live store file somewhere else. Import replaces the
live file with another store file, keeping the previous one under a
fixed backup name next to it for manual recovery. The running process
keeps its in-memory store; the imported data is seen on next start.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from worklog.domain.shared.result import Err, Ok, Result
from worklog.infrastructure.storage.json_storage import JsonStorage
from worklog.infrastructure.storage.repositories import parse_store_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportOutcome:
    """Result of a successful import.

    Attributes:
        live_path: Store file that was replaced
        backup_path: Copy of the previous store, or None if there was none
        tickets: Number of tickets in the imported store
        entries: Number of time entries in the imported store
    """

    live_path: Path
    backup_path: Path | None
    tickets: int
    entries: int


def export_database(live_path: Path, destination: Path) -> Result[Path, str]:
    """Copy the live store file to destination, overwriting it.

    Args:
        live_path: Current store file
        destination: Where to write the copy

    Returns:
        Ok(destination) or Err(str) describing the failure.
    """
    if not live_path.exists():
        return Err(f"No database found at {live_path}")
    if destination.resolve() == live_path.resolve():
        return Err("Export destination is the live database")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(live_path, destination)
    except PermissionError:
        return Err(f"Permission denied writing {destination}")
    except OSError as e:
        return Err(f"Export failed: {e}")

    logger.info(f"Exported database to {destination}")
    return Ok(destination)


def import_database(
    source: Path,
    live_path: Path,
    backup_path: Path,
    storage: JsonStorage | None = None,
) -> Result[ImportOutcome, str]:
    """Replace the live store file with source.

    The source must parse as a store before anything is touched. The
    previous live file is copied to backup_path (replacing an older
    backup), then source is copied beside the live file and moved over
    it atomically.

    Args:
        source: Store file to import
        live_path: Current store file
        backup_path: Fixed location for the pre-import copy
        storage: JsonStorage used to validate the source

    Returns:
        Ok(ImportOutcome) or Err(str); on Err the live file is unchanged.
    """
    storage = storage or JsonStorage()

    if not source.exists():
        return Err(f"File not found: {source}")
    if live_path.exists() and source.resolve() == live_path.resolve():
        return Err("Import source is the live database")

    raw = storage.load_json(source)
    if isinstance(raw, Err):
        return Err(f"Import failed: {raw.error}")
    data = parse_store_data(raw.value)
    if isinstance(data, Err):
        return Err(f"Import failed: {data.error}")

    staging = live_path.with_name(f".{live_path.name}.import")
    kept_backup: Path | None = None
    try:
        live_path.parent.mkdir(parents=True, exist_ok=True)

        if backup_path.exists():
            backup_path.unlink()
        if live_path.exists():
            shutil.copyfile(live_path, backup_path)
            kept_backup = backup_path

        shutil.copyfile(source, staging)
        os.replace(staging, live_path)
    except PermissionError:
        return Err(f"Permission denied replacing {live_path}")
    except OSError as e:
        return Err(f"Import failed: {e}")
    finally:
        if staging.exists():
            staging.unlink()

    logger.info(f"Imported database from {source} (backup: {kept_backup})")
    return Ok(
        ImportOutcome(
            live_path=live_path,
            backup_path=kept_backup,
            tickets=len(data.value.tickets),
            entries=len(data.value.entries),
        )
    )
