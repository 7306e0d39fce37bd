"""Repository for the worklog store file.

The whole entity graph lives in a single JSON document. Loading reads
it into a WorklogStore; saving writes the complete snapshot back.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from worklog.domain.shared.result import Err, Ok, Result
from worklog.infrastructure.storage.json_storage import JsonStorage
from worklog.infrastructure.storage.store import StoreData, WorklogStore

logger = logging.getLogger(__name__)


def parse_store_data(raw: dict) -> Result[StoreData, str]:
    """Validate a raw JSON object as store data."""
    try:
        return Ok(StoreData.model_validate(raw))
    except ValidationError as e:
        return Err(f"Invalid worklog data: {e.error_count()} validation error(s)")


class WorklogRepository:
    """Loads and saves the store file.

    Example:
        repo = WorklogRepository(Path("~/.local/share/worklog/worklog.json"))
        result = repo.load()
        if isinstance(result, Ok):
            store = result.value
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the store file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Result[WorklogStore, str]:
        """Load the store.

        Returns:
            Ok(WorklogStore); an empty store if the file does not exist yet.
            Err(str) if the file exists but cannot be read or parsed.
        """
        if not self.path.exists():
            logger.debug(f"No store at {self.path}, starting empty")
            return Ok(WorklogStore())

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            return result

        data = parse_store_data(result.value)
        if isinstance(data, Err):
            return Err(f"{data.error} in {self.path}")

        return Ok(WorklogStore.from_data(data.value))

    def save(self, store: WorklogStore) -> Result[None, str]:
        """Write the full store to disk.

        Failures are logged; the in-memory store keeps its changes.
        """
        result = self._storage.save_json(
            self.path,
            store.to_data().model_dump(mode="json"),
        )
        if isinstance(result, Err):
            logger.error(f"Failed to save worklog: {result.error}")
        return result
