"""Storage infrastructure for Worklog.

The in-memory store, its JSON persistence, and whole-file
export/import, all using Result for error handling.
"""

from worklog.infrastructure.storage.database import (
    ImportOutcome,
    export_database,
    import_database,
)
from worklog.infrastructure.storage.json_storage import JsonStorage
from worklog.infrastructure.storage.repositories import WorklogRepository, parse_store_data
from worklog.infrastructure.storage.store import (
    DeleteCounts,
    StoreData,
    WorklogStore,
)

__all__ = [
    "DeleteCounts",
    "ImportOutcome",
    "JsonStorage",
    "StoreData",
    "WorklogRepository",
    "WorklogStore",
    "export_database",
    "import_database",
    "parse_store_data",
]
