"""Infrastructure layer for Worklog.

I/O lives here: the store file, its export/import, and the entity
store the rest of the application reads from.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - WorklogStore: Ordered in-memory entity maps with cascade deletes
        - WorklogRepository: Store file persistence
        - export_database / import_database: Whole-file copy with backup
"""

from worklog.infrastructure.storage import (
    ImportOutcome,
    JsonStorage,
    WorklogRepository,
    WorklogStore,
    export_database,
    import_database,
)

__all__ = [
    "ImportOutcome",
    "JsonStorage",
    "WorklogRepository",
    "WorklogStore",
    "export_database",
    "import_database",
]
