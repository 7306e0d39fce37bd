"""JSON file storage with Result-based error handling.

Thin wrapper around reading and writing JSON documents. Writes go to a
temporary sibling file first and are moved into place with
``os.replace``, so a crash mid-write leaves the previous file intact.
"""

import json
import os
from pathlib import Path
from typing import Any

from worklog.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Low-level JSON file I/O.

    No domain logic, just files. Every method returns a Result instead
    of raising.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("worklog.json"))
        if isinstance(result, Ok):
            data = result.value
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Load a JSON object from a file.

        Args:
            path: File to read.

        Returns:
            Ok(dict) if successful, Err(str) with error message if failed.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            content = path.read_text(encoding="utf-8")
            data = json.loads(content)
            if not isinstance(data, dict):
                return Err(f"Expected a JSON object in {path}")
            return Ok(data)

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except UnicodeDecodeError:
            return Err(f"Not a text file: {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, str]:
        """Atomically write a JSON object to a file.

        Args:
            path: File to write.
            data: Dictionary to serialize.
            indent: JSON indentation level (default 2).

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, path)
            return Ok(None)

        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
