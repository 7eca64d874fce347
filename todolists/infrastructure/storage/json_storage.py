"""Reading and writing the todolists data file.

The data file is a single JSON object. Failures come back as ``Err``
with a readable message; nothing here raises for I/O or parse problems.
"""

import json
import os
from pathlib import Path
from typing import Any

from todolists.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """JSON object I/O for one file at a time.

    Knows nothing about lists or tasks. ``FileStorage`` builds on it.

    Example:
        result = JsonStorage().load_json(Path("todolists.json"), missing_ok=True)
        document = result.value if isinstance(result, Ok) else {}
    """

    def load_json(self, path: Path, missing_ok: bool = False) -> Result[dict[str, Any], str]:
        """Read the JSON object stored at ``path``.

        With ``missing_ok`` an absent or blank file reads as ``{}``, which
        is how a fresh data file starts out.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Ok({}) if missing_ok else Err(f"No data file at {path}")
        except PermissionError:
            return Err(f"Cannot read {path}: permission denied")
        except OSError as e:
            return Err(f"Failed to read {path}: {e}")

        if missing_ok and not content.strip():
            return Ok({})
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        if not isinstance(data, dict):
            return Err(f"Expected a JSON object in {path}, got {type(data).__name__}")
        return Ok(data)

    def save_json(self, path: Path, data: dict[str, Any], indent: int = 2) -> Result[None, str]:
        """Replace the file at ``path`` with ``data``.

        Writes a sibling temp file first and renames it over the target,
        so a crash mid-write leaves the previous document intact.
        """
        try:
            content = json.dumps(data, indent=indent)
        except (TypeError, ValueError) as e:
            return Err(f"Cannot encode data for {path}: {e}")

        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, path)
        except PermissionError:
            return Err(f"Cannot write {path}: permission denied")
        except OSError as e:
            return Err(f"Failed to write {path}: {e}")
        return Ok(None)
