"""JSON file backed storage for lists and filtered lists."""

from pathlib import Path
from typing import Any

from todolists.domain.shared.result import Result
from todolists.infrastructure.storage.document import Document, DocumentStorage
from todolists.infrastructure.storage.json_storage import JsonStorage


class FileStorage(DocumentStorage):
    """Storage port backed by one JSON file.

    The file (and its directory) is created on the first write; a missing
    or empty file reads as an empty document.
    """

    def __init__(self, path: Path | str, storage: JsonStorage | None = None) -> None:
        """Initialize the storage.

        Args:
            path: Location of the JSON document.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = Path(path).expanduser()
        self._storage = storage or JsonStorage()

    def _describe(self) -> str:
        return str(self.path)

    def _read(self) -> Result[dict[str, Any], str]:
        return self._storage.load_json(self.path, missing_ok=True)

    def _write(self, document: Document) -> Result[None, str]:
        return self._storage.save_json(self.path, document)
