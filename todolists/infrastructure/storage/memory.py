"""In-process storage used for tests and the demo server."""

import copy
from typing import Any

from todolists.domain.shared.result import Ok, Result
from todolists.infrastructure.storage.document import Document, DocumentStorage


class MemoryStorage(DocumentStorage):
    """Storage port that keeps the serialized document in memory.

    Lists and filters go through the same serialization as the file
    storage, so loaded objects never share state with saved ones.
    """

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self._document: dict[str, Any] = copy.deepcopy(document or {})

    @property
    def document(self) -> dict[str, Any]:
        """A copy of the stored document."""
        return copy.deepcopy(self._document)

    def _read(self) -> Result[dict[str, Any], str]:
        return Ok(copy.deepcopy(self._document))

    def _write(self, document: Document) -> Result[None, str]:
        self._document = copy.deepcopy(document)
        return Ok(None)
