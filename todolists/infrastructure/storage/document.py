"""Storage over a single document holding every list and filtered list.

The document layout is::

    {
        "lists": [{"name": ..., "colour": {...}, "items": [task, ...]}, ...],
        "filtered": [{"name": ..., "filter": node}, ...]
    }

Subclasses only decide where the document lives (a JSON file, memory).
Each operation reads the whole document, changes it and writes it back, so
a batch save either lands completely or not at all.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from todolists.domain.filter import FilteredList
from todolists.domain.shared.result import Err, Ok, Result, flat_map
from todolists.domain.task import TaskList

Document = dict[str, list[dict[str, Any]]]


def _upsert_entry(entries: list[dict[str, Any]], entry: dict[str, Any]) -> None:
    for index, existing in enumerate(entries):
        if existing.get("name") == entry["name"]:
            entries[index] = entry
            return
    entries.append(entry)


class DocumentStorage(ABC):
    """Storage port implementation over one document."""

    @abstractmethod
    def _read(self) -> Result[dict[str, Any], str]:
        """Return the raw stored document, ``{}`` if nothing is stored yet."""

    @abstractmethod
    def _write(self, document: Document) -> Result[None, str]:
        """Replace the stored document."""

    def _describe(self) -> str:
        return type(self).__name__

    def _load(self) -> Result[Document, str]:
        return flat_map(self._read(), self._sections)

    def _sections(self, raw: dict[str, Any]) -> Result[Document, str]:
        document: Document = {}
        for key in ("lists", "filtered"):
            entries = raw.get(key) or []
            if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
                return Err(f"Invalid '{key}' section in {self._describe()}: expected a list of objects")
            document[key] = entries
        return Ok(document)

    def _upsert(self, document: Document, key: str, entries: list[dict[str, Any]]) -> Result[None, str]:
        for entry in entries:
            _upsert_entry(document[key], entry)
        return self._write(document)

    def _drop(self, document: Document, key: str, name: str) -> Result[None, str]:
        document[key] = [entry for entry in document[key] if entry.get("name") != name]
        return self._write(document)

    # Lists

    def load_lists(self) -> Result[list[TaskList], str]:
        return flat_map(self._load(), self._parse_lists)

    def _parse_lists(self, document: Document) -> Result[list[TaskList], str]:
        try:
            return Ok([TaskList.model_validate(entry) for entry in document["lists"]])
        except ValidationError as e:
            return Err(f"Invalid list data in {self._describe()}: {e}")

    def save_lists(self, lists: Sequence[TaskList]) -> Result[None, str]:
        entries = [task_list.model_dump(mode="json") for task_list in lists]
        return flat_map(self._load(), lambda document: self._upsert(document, "lists", entries))

    def delete_list(self, name: str) -> Result[None, str]:
        return flat_map(self._load(), lambda document: self._drop(document, "lists", name))

    # Filtered lists

    def load_filtered_lists(self) -> Result[list[FilteredList], str]:
        return flat_map(self._load(), self._parse_filtered)

    def _parse_filtered(self, document: Document) -> Result[list[FilteredList], str]:
        filtered: list[FilteredList] = []
        for entry in document["filtered"]:
            decoded = FilteredList.from_dict(entry)
            if isinstance(decoded, Err):
                return Err(f"Invalid filter in {self._describe()}: {decoded.error.message}")
            filtered.append(decoded.value)
        return Ok(filtered)

    def save_filtered_list(self, filtered: FilteredList) -> Result[None, str]:
        entry = filtered.to_dict()
        return flat_map(self._load(), lambda document: self._upsert(document, "filtered", [entry]))

    def delete_filtered_list(self, name: str) -> Result[None, str]:
        return flat_map(self._load(), lambda document: self._drop(document, "filtered", name))
