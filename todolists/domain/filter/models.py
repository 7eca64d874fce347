"""Virtual list model."""

from dataclasses import dataclass
from typing import Any

from todolists.domain.shared.errors import TodoError
from todolists.domain.shared.result import Err, Ok, Result

from .codec import decode, encode
from .nodes import Node


@dataclass(frozen=True)
class FilteredList:
    """A named filter over every task in every real list.

    The filter is evaluated on each read; matching tasks are never stored.
    """

    name: str
    filter: Node

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "filter": encode(self.filter)}

    @classmethod
    def from_dict(cls, data: Any) -> Result["FilteredList", TodoError]:
        """Rebuild a filtered list from its persisted form."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return Err(TodoError.decode_error("filtered list entry must have a string 'name'"))
        name = data["name"]
        node = decode(data.get("filter"))
        if isinstance(node, Err):
            error = node.error
            return Err(
                TodoError.decode_error(
                    f"filtered list {name!r}: {error.message}",
                    list=name,
                    **error.details,
                )
            )
        return Ok(cls(name=name, filter=node.value))
