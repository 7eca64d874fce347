"""Storage infrastructure for todolists.

Provides implementations of the Storage port, using Result monads for
explicit error handling.
"""

from todolists.infrastructure.storage.document import DocumentStorage
from todolists.infrastructure.storage.file_storage import FileStorage
from todolists.infrastructure.storage.json_storage import JsonStorage
from todolists.infrastructure.storage.memory import MemoryStorage

__all__ = [
    "JsonStorage",
    "DocumentStorage",
    "FileStorage",
    "MemoryStorage",
]
