"""Infrastructure layer for todolists.

This module provides the I/O side of the Storage port, returning Result
monads for explicit error handling.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - FileStorage: Lists and filtered lists in one JSON file
        - MemoryStorage: In-process document for tests and demos
"""

from todolists.infrastructure.storage import (
    DocumentStorage,
    FileStorage,
    JsonStorage,
    MemoryStorage,
)

__all__ = [
    "JsonStorage",
    "DocumentStorage",
    "FileStorage",
    "MemoryStorage",
]
