"""Application layer for todolists.

This package wires the domain to storage:

    ports - Storage protocol the repository persists through
    repository - Write-through, lock-guarded owner of all list state
    demo - Sample lists and the "Soon" filtered list

Example usage:
    >>> from todolists.application import Repository
    >>> from todolists.infrastructure.storage import MemoryStorage
    >>>
    >>> repo = Repository(MemoryStorage())
    >>> result = repo.add_list("Home")
"""

from todolists.application.demo import add_demo_data, soon_filter
from todolists.application.ports import Storage
from todolists.application.repository import Repository

__all__ = [
    "Storage",
    "Repository",
    "add_demo_data",
    "soon_filter",
]
