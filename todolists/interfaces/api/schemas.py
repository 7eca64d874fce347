"""Request/Response schemas for the todolists API.

These Pydantic models define the API contract for request and response bodies.
Task bodies reuse the domain models (``TaskAdd``, ``TaskChange``, ``Task``).
"""

from typing import Any, Optional

from pydantic import BaseModel

from todolists.domain.task import Task, TaskList
from todolists.domain.types import Colour


# =============================================================================
# List Schemas
# =============================================================================


class CreateListRequest(BaseModel):
    """Request to create a new list."""

    name: str
    colour: Optional[Colour] = None


class ListNamesResponse(BaseModel):
    """Names of all real and filtered lists."""

    lists: list[str]
    filtered_lists: list[str]


class ListResponse(BaseModel):
    """A real list with its tasks."""

    list: TaskList


# =============================================================================
# Task Schemas
# =============================================================================


class TaskResponse(BaseModel):
    """A single task."""

    task: Task


# =============================================================================
# Filtered List Schemas
# =============================================================================


class FilteredListDefinition(BaseModel):
    """A filtered list in its persisted form.

    ``filter`` is a tagged node: ``{"operator": "AND"|"OR", "children": [...]}``
    or ``{"field": ..., "op": ..., "value": ...}``.
    """

    name: str
    filter: dict[str, Any]


class ResolvedList(BaseModel):
    """Tasks currently matching a filtered list."""

    name: str
    items: list[Task]


class FilteredListResponse(BaseModel):
    """A resolved filtered list, shaped like a real list response."""

    list: ResolvedList
    filtered: bool = True
