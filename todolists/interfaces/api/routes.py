"""FastAPI routes for todolists.

Endpoints are plain ``def`` functions, so FastAPI runs them on its thread
pool; the shared Repository serializes access with its own lock.

Repository errors map to HTTP statuses by kind::

    not_found       404
    already_exists  409
    invalid_input   400
    decode_error    400
    internal        500
    storage         503

Error bodies are ``{"detail": {"code": ..., "message": ..., "details": ...}}``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todolists import __version__
from todolists.application import Repository
from todolists.config import AppConfig, get_global_config
from todolists.domain.filter import decode, encode
from todolists.domain.shared import Err, ErrorKind, Result, TodoError
from todolists.domain.task import TaskAdd, TaskChange
from todolists.domain.types import Colour
from todolists.infrastructure.storage import FileStorage
from todolists.interfaces.api.schemas import (
    CreateListRequest,
    FilteredListDefinition,
    FilteredListResponse,
    ListNamesResponse,
    ListResponse,
    ResolvedList,
    TaskResponse,
)

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.DECODE_ERROR: 400,
    ErrorKind.INTERNAL: 500,
    ErrorKind.STORAGE: 503,
}


def _unwrap(result: Result):
    """Return the Ok value or raise the HTTPException matching the error kind."""
    if isinstance(result, Err):
        error: TodoError = result.error
        status = STATUS_BY_KIND.get(error.kind, 500)
        if status >= 500:
            logger.error(f"Request failed with {error.kind.value}: {error.message}")
        raise HTTPException(status_code=status, detail=error.to_dict())
    return result.value


def get_repository(request: Request) -> Repository:
    """Dependency returning the repository attached to the running app."""
    return request.app.state.repository


# =============================================================================
# Router
# =============================================================================


router = APIRouter(prefix="/api")


# =============================================================================
# Lists
# =============================================================================


@router.get("/list", response_model=ListNamesResponse)
def list_names(repo: Repository = Depends(get_repository)):
    """List the names of all real and filtered lists."""
    lists, filtered = _unwrap(repo.list_names())
    return ListNamesResponse(lists=lists, filtered_lists=filtered)


@router.post("/list", response_model=ListResponse, status_code=201)
def create_list(req: CreateListRequest, repo: Repository = Depends(get_repository)):
    """Create an empty list."""
    task_list = _unwrap(repo.add_list(req.name, req.colour or Colour()))
    return ListResponse(list=task_list)


@router.get("/list/{name}", response_model=ListResponse)
def get_list(name: str, repo: Repository = Depends(get_repository)):
    """Get a list and its tasks."""
    return ListResponse(list=_unwrap(repo.get_list(name)))


@router.delete("/list/{name}", status_code=204)
def delete_list(name: str, repo: Repository = Depends(get_repository)):
    """Delete a list and all of its tasks."""
    _unwrap(repo.delete_list(name))
    return Response(status_code=204)


@router.post("/list/{name}", response_model=TaskResponse, status_code=201)
def add_task(name: str, req: TaskAdd, repo: Repository = Depends(get_repository)):
    """Add a task to the end of a list."""
    return TaskResponse(task=_unwrap(repo.add_task(name, req)))


# =============================================================================
# Tasks
# =============================================================================


@router.get("/items/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, repo: Repository = Depends(get_repository)):
    """Get a task by ID."""
    return TaskResponse(task=_unwrap(repo.get_task(task_id)))


@router.patch("/items/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, req: TaskChange, repo: Repository = Depends(get_repository)):
    """Update a task. Omitted fields keep their current value."""
    return TaskResponse(task=_unwrap(repo.update_task(task_id, req)))


@router.delete("/items/{task_id}", status_code=204)
def delete_task(task_id: int, repo: Repository = Depends(get_repository)):
    """Delete a task."""
    _unwrap(repo.delete_task(task_id))
    return Response(status_code=204)


# =============================================================================
# Filtered Lists
# =============================================================================


@router.get("/filtered/{name}", response_model=FilteredListResponse)
def resolve_filtered_list(name: str, repo: Repository = Depends(get_repository)):
    """Evaluate a filtered list and return the matching tasks."""
    items = _unwrap(repo.resolve_filtered_list(name))
    return FilteredListResponse(list=ResolvedList(name=name, items=items))


@router.post("/filtered", response_model=FilteredListDefinition, status_code=201)
def create_filtered_list(
    req: FilteredListDefinition,
    repo: Repository = Depends(get_repository),
):
    """Create a filtered list from a persisted-form filter."""
    node = _unwrap(decode(req.filter))
    filtered = _unwrap(repo.add_filtered_list(req.name, node))
    return FilteredListDefinition(name=filtered.name, filter=encode(filtered.filter))


@router.delete("/filtered/{name}", status_code=204)
def delete_filtered_list(name: str, repo: Repository = Depends(get_repository)):
    """Delete a filtered list definition."""
    _unwrap(repo.delete_filtered_list(name))
    return Response(status_code=204)


# =============================================================================
# App
# =============================================================================


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = TodoError.invalid_input("invalid request", errors=_error_summary(exc))
    return JSONResponse(status_code=400, content={"detail": error.to_dict()})


def _error_summary(exc: RequestValidationError) -> list[dict]:
    """Reduce pydantic validation errors to location and message."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]


def create_app(
    repository: Optional[Repository] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        repository: Repository to serve. Built from ``config.data_path`` if
            not provided.
        config: Settings for storage and CORS. Loaded from the global config
            if not provided.
    """
    config = config or get_global_config()
    if repository is None:
        logger.info(f"Using data file {config.data_path}")
        repository = Repository(FileStorage(config.data_path))

    app = FastAPI(
        title="todolists",
        description="Task lists and saved filters over them",
        version=__version__,
    )
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(router)

    return app
