"""List endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from src.todo import OperationResult, sorted_lists
from src.todo.store import LIST_NOT_FOUND

from ..dependencies import (
    FLASH_SUCCESS,
    LISTS_URL,
    flash,
    is_xhr,
    list_url,
    load_store,
    not_found_redirect,
    pop_flash,
    redirect,
    save_store,
    serialize_list_detail,
    serialize_list_summary,
)
from ..schemas import (
    ListDetailResponse,
    ListEditResponse,
    ListNameRequest,
    ListsOverviewResponse,
    NewListResponse,
)

logger = logging.getLogger(__name__)


def register_list_routes(app: FastAPI) -> None:
    """Register list CRUD endpoints."""

    @app.get("/", response_model=None)
    async def index() -> Any:
        return redirect(LISTS_URL)

    @app.get("/lists", response_model=ListsOverviewResponse)
    async def list_lists(request: Request) -> Any:
        """View all lists, incomplete ones first."""
        store = load_store(request)
        return ListsOverviewResponse(
            lists=[
                serialize_list_summary(index, todo_list)
                for index, todo_list in sorted_lists(store.list_all())
            ],
            flash=pop_flash(request),
        )

    @app.post("/lists", response_model=None)
    async def create_list(request: Request, body: ListNameRequest) -> Any:
        """Create a new list."""
        store = load_store(request)
        result = store.create_list(body.list_name)
        if not result.ok:
            return JSONResponse(
                status_code=422,
                content=NewListResponse(list_name=body.list_name, error=result.message).model_dump(),
            )
        save_store(request, store)
        logger.info("Created list %r", body.list_name)
        flash(request, FLASH_SUCCESS, f"The '{body.list_name}' list has been created successfully!")
        return redirect(LISTS_URL)

    # Registered before /lists/{list_id} so "new" is not parsed as an index.
    @app.get("/lists/new", response_model=NewListResponse)
    async def new_list() -> Any:
        """Empty new-list form state."""
        return NewListResponse(list_name="")

    @app.get("/lists/{list_id}", response_model=ListDetailResponse)
    async def show_list(request: Request, list_id: int) -> Any:
        """Display a single list."""
        store = load_store(request)
        todo_list = store.get_list(list_id)
        if todo_list is None:
            return not_found_redirect(request, OperationResult.not_found(LIST_NOT_FOUND))
        return serialize_list_detail(list_id, todo_list, pop_flash(request))

    @app.get("/lists/{list_id}/edit", response_model=ListEditResponse)
    async def edit_list(request: Request, list_id: int) -> Any:
        """Edit form state for an existing list."""
        store = load_store(request)
        todo_list = store.get_list(list_id)
        if todo_list is None:
            return not_found_redirect(request, OperationResult.not_found(LIST_NOT_FOUND))
        return ListEditResponse(index=list_id, name=todo_list.name)

    @app.post("/lists/{list_id}", response_model=None)
    async def update_list(request: Request, list_id: int, body: ListNameRequest) -> Any:
        """Rename an existing list."""
        store = load_store(request)
        result = store.rename_list(list_id, body.list_name)
        if result.is_not_found:
            return not_found_redirect(request, result)
        if result.is_validation_error:
            todo_list = store.get_list(list_id)
            return JSONResponse(
                status_code=422,
                content=ListEditResponse(
                    index=list_id,
                    name=todo_list.name,
                    list_name=body.list_name,
                    error=result.message,
                ).model_dump(),
            )
        save_store(request, store)
        logger.info("Renamed list %d to %r", list_id, body.list_name)
        flash(request, FLASH_SUCCESS, f"The '{body.list_name}' list has been updated successfully!")
        return redirect(list_url(list_id))

    @app.post("/lists/{list_id}/destroy", response_model=None)
    async def delete_list(request: Request, list_id: int) -> Any:
        """Delete a list; later lists move up one position."""
        store = load_store(request)
        result = store.delete_list(list_id)
        if not result.ok:
            return not_found_redirect(request, result)
        save_store(request, store)
        logger.info("Deleted list %d", list_id)
        flash(request, FLASH_SUCCESS, "The list has been deleted successfully!")
        if is_xhr(request):
            return PlainTextResponse(LISTS_URL)
        return redirect(LISTS_URL)
