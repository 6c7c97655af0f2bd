"""Todo endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from ..dependencies import (
    FLASH_SUCCESS,
    flash,
    is_xhr,
    list_url,
    load_store,
    not_found_redirect,
    redirect,
    save_store,
    serialize_list_detail,
)
from ..schemas import TodoCreateRequest, TodoStatusRequest

logger = logging.getLogger(__name__)


def register_todo_routes(app: FastAPI) -> None:
    """Register endpoints that act on the todos of one list."""

    @app.post("/lists/{list_id}/todos", response_model=None)
    async def add_todo(request: Request, list_id: int, body: TodoCreateRequest) -> Any:
        """Add a todo to a list."""
        store = load_store(request)
        result = store.add_todo(list_id, body.todo)
        if result.is_not_found:
            return not_found_redirect(request, result)
        if result.is_validation_error:
            detail = serialize_list_detail(list_id, store.get_list(list_id))
            detail.error = result.message
            return JSONResponse(status_code=422, content=detail.model_dump())
        save_store(request, store)
        logger.info("Added todo to list %d", list_id)
        flash(request, FLASH_SUCCESS, "The todo has been added successfully!")
        return redirect(list_url(list_id))

    @app.post("/lists/{list_id}/todos/{todo_id}/destroy", response_model=None)
    async def delete_todo(request: Request, list_id: int, todo_id: int) -> Any:
        """Delete a todo; later todos move up one position."""
        store = load_store(request)
        result = store.delete_todo(list_id, todo_id)
        if not result.ok:
            return not_found_redirect(request, result)
        save_store(request, store)
        logger.info("Deleted todo %d from list %d", todo_id, list_id)
        flash(request, FLASH_SUCCESS, "The todo has been deleted successfully!")
        if is_xhr(request):
            return Response(status_code=204)
        return redirect(list_url(list_id))

    @app.post("/lists/{list_id}/todos/{todo_id}", response_model=None)
    async def update_todo(
        request: Request, list_id: int, todo_id: int, body: TodoStatusRequest
    ) -> Any:
        """Mark a todo as done or not done."""
        store = load_store(request)
        result = store.set_todo_completed(list_id, todo_id, body.completed)
        if not result.ok:
            return not_found_redirect(request, result)
        save_store(request, store)
        logger.info("Set todo %d in list %d completed=%s", todo_id, list_id, body.completed)
        flash(request, FLASH_SUCCESS, "The todo has been updated successfully!")
        return redirect(list_url(list_id))

    @app.post("/lists/{list_id}/complete_all", response_model=None)
    async def complete_all(request: Request, list_id: int) -> Any:
        """Mark every todo in a list as done."""
        store = load_store(request)
        result = store.complete_all(list_id)
        if not result.ok:
            return not_found_redirect(request, result)
        save_store(request, store)
        logger.info("Completed all todos in list %d", list_id)
        flash(request, FLASH_SUCCESS, "All todos have been completed successfully!")
        return redirect(list_url(list_id))
