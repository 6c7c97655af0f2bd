"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.responses import RedirectResponse

from src.todo import (
    OperationResult,
    TodoList,
    TodoStore,
    is_complete,
    list_class,
    remaining_count,
    sorted_todos,
    total_count,
)
from src.todo_manager import Config, setup_logger

from .schemas import FlashMessages, ListDetailResponse, ListSummary, TodoResponse

config = Config.from_yaml()
setup_logger(log_level=config.log_level, log_file=config.log_file)

logger = logging.getLogger(__name__)

SESSION_LISTS_KEY = "lists"
FLASH_SUCCESS = "success"
FLASH_ERROR = "error"
LISTS_URL = "/lists"


def load_store(request: Request) -> TodoStore:
    """Rebuild the caller's TodoStore from session state."""
    try:
        return TodoStore.from_session(request.session.get(SESSION_LISTS_KEY))
    except (KeyError, TypeError, AttributeError) as exc:
        logger.exception("Failed to load lists from session: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to load session data") from exc


def save_store(request: Request, store: TodoStore) -> None:
    """Write the store back to session state."""
    request.session[SESSION_LISTS_KEY] = store.to_session()


def flash(request: Request, kind: str, message: str) -> None:
    request.session[kind] = message


def pop_flash(request: Request) -> FlashMessages:
    """Consume pending flash messages."""
    return FlashMessages(
        success=request.session.pop(FLASH_SUCCESS, None),
        error=request.session.pop(FLASH_ERROR, None),
    )


def is_xhr(request: Request) -> bool:
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=303)


def list_url(list_id: int) -> str:
    return f"{LISTS_URL}/{list_id}"


def not_found_redirect(request: Request, result: OperationResult) -> RedirectResponse:
    """Send the user back to the overview with the not-found message."""
    logger.warning("Stale reference on %s: %s", request.url.path, result.message)
    flash(request, FLASH_ERROR, result.message or "Not found.")
    return redirect(LISTS_URL)


def serialize_list_summary(index: int, todo_list: TodoList) -> ListSummary:
    """Convert a TodoList into its overview entry."""
    return ListSummary(
        index=index,
        name=todo_list.name,
        todos_count=total_count(todo_list),
        remaining_count=remaining_count(todo_list),
        complete=is_complete(todo_list),
        css_class=list_class(todo_list),
    )


def serialize_list_detail(
    index: int, todo_list: TodoList, flash_messages: Optional[FlashMessages] = None
) -> ListDetailResponse:
    """Convert a TodoList into the single-list view, open todos first."""
    summary = serialize_list_summary(index, todo_list)
    return ListDetailResponse(
        **summary.model_dump(),
        todos=[
            TodoResponse(index=todo_index, name=todo.name, completed=todo.completed)
            for todo_index, todo in sorted_todos(todo_list.todos)
        ],
        flash=flash_messages or FlashMessages(),
    )
