"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictBool, field_validator


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class FlashMessages(BaseModel):
    """One-shot messages popped from the session by a view."""

    success: Optional[str] = None
    error: Optional[str] = None


class ListNameRequest(BaseModel):
    """Request body for creating or renaming a list."""

    # Length and uniqueness are checked by the store so the view can show
    # the same messages as the CLI.
    list_name: str = Field(..., description="New list name (surrounding whitespace is ignored)")

    @field_validator("list_name", mode="before")
    @classmethod
    def strip_list_name(cls, value):
        return _strip(value)


class TodoCreateRequest(BaseModel):
    """Request body for adding a todo."""

    todo: str = Field(..., description="Todo text (surrounding whitespace is ignored)")

    @field_validator("todo", mode="before")
    @classmethod
    def strip_todo(cls, value):
        return _strip(value)


class TodoStatusRequest(BaseModel):
    """Request body for marking a todo done or not done."""

    # Only JSON true/false; "yes", 1 and "true" are rejected with 422.
    completed: StrictBool


class TodoResponse(BaseModel):
    """Serialized todo. ``index`` is its position in the list."""

    index: int
    name: str
    completed: bool


class ListSummary(BaseModel):
    """Serialized list without its todos."""

    index: int
    name: str
    todos_count: int
    remaining_count: int
    complete: bool
    css_class: Optional[str] = None


class ListsOverviewResponse(BaseModel):
    """All lists, incomplete ones first."""

    lists: List[ListSummary]
    flash: FlashMessages = Field(default_factory=FlashMessages)


class ListDetailResponse(ListSummary):
    """A single list with its todos, open ones first."""

    todos: List[TodoResponse]
    flash: FlashMessages = Field(default_factory=FlashMessages)
    error: Optional[str] = None


class ListEditResponse(BaseModel):
    """Edit form state for a list."""

    index: int
    name: str
    list_name: Optional[str] = None
    error: Optional[str] = None


class NewListResponse(BaseModel):
    """New-list form state; carries the rejected name and error after a failed create."""

    list_name: str = ""
    error: Optional[str] = None
