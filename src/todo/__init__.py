"""Session-scoped todo lists shared by the web server and the CLI."""

from .models import Todo, TodoList
from .ordering import (
    is_complete,
    list_class,
    remaining_count,
    sorted_lists,
    sorted_todos,
    total_count,
)
from .store import ErrorKind, OperationResult, TodoStore
from .validation import error_for_list_name, error_for_todo

__all__ = [
    "Todo",
    "TodoList",
    "TodoStore",
    "OperationResult",
    "ErrorKind",
    "error_for_list_name",
    "error_for_todo",
    "is_complete",
    "list_class",
    "remaining_count",
    "total_count",
    "sorted_lists",
    "sorted_todos",
]
