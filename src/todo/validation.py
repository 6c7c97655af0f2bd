"""Name checks for lists and todos.

Each function returns an error message, or ``None`` when the value is valid.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .models import TodoList

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100


def _length_ok(value: str) -> bool:
    return MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH


def error_for_list_name(name: str, lists: Iterable[TodoList]) -> Optional[str]:
    """Return an error message if ``name`` cannot be used for a list."""
    if not _length_ok(name):
        return f"List name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
    if any(existing.name == name for existing in lists):
        return "List name must be unique."
    return None


def error_for_todo(name: str) -> Optional[str]:
    """Return an error message if ``name`` cannot be used for a todo."""
    if not _length_ok(name):
        return f"Todo name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
    return None
