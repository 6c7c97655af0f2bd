"""Route registration helpers."""

from .lists import register_list_routes
from .todos import register_todo_routes

__all__ = [
    "register_list_routes",
    "register_todo_routes",
]
