"""Derived queries and display ordering over lists and todos."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence, Tuple, TypeVar

from .models import Todo, TodoList

T = TypeVar("T")


def total_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def remaining_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def is_complete(todo_list: TodoList) -> bool:
    """A list is complete when it has todos and none of them remain.

    An empty list is never complete.
    """
    return total_count(todo_list) > 0 and remaining_count(todo_list) == 0


def list_class(todo_list: TodoList) -> Optional[str]:
    """CSS class hint used by views to style finished lists."""
    return "complete" if is_complete(todo_list) else None


def _partition(
    items: Sequence[T], done: Callable[[T], bool]
) -> Iterator[Tuple[int, T]]:
    # Stable two-bucket partition; yields (original_index, item).
    for index, item in enumerate(items):
        if not done(item):
            yield index, item
    for index, item in enumerate(items):
        if done(item):
            yield index, item


def sorted_lists(lists: Sequence[TodoList]) -> Iterator[Tuple[int, TodoList]]:
    """Yield incomplete lists first, then complete ones, with original indices."""
    return _partition(lists, is_complete)


def sorted_todos(todos: Sequence[Todo]) -> Iterator[Tuple[int, Todo]]:
    """Yield open todos first, then completed ones, with original indices."""
    return _partition(todos, lambda todo: todo.completed)
