from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .models import Todo, TodoList
from .validation import error_for_list_name, error_for_todo

LIST_NOT_FOUND = "The specified list was not found."
TODO_NOT_FOUND = "The specified todo was not found."


class ErrorKind(str, Enum):
    """Why an operation was rejected."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a store mutation. Domain failures are returned, never raised."""

    ok: bool
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def invalid(cls, message: str) -> "OperationResult":
        return cls(ok=False, error=ErrorKind.VALIDATION, message=message)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(ok=False, error=ErrorKind.NOT_FOUND, message=message)

    @property
    def is_validation_error(self) -> bool:
        return self.error is ErrorKind.VALIDATION

    @property
    def is_not_found(self) -> bool:
        return self.error is ErrorKind.NOT_FOUND


class TodoStore:
    """In-memory collection of todo lists for one session.

    Lists and todos are identified by their position. Deleting an entry shifts
    every later entry down by one, so callers must re-read indices after a
    delete.
    """

    def __init__(self, lists: Optional[Iterable[TodoList]] = None):
        self._lists: List[TodoList] = list(lists) if lists is not None else []

    @classmethod
    def from_session(cls, data: Optional[Iterable[Dict[str, Any]]]) -> "TodoStore":
        """Build a store from its JSON-compatible session form."""
        return cls(TodoList.from_dict(item) for item in (data or []))

    def to_session(self) -> List[Dict[str, Any]]:
        return [todo_list.to_dict() for todo_list in self._lists]

    def list_all(self) -> List[TodoList]:
        return self._lists

    def get_list(self, index: int) -> Optional[TodoList]:
        if 0 <= index < len(self._lists):
            return self._lists[index]
        return None

    def get_todo(self, list_index: int, todo_index: int) -> Optional[Todo]:
        todo_list = self.get_list(list_index)
        if todo_list is None or not 0 <= todo_index < len(todo_list.todos):
            return None
        return todo_list.todos[todo_index]

    def create_list(self, name: str) -> OperationResult:
        error = error_for_list_name(name, self._lists)
        if error:
            return OperationResult.invalid(error)
        self._lists.append(TodoList(name=name))
        return OperationResult.success()

    def rename_list(self, index: int, name: str) -> OperationResult:
        todo_list = self.get_list(index)
        if todo_list is None:
            return OperationResult.not_found(LIST_NOT_FOUND)
        # The uniqueness check includes the list itself, so keeping the
        # current name is reported as a duplicate.
        error = error_for_list_name(name, self._lists)
        if error:
            return OperationResult.invalid(error)
        todo_list.name = name
        return OperationResult.success()

    def delete_list(self, index: int) -> OperationResult:
        if self.get_list(index) is None:
            return OperationResult.not_found(LIST_NOT_FOUND)
        del self._lists[index]
        return OperationResult.success()

    def add_todo(self, list_index: int, text: str) -> OperationResult:
        todo_list = self.get_list(list_index)
        if todo_list is None:
            return OperationResult.not_found(LIST_NOT_FOUND)
        error = error_for_todo(text)
        if error:
            return OperationResult.invalid(error)
        todo_list.todos.append(Todo(name=text))
        return OperationResult.success()

    def delete_todo(self, list_index: int, todo_index: int) -> OperationResult:
        result = self._check_todo(list_index, todo_index)
        if not result.ok:
            return result
        del self._lists[list_index].todos[todo_index]
        return OperationResult.success()

    def set_todo_completed(
        self, list_index: int, todo_index: int, completed: bool
    ) -> OperationResult:
        result = self._check_todo(list_index, todo_index)
        if not result.ok:
            return result
        self._lists[list_index].todos[todo_index].completed = completed
        return OperationResult.success()

    def complete_all(self, list_index: int) -> OperationResult:
        todo_list = self.get_list(list_index)
        if todo_list is None:
            return OperationResult.not_found(LIST_NOT_FOUND)
        for todo in todo_list.todos:
            todo.completed = True
        return OperationResult.success()

    def _check_todo(self, list_index: int, todo_index: int) -> OperationResult:
        if self.get_list(list_index) is None:
            return OperationResult.not_found(LIST_NOT_FOUND)
        if self.get_todo(list_index, todo_index) is None:
            return OperationResult.not_found(TODO_NOT_FOUND)
        return OperationResult.success()

    def __len__(self) -> int:
        return len(self._lists)
