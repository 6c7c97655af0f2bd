from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class Todo:
    """A single item inside a list."""

    name: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        return cls(name=data["name"], completed=bool(data.get("completed", False)))


@dataclass(slots=True)
class TodoList:
    """A named, ordered collection of todos.

    Todos are addressed by their position in ``todos``; there is no stable id.
    """

    name: str
    todos: List[Todo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "todos": [todo.to_dict() for todo in self.todos]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoList":
        return cls(
            name=data["name"],
            todos=[Todo.from_dict(item) for item in data.get("todos", [])],
        )
