#!/usr/bin/env python3
"""
Todo list CLI. Works on a JSON store file instead of a browser session.

Usage:
    python -m src.todo lists [--format json|text]
    python -m src.todo show --list N [--format json|text]
    python -m src.todo create-list --name "Groceries"
    python -m src.todo rename-list --list N --name "New name"
    python -m src.todo delete-list --list N
    python -m src.todo add --list N --text "Milk"
    python -m src.todo delete --list N --todo M
    python -m src.todo check --list N --todo M
    python -m src.todo uncheck --list N --todo M
    python -m src.todo complete-all --list N

Indices are 0-based positions as printed by ``lists`` and ``show``.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from src.todo_manager import Config

from .models import TodoList
from .ordering import is_complete, remaining_count, sorted_lists, sorted_todos, total_count
from .store import LIST_NOT_FOUND, OperationResult, TodoStore


def resolve_store_path(store_path: Optional[str]) -> Path:
    """--store-path, then TODO_LISTS_STORE_PATH, then the configured default."""
    if store_path:
        return Path(store_path)
    env_path = os.getenv("TODO_LISTS_STORE_PATH")
    if env_path:
        return Path(env_path)
    return Path(Config.from_yaml().cli.store_file)


def load_store_file(path: Path) -> TodoStore:
    if not path.exists():
        return TodoStore()
    with open(path, "r", encoding="utf-8") as f:
        return TodoStore.from_session(json.load(f))


def save_store_file(path: Path, store: TodoStore) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(store.to_session(), f, ensure_ascii=False, indent=2)


def format_list_text(index: int, todo_list: TodoList) -> str:
    """List summary line"""
    mark = "x" if is_complete(todo_list) else " "
    return (
        f"[{mark}] {index}: {todo_list.name} "
        f"({remaining_count(todo_list)}/{total_count(todo_list)} remaining)"
    )


def format_list_json(index: int, todo_list: TodoList) -> Dict[str, Any]:
    return {
        "index": index,
        "name": todo_list.name,
        "todos_count": total_count(todo_list),
        "remaining_count": remaining_count(todo_list),
        "complete": is_complete(todo_list),
    }


def cmd_lists(store: TodoStore, output_format: str) -> int:
    """Print all lists, incomplete ones first."""
    entries = list(sorted_lists(store.list_all()))
    if output_format == "json":
        print(json.dumps([format_list_json(i, item) for i, item in entries], ensure_ascii=False))
    elif not entries:
        print("No lists yet.")
    else:
        for index, todo_list in entries:
            print(format_list_text(index, todo_list))
    return 0


def cmd_show(store: TodoStore, list_index: int, output_format: str) -> int:
    """Print one list with its todos, open ones first."""
    todo_list = store.get_list(list_index)
    if todo_list is None:
        print(f"Error: {LIST_NOT_FOUND}", file=sys.stderr)
        return 1
    todos = list(sorted_todos(todo_list.todos))
    if output_format == "json":
        payload = format_list_json(list_index, todo_list)
        payload["todos"] = [
            {"index": i, "name": todo.name, "completed": todo.completed} for i, todo in todos
        ]
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(format_list_text(list_index, todo_list))
        for index, todo in todos:
            print(f"  [{'x' if todo.completed else ' '}] {index}: {todo.name}")
    return 0


def run_mutation(
    path: Path,
    store: TodoStore,
    operation: Callable[[], OperationResult],
    success_message: str,
    output_format: str,
) -> int:
    """Apply one store operation and persist only if it succeeded."""
    result = operation()
    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    save_store_file(path, store)
    if output_format == "json":
        print(json.dumps({"ok": True, "message": success_message}, ensure_ascii=False))
    else:
        print(success_message)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Todo list CLI backed by a JSON store file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--store-path",
        type=str,
        help="JSON store file (default: TODO_LISTS_STORE_PATH or config cli.store_file)",
    )
    subparsers = parser.add_subparsers(dest="command", help="command to run", required=True)

    def add_format(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--format",
            choices=["json", "text"],
            default="text",
            help="output format (default: text)",
        )

    def add_list(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--list", dest="list_index", type=int, required=True, help="list index")

    def add_todo_index(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--todo", dest="todo_index", type=int, required=True, help="todo index")

    add_format(subparsers.add_parser("lists", help="show all lists"))

    parser_show = subparsers.add_parser("show", help="show one list")
    add_list(parser_show)
    add_format(parser_show)

    parser_create = subparsers.add_parser("create-list", help="create a list")
    parser_create.add_argument("--name", required=True, help="list name")
    add_format(parser_create)

    parser_rename = subparsers.add_parser("rename-list", help="rename a list")
    add_list(parser_rename)
    parser_rename.add_argument("--name", required=True, help="new list name")
    add_format(parser_rename)

    parser_delete_list = subparsers.add_parser("delete-list", help="delete a list")
    add_list(parser_delete_list)
    add_format(parser_delete_list)

    parser_add = subparsers.add_parser("add", help="add a todo to a list")
    add_list(parser_add)
    parser_add.add_argument("--text", required=True, help="todo text")
    add_format(parser_add)

    for command, help_text in (
        ("delete", "delete a todo"),
        ("check", "mark a todo as done"),
        ("uncheck", "mark a todo as not done"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        add_list(sub)
        add_todo_index(sub)
        add_format(sub)

    parser_complete_all = subparsers.add_parser("complete-all", help="mark every todo done")
    add_list(parser_complete_all)
    add_format(parser_complete_all)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point"""
    args = build_parser().parse_args(argv)

    path = resolve_store_path(args.store_path)
    try:
        store = load_store_file(path)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"Error: failed to read store file {path}: {exc}", file=sys.stderr)
        return 1

    if args.command == "lists":
        return cmd_lists(store, args.format)
    elif args.command == "show":
        return cmd_show(store, args.list_index, args.format)
    elif args.command == "create-list":
        name = args.name.strip()
        return run_mutation(
            path,
            store,
            lambda: store.create_list(name),
            f"The '{name}' list has been created successfully!",
            args.format,
        )
    elif args.command == "rename-list":
        name = args.name.strip()
        return run_mutation(
            path,
            store,
            lambda: store.rename_list(args.list_index, name),
            f"The '{name}' list has been updated successfully!",
            args.format,
        )
    elif args.command == "delete-list":
        return run_mutation(
            path,
            store,
            lambda: store.delete_list(args.list_index),
            "The list has been deleted successfully!",
            args.format,
        )
    elif args.command == "add":
        text = args.text.strip()
        return run_mutation(
            path,
            store,
            lambda: store.add_todo(args.list_index, text),
            "The todo has been added successfully!",
            args.format,
        )
    elif args.command == "delete":
        return run_mutation(
            path,
            store,
            lambda: store.delete_todo(args.list_index, args.todo_index),
            "The todo has been deleted successfully!",
            args.format,
        )
    elif args.command in ("check", "uncheck"):
        return run_mutation(
            path,
            store,
            lambda: store.set_todo_completed(
                args.list_index, args.todo_index, args.command == "check"
            ),
            "The todo has been updated successfully!",
            args.format,
        )
    elif args.command == "complete-all":
        return run_mutation(
            path,
            store,
            lambda: store.complete_all(args.list_index),
            "All todos have been completed successfully!",
            args.format,
        )
    else:
        print(f"Error: unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
