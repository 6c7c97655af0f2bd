"""Todo list CLI tests"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(args: list[str], store_path: Path) -> subprocess.CompletedProcess:
    """Run the CLI as a subprocess."""
    cmd = [
        sys.executable,
        "-m",
        "src.todo",
        "--store-path",
        str(store_path),
    ] + args
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
    )


def test_cli_lists_empty(tmp_path):
    store_path = tmp_path / "store.json"
    result = run_cli(["lists", "--format", "json"], store_path)
    assert result.returncode == 0
    assert json.loads(result.stdout) == []
    assert not store_path.exists()


def test_cli_create_list_and_add_todos(tmp_path):
    store_path = tmp_path / "store.json"

    result = run_cli(["create-list", "--name", " Groceries "], store_path)
    assert result.returncode == 0
    assert "The 'Groceries' list has been created successfully!" in result.stdout

    for text in ("Milk", "Bread", "Eggs"):
        assert run_cli(["add", "--list", "0", "--text", text], store_path).returncode == 0
    assert run_cli(["check", "--list", "0", "--todo", "1"], store_path).returncode == 0

    result = run_cli(["show", "--list", "0", "--format", "json"], store_path)
    assert result.returncode == 0
    shown = json.loads(result.stdout)
    assert shown["name"] == "Groceries"
    assert shown["remaining_count"] == 2
    assert [(todo["index"], todo["name"]) for todo in shown["todos"]] == [
        (0, "Milk"),
        (2, "Eggs"),
        (1, "Bread"),
    ]

    saved = json.loads(store_path.read_text(encoding="utf-8"))
    assert saved[0]["todos"][1] == {"name": "Bread", "completed": True}


def test_cli_duplicate_list_fails_without_writing(tmp_path):
    store_path = tmp_path / "store.json"
    run_cli(["create-list", "--name", "Home"], store_path)
    before = store_path.read_text(encoding="utf-8")

    result = run_cli(["create-list", "--name", "Home"], store_path)
    assert result.returncode == 1
    assert "List name must be unique." in result.stderr
    assert store_path.read_text(encoding="utf-8") == before


def test_cli_rename_and_delete_list(tmp_path):
    store_path = tmp_path / "store.json"
    run_cli(["create-list", "--name", "A"], store_path)
    run_cli(["create-list", "--name", "B"], store_path)

    result = run_cli(["rename-list", "--list", "1", "--name", "Bee"], store_path)
    assert result.returncode == 0

    result = run_cli(["delete-list", "--list", "0"], store_path)
    assert result.returncode == 0

    result = run_cli(["lists", "--format", "json"], store_path)
    lists = json.loads(result.stdout)
    assert [(item["index"], item["name"]) for item in lists] == [(0, "Bee")]


def test_cli_complete_all_and_text_output(tmp_path):
    store_path = tmp_path / "store.json"
    run_cli(["create-list", "--name", "Trip"], store_path)
    run_cli(["add", "--list", "0", "--text", "Tickets"], store_path)

    result = run_cli(["complete-all", "--list", "0"], store_path)
    assert result.returncode == 0
    assert "All todos have been completed successfully!" in result.stdout

    result = run_cli(["lists"], store_path)
    assert result.returncode == 0
    assert "[x] 0: Trip (0/1 remaining)" in result.stdout


def test_cli_not_found(tmp_path):
    store_path = tmp_path / "store.json"
    run_cli(["create-list", "--name", "Only"], store_path)

    result = run_cli(["uncheck", "--list", "0", "--todo", "4"], store_path)
    assert result.returncode == 1
    assert "The specified todo was not found." in result.stderr

    result = run_cli(["show", "--list", "9"], store_path)
    assert result.returncode == 1
    assert "The specified list was not found." in result.stderr


def test_cli_invalid_todo_text(tmp_path):
    store_path = tmp_path / "store.json"
    run_cli(["create-list", "--name", "Only"], store_path)

    result = run_cli(["add", "--list", "0", "--text", "x" * 101], store_path)
    assert result.returncode == 1
    assert "Todo name must be between 1 and 100 characters." in result.stderr


def test_cli_store_path_from_environment(tmp_path):
    store_path = tmp_path / "env_store.json"
    cmd = [sys.executable, "-m", "src.todo", "create-list", "--name", "FromEnv"]
    result = subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
        env={**os.environ, "TODO_LISTS_STORE_PATH": str(store_path)},
    )
    assert result.returncode == 0
    assert json.loads(store_path.read_text(encoding="utf-8"))[0]["name"] == "FromEnv"


def test_cli_success_writes_nothing_to_stderr(tmp_path):
    store_path = tmp_path / "store.json"
    result = run_cli(["create-list", "--name", "Quiet"], store_path)
    assert result.returncode == 0
    assert result.stderr == ""
