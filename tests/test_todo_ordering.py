"""Derived queries and display ordering"""

import types

from src.todo import (
    Todo,
    TodoList,
    is_complete,
    list_class,
    remaining_count,
    sorted_lists,
    sorted_todos,
    total_count,
)


def test_empty_list_is_not_complete():
    todo_list = TodoList(name="Empty")

    assert remaining_count(todo_list) == 0
    assert total_count(todo_list) == 0
    assert is_complete(todo_list) is False
    assert list_class(todo_list) is None


def test_counts_and_completion():
    todo_list = TodoList(name="Mixed", todos=[Todo("a"), Todo("b", completed=True)])

    assert total_count(todo_list) == 2
    assert remaining_count(todo_list) == 1
    assert not is_complete(todo_list)

    todo_list.todos[0].completed = True
    assert is_complete(todo_list)
    assert list_class(todo_list) == "complete"


def test_sorted_todos_puts_completed_last_with_original_indices():
    todos = [Todo("A"), Todo("B", completed=True), Todo("C")]

    ordered = list(sorted_todos(todos))

    assert [todo.name for _, todo in ordered] == ["A", "C", "B"]
    assert [index for index, _ in ordered] == [0, 2, 1]


def test_sorted_todos_is_stable_within_buckets():
    todos = [
        Todo("done1", completed=True),
        Todo("open1"),
        Todo("done2", completed=True),
        Todo("open2"),
    ]

    assert [index for index, _ in sorted_todos(todos)] == [1, 3, 0, 2]


def test_sorted_todos_is_lazy():
    assert isinstance(sorted_todos([]), types.GeneratorType)


def test_sorted_lists_puts_complete_lists_last():
    lists = [
        TodoList("Done", todos=[Todo("x", completed=True)]),
        TodoList("Empty"),
        TodoList("Open", todos=[Todo("y")]),
    ]

    ordered = list(sorted_lists(lists))

    assert [(index, item.name) for index, item in ordered] == [
        (1, "Empty"),
        (2, "Open"),
        (0, "Done"),
    ]


def test_sorted_lists_yields_same_objects():
    lists = [TodoList("One")]

    (index, item), = sorted_lists(lists)

    assert index == 0
    assert item is lists[0]
