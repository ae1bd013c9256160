from __future__ import annotations

from collections.abc import Iterable

from diffable_todo.application.contracts.todo_dtos import TodoRowModel

CHECKMARK_ICON = "check"


def todo_to_viewmodel(todo: TodoRowModel) -> dict[str, str | bool]:
    return {
        "id": str(todo.id),
        "title": todo.title,
        "done": todo.done,
        "icon": CHECKMARK_ICON if todo.checkmark_visible else "",
    }


def todos_to_viewmodels(todos: Iterable[TodoRowModel]) -> list[dict[str, str | bool]]:
    return [todo_to_viewmodel(todo) for todo in todos]
