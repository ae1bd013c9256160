from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from diffable_todo.application.todo import store
from diffable_todo.domain.todo.entities.todo import Todo
from diffable_todo.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)


@pytest.fixture()
def abc_todos() -> list[Todo]:
    return [Todo(title="A"), Todo(title="B"), Todo(title="C")]


@pytest.fixture()
def abc_repo(abc_todos: list[Todo]) -> InMemoryTodoRepository:
    return InMemoryTodoRepository(abc_todos)


@pytest.fixture()
def in_memory_todo_repo(
    monkeypatch: pytest.MonkeyPatch, abc_todos: list[Todo]
) -> InMemoryTodoRepository:
    repo = InMemoryTodoRepository(abc_todos)
    monkeypatch.setattr(store, "_REPOSITORY", repo)
    return repo
