from __future__ import annotations

from typing import Optional

from diffable_todo.infrastructure.data.repositories.in_memory_todo_repository import (
    DEFAULT_SEED_COUNT,
    InMemoryTodoRepository,
    seed_todos,
)

_REPOSITORY = InMemoryTodoRepository(seed_todos(DEFAULT_SEED_COUNT))


def get_repository() -> InMemoryTodoRepository:
    return _REPOSITORY


def reset_todos(seed_count: Optional[int] = None) -> InMemoryTodoRepository:
    global _REPOSITORY
    count = DEFAULT_SEED_COUNT if seed_count is None else seed_count
    _REPOSITORY = InMemoryTodoRepository(seed_todos(count))
    return _REPOSITORY
