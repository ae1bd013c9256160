from __future__ import annotations

from typing import Optional
from uuid import UUID

from diffable_todo.application.contracts.todo_dtos import TodoRowModel
from diffable_todo.application.todo import store
from diffable_todo.domain.todo.repositories.todo_repository import TodoRepository


class RenderTodoQuery:
    """Resolve an identifier to its row model against current repository state."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self._repository = repository

    def execute(self, todo_id: UUID) -> Optional[TodoRowModel]:
        repository = self._repository if self._repository is not None else store.get_repository()
        todo = repository.get(todo_id)
        if todo is None:
            return None
        return TodoRowModel(id=todo.id, title=todo.title, done=todo.done)
