from __future__ import annotations

from typing import Optional
from uuid import UUID

from diffable_todo.application.todo import store
from diffable_todo.domain.todo.repositories.todo_repository import TodoRepository


class DeleteTodoCommand:
    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self._repository = repository

    def execute(self, todo_id: UUID) -> None:
        repository = self._repository if self._repository is not None else store.get_repository()
        repository.remove(todo_id)
