from __future__ import annotations

from typing import Optional

from diffable_todo.application.todo import store
from diffable_todo.domain.todo.repositories.todo_repository import TodoRepository


class ToggleVisibilityFilterCommand:
    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self._repository = repository

    def execute(self) -> bool:
        """Flip the filter and return the new ``shows_only_undone`` value."""
        repository = self._repository if self._repository is not None else store.get_repository()
        repository.toggle_visibility_filter()
        return repository.shows_only_undone
