from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable
from uuid import UUID

from diffable_todo.domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Repository interface for Todo entities.

    Lookups and mutations that reference an unknown id are no-ops.
    """

    @property
    def shows_only_undone(self) -> bool:
        ...

    def get(self, todo_id: UUID) -> Optional[Todo]:
        ...

    def list(self) -> list[Todo]:
        ...

    def remove(self, todo_id: UUID) -> None:
        ...

    def visible_ids(self) -> list[UUID]:
        ...

    def toggle_done(self, todo_id: UUID) -> None:
        ...

    def toggle_visibility_filter(self) -> None:
        ...
