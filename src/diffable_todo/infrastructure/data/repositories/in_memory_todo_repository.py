from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from diffable_todo.domain.todo.entities.todo import Todo
from diffable_todo.domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 30


def seed_todos(count: int = DEFAULT_SEED_COUNT) -> List[Todo]:
    return [Todo(title=f"Todo #{i}") for i in range(1, count + 1)]


class InMemoryTodoRepository(TodoRepository):
    """Ordered in-memory repository backed by a list.

    Items keep insertion order and are never re-sorted. Unknown ids are
    ignored by every operation.
    """

    def __init__(
        self,
        initial_items: Optional[Iterable[Todo]] = None,
        shows_only_undone: bool = False,
    ) -> None:
        self._todos: List[Todo] = []
        self._shows_only_undone = shows_only_undone
        items = seed_todos() if initial_items is None else initial_items
        seen: set[UUID] = set()
        for item in items:
            if item.id in seen:
                logger.debug("Dropping duplicate todo id %s from initial items", item.id)
                continue
            seen.add(item.id)
            self._todos.append(item)

    def __len__(self) -> int:
        return len(self._todos)

    @property
    def shows_only_undone(self) -> bool:
        return self._shows_only_undone

    def get(self, todo_id: UUID) -> Optional[Todo]:
        return next((todo for todo in self._todos if todo.id == todo_id), None)

    def list(self) -> List[Todo]:
        return list(self._todos)

    def remove(self, todo_id: UUID) -> None:
        remaining = [todo for todo in self._todos if todo.id != todo_id]
        if len(remaining) == len(self._todos):
            logger.debug("Ignoring remove for unknown todo %s", todo_id)
            return
        self._todos = remaining
        logger.debug("Removed todo %s (%d left)", todo_id, len(self._todos))

    def visible_ids(self) -> List[UUID]:
        return [
            todo.id
            for todo in self._todos
            if not (self._shows_only_undone and todo.done)
        ]

    def toggle_done(self, todo_id: UUID) -> None:
        matched = False
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                self._todos[index] = todo.toggled()
                matched = True
        if matched:
            logger.debug("Toggled done on todo %s", todo_id)
        else:
            logger.debug("Ignoring toggle for unknown todo %s", todo_id)

    def toggle_visibility_filter(self) -> None:
        self._shows_only_undone = not self._shows_only_undone
        logger.debug("Visibility filter now shows_only_undone=%s", self._shows_only_undone)
