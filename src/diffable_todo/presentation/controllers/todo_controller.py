from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional
from uuid import UUID

from diffable_todo.application.contracts.todo_dtos import TodoRowModel
from diffable_todo.application.todo import store
from diffable_todo.application.todo.commands.delete_todo import DeleteTodoCommand
from diffable_todo.application.todo.commands.toggle_todo import ToggleTodoCommand
from diffable_todo.application.todo.commands.toggle_visibility_filter import (
    ToggleVisibilityFilterCommand,
)
from diffable_todo.application.todo.queries.list_visible_todo_ids import ListVisibleTodoIdsQuery
from diffable_todo.application.todo.queries.render_todo import RenderTodoQuery
from diffable_todo.domain.todo.repositories.todo_repository import TodoRepository
from diffable_todo.presentation.diffing.list_state import ListState, ListUpdate
from diffable_todo.presentation.diffing.snapshot import Snapshot

logger = logging.getLogger(__name__)

HEADER_TITLE = "Todos"


class Section(Enum):
    MAIN = "main"


class TodoListPresenter:
    """Reacts to list gestures by mutating the repository and re-applying snapshots.

    The presenter keeps no todo data itself: rows are identifiers, resolved
    through :class:`RenderTodoQuery` whenever a row is rendered.
    """

    def __init__(
        self,
        repository: Optional[TodoRepository] = None,
        *,
        toggle_todo: Optional[ToggleTodoCommand] = None,
        delete_todo: Optional[DeleteTodoCommand] = None,
        toggle_visibility_filter: Optional[ToggleVisibilityFilterCommand] = None,
        list_visible_ids: Optional[ListVisibleTodoIdsQuery] = None,
        render_todo: Optional[RenderTodoQuery] = None,
    ) -> None:
        self._toggle = toggle_todo or ToggleTodoCommand(repository)
        self._delete = delete_todo or DeleteTodoCommand(repository)
        self._toggle_filter = toggle_visibility_filter or ToggleVisibilityFilterCommand(repository)
        self._visible_ids = list_visible_ids or ListVisibleTodoIdsQuery(repository)
        self._render = render_todo or RenderTodoQuery(repository)
        self._list_state: ListState[Section, UUID] = ListState()
        self._repository = repository
        self._loaded = False
        self.header_title: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def shows_only_undone(self) -> bool:
        repository = self._repository if self._repository is not None else store.get_repository()
        return repository.shows_only_undone

    @property
    def list_state(self) -> ListState[Section, UUID]:
        return self._list_state

    def load(self) -> ListUpdate:
        if not self._loaded:
            self.header_title = HEADER_TITLE
            self._loaded = True
            logger.info("Todo list loaded")
        return self.apply_snapshot()

    def apply_snapshot(self) -> ListUpdate:
        snapshot: Snapshot[Section, UUID] = Snapshot()
        snapshot.append_sections([Section.MAIN])
        snapshot.append_items(self._visible_ids.execute(), section=Section.MAIN)
        return self._list_state.apply(snapshot, animating_differences=True)

    def apply_snapshot_reconfiguring(self, todo_id: UUID) -> ListUpdate:
        snapshot = self._list_state.snapshot()
        snapshot.reconfigure_items([todo_id])
        return self._list_state.apply(snapshot, animating_differences=True)

    def select_row(self, row: int) -> Optional[ListUpdate]:
        todo_id = self._list_state.item_identifier(row)
        if todo_id is None:
            logger.warning("Tap on unresolved row %d", row)
            return None
        self._toggle.execute(todo_id)
        return self.apply_snapshot_reconfiguring(todo_id)

    def delete_row(self, row: int) -> bool:
        """Handle a confirmed swipe-delete. Returns the swipe completion result."""
        todo_id = self._list_state.item_identifier(row)
        if todo_id is None:
            logger.warning("Swipe delete on unresolved row %d", row)
            return False
        self._delete.execute(todo_id)
        self.apply_snapshot()
        return True

    def toggle_filter(self) -> ListUpdate:
        shows_only_undone = self._toggle_filter.execute()
        logger.info("Showing %s todos", "undone" if shows_only_undone else "all")
        return self.apply_snapshot()

    def render_row(self, todo_id: UUID) -> Optional[TodoRowModel]:
        return self._render.execute(todo_id)

    def rows(self) -> List[TodoRowModel]:
        rendered = (self.render_row(todo_id) for todo_id in self._list_state.item_identifiers)
        return [row for row in rendered if row is not None]
