from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from diffable_todo.application.todo.commands.delete_todo import DeleteTodoCommand
from diffable_todo.application.todo.commands.toggle_todo import ToggleTodoCommand
from diffable_todo.application.todo.commands.toggle_visibility_filter import (
    ToggleVisibilityFilterCommand,
)
from diffable_todo.application.todo.queries.list_visible_todo_ids import ListVisibleTodoIdsQuery
from diffable_todo.application.todo.queries.render_todo import RenderTodoQuery
from diffable_todo.application.todo.store import reset_todos
from diffable_todo.config import AppSettings, load_settings
from diffable_todo.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from diffable_todo.presentation.controllers.todo_controller import TodoListPresenter


@dataclass(frozen=True)
class AppContainer:
    settings: AppSettings
    repository: InMemoryTodoRepository
    toggle_todo_command: ToggleTodoCommand
    delete_todo_command: DeleteTodoCommand
    toggle_visibility_filter_command: ToggleVisibilityFilterCommand
    list_visible_todo_ids_query: ListVisibleTodoIdsQuery
    render_todo_query: RenderTodoQuery

    def create_presenter(self) -> TodoListPresenter:
        """Build a presenter for one client; the repository and use cases are shared."""
        return TodoListPresenter(
            self.repository,
            toggle_todo=self.toggle_todo_command,
            delete_todo=self.delete_todo_command,
            toggle_visibility_filter=self.toggle_visibility_filter_command,
            list_visible_ids=self.list_visible_todo_ids_query,
            render_todo=self.render_todo_query,
        )


def create_app_container(settings: Optional[AppSettings] = None) -> AppContainer:
    settings = settings or load_settings()
    repository = reset_todos(settings.seed_count)

    return AppContainer(
        settings=settings,
        repository=repository,
        toggle_todo_command=ToggleTodoCommand(repository),
        delete_todo_command=DeleteTodoCommand(repository),
        toggle_visibility_filter_command=ToggleVisibilityFilterCommand(repository),
        list_visible_todo_ids_query=ListVisibleTodoIdsQuery(repository),
        render_todo_query=RenderTodoQuery(repository),
    )
