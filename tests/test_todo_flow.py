from __future__ import annotations

from dataclasses import replace

from diffable_todo.application.todo.commands.toggle_todo import ToggleTodoCommand
from diffable_todo.composition_root import create_app_container
from diffable_todo.config import AppSettings


def test_container_wires_shared_repository() -> None:
    container = create_app_container(AppSettings(seed_count=4))
    ids = container.list_visible_todo_ids_query.execute()

    container.toggle_todo_command.execute(ids[1])
    container.toggle_visibility_filter_command.execute()
    container.delete_todo_command.execute(ids[0])

    assert len(container.repository) == 3
    assert container.list_visible_todo_ids_query.execute() == [ids[2], ids[3]]
    assert container.render_todo_query.execute(ids[1]).done is True


def test_presenter_flow_via_container() -> None:
    container = create_app_container(AppSettings(seed_count=30))
    presenter = container.create_presenter()

    update = presenter.load()
    assert len(update.operations) == 30

    presenter.select_row(0)
    presenter.toggle_filter()
    assert len(presenter.rows()) == 29
    assert presenter.rows()[0].title == "Todo #2"

    presenter.delete_row(0)
    presenter.toggle_filter()
    titles = [row.title for row in presenter.rows()]
    assert titles[:2] == ["Todo #1", "Todo #3"]
    assert len(titles) == 29


def test_presenter_uses_container_use_cases() -> None:
    container = create_app_container(AppSettings(seed_count=2))
    toggled: list = []

    class RecordingToggle(ToggleTodoCommand):
        def execute(self, todo_id) -> None:
            toggled.append(todo_id)
            super().execute(todo_id)

    container = replace(container, toggle_todo_command=RecordingToggle(container.repository))
    presenter = container.create_presenter()
    presenter.load()

    presenter.select_row(1)

    ids = container.list_visible_todo_ids_query.execute()
    assert toggled == [ids[1]]
    assert container.render_todo_query.execute(ids[1]).done is True


def test_each_client_presenter_has_its_own_list_state() -> None:
    container = create_app_container(AppSettings(seed_count=3))
    first = container.create_presenter()
    second = container.create_presenter()

    first.load()

    assert first.list_state is not second.list_state
    assert second.list_state.item_identifiers == []
