from __future__ import annotations

from nicegui import ui

from diffable_todo.presentation.controllers.todo_controller import TodoListPresenter
from diffable_todo.presentation.ui.styles import (
    STYLE_BTN_GHOST,
    STYLE_BTN_GHOST_ACTIVE,
    STYLE_CARD,
    STYLE_CHECKMARK,
    STYLE_PAGE_TITLE,
    STYLE_ROW,
    STYLE_ROW_DONE,
    STYLE_SECTION_TITLE,
    STYLE_TEXT_SUBTLE,
)
from diffable_todo.presentation.ui.viewmodels.todo_viewmodel import todos_to_viewmodels


def render_todos(presenter: TodoListPresenter) -> None:
    if not presenter.loaded:
        presenter.load()

    @ui.refreshable
    def filter_button() -> None:
        classes = STYLE_BTN_GHOST
        if presenter.shows_only_undone:
            classes = f"{classes} {STYLE_BTN_GHOST_ACTIVE}"
        ui.button(icon="filter_list", on_click=handle_filter, color=None).props("flat").classes(
            classes
        ).tooltip("Nur offene anzeigen" if not presenter.shows_only_undone else "Alle anzeigen")

    @ui.refreshable
    def todo_list() -> None:
        todos = todos_to_viewmodels(presenter.rows())
        if not todos:
            hint = "Keine offenen Todos." if presenter.shows_only_undone else "Noch keine Todos."
            ui.label(hint).classes(f"{STYLE_TEXT_SUBTLE} p-4")
            return
        with ui.list().classes("w-full"):
            for row, todo in enumerate(todos):
                with ui.slide_item().classes("w-full") as slide:
                    slide.right("Löschen", color="negative", on_slide=lambda _, r=row, s=slide: handle_delete(r, s))
                    with ui.item(on_click=lambda _, r=row: handle_select(r)).classes(STYLE_ROW):
                        with ui.item_section():
                            title_classes = STYLE_ROW_DONE if todo["done"] else ""
                            ui.item_label(todo["title"]).classes(title_classes)
                        with ui.item_section().props("side"):
                            if todo["icon"]:
                                ui.icon(todo["icon"]).classes(STYLE_CHECKMARK)

    def handle_select(row: int) -> None:
        if presenter.select_row(row) is not None:
            todo_list.refresh()

    def handle_delete(row: int, slide) -> None:
        if not presenter.delete_row(row):
            slide.reset()
            return
        todo_list.refresh()

    def handle_filter() -> None:
        presenter.toggle_filter()
        filter_button.refresh()
        todo_list.refresh()

    with ui.row().classes("w-full items-center gap-2"):
        filter_button()
        ui.label("Todo-Liste").classes(STYLE_PAGE_TITLE)

    with ui.card().classes(f"{STYLE_CARD} p-0 w-full gap-0"):
        ui.label(presenter.header_title or "").classes(f"{STYLE_SECTION_TITLE} px-4 pt-4 pb-2")
        todo_list()
