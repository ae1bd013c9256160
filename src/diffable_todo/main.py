"""Run the Diffable Todo NiceGUI app."""

import logging

from nicegui import ui

from diffable_todo.composition_root import AppContainer, create_app_container
from diffable_todo.config import AppSettings, load_settings
from diffable_todo.env import load_env
from diffable_todo.logging_setup import setup_logging
from diffable_todo.presentation.ui.pages.todos import render_todos
from diffable_todo.presentation.ui.styles import STYLE_BG, STYLE_CONTAINER

logger = logging.getLogger(__name__)


def bootstrap() -> AppSettings:
    env_path = load_env()
    settings = load_settings()
    setup_logging(settings)
    if env_path is not None:
        logger.info("Environment loaded from %s", env_path)
    return settings


def build_app() -> AppContainer:
    container = create_app_container(bootstrap())

    @ui.page("/")
    def index() -> None:
        # One list state per client; the repository is shared.
        presenter = container.create_presenter()
        with ui.column().classes(f"{STYLE_BG} w-full"):
            with ui.column().classes(STYLE_CONTAINER):
                render_todos(presenter)

    logger.info("Seeded %d todos", len(container.repository))
    return container


def run() -> None:
    container = build_app()
    settings = container.settings
    ui.run(
        title=settings.title,
        host=settings.host,
        port=settings.port,
        language="de",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
