import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from diffable_todo.config import AppSettings


_LOG_FILE_NAME = "diffable_todo.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _build_handlers(log_dir: Path, log_level: int) -> list[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(_LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    file_handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_BACKUP_COUNT,
    )
    handlers: list[logging.Handler] = [stream_handler, file_handler]
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: AppSettings) -> None:
    """Configure the root logger from settings; later calls only adjust the level."""
    log_level = logging.DEBUG if settings.debug else logging.INFO
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in _build_handlers(settings.log_dir, log_level):
        root_logger.addHandler(handler)
    root_logger._todo_logging_configured = True
