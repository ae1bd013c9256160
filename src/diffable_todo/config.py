from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from diffable_todo.application.todo.errors import ConfigError
from diffable_todo.infrastructure.data.repositories.in_memory_todo_repository import (
    DEFAULT_SEED_COUNT,
)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_TITLE = "Diffable Todo"
DEFAULT_LOG_DIR = "./data/logs"


@dataclass(frozen=True)
class AppSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    title: str = DEFAULT_TITLE
    seed_count: int = DEFAULT_SEED_COUNT
    debug: bool = False
    log_dir: Path = Path(DEFAULT_LOG_DIR)


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    env = os.environ if environ is None else environ

    port = _read_int(env, "TODO_PORT", DEFAULT_PORT)
    if not 0 < port < 65536:
        raise ConfigError(f"TODO_PORT out of range: {port}")

    seed_count = _read_int(env, "TODO_SEED_COUNT", DEFAULT_SEED_COUNT)
    if seed_count < 0:
        raise ConfigError(f"TODO_SEED_COUNT must not be negative, got {seed_count}")

    return AppSettings(
        host=(env.get("TODO_HOST") or "").strip() or DEFAULT_HOST,
        port=port,
        title=(env.get("TODO_TITLE") or "").strip() or DEFAULT_TITLE,
        seed_count=seed_count,
        debug=(env.get("TODO_DEBUG") or "").strip() == "1",
        log_dir=Path((env.get("TODO_LOG_DIR") or "").strip() or DEFAULT_LOG_DIR),
    )
