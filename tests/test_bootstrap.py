from __future__ import annotations

import logging
from pathlib import Path

from diffable_todo import env, main


def test_bootstrap_logs_env_path_once_logging_is_configured(
    tmp_path: Path, monkeypatch, caplog
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TODO_SEED_COUNT=4\nTODO_DEBUG=1\n", encoding="utf-8")
    monkeypatch.setattr(env, "_candidates", lambda: [env_file])
    monkeypatch.setattr(env, "_LOADED", False)
    for name in ("TODO_SEED_COUNT", "TODO_DEBUG"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    configured: list[tuple[bool, int]] = []
    monkeypatch.setattr(
        main,
        "setup_logging",
        lambda settings: configured.append((settings.debug, len(caplog.records))),
    )

    with caplog.at_level(logging.INFO, logger="diffable_todo.main"):
        settings = main.bootstrap()

    assert settings.seed_count == 4
    assert configured == [(True, 0)]
    assert f"Environment loaded from {env_file}" in caplog.text
