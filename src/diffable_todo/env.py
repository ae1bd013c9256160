from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_LOADED = False


def _candidates() -> list[Path]:
    package_dir = Path(__file__).resolve().parent
    # Project root first (src layout), then the working directory.
    return [
        package_dir.parents[1] / ".env",
        Path.cwd() / ".env",
    ]


def load_env() -> Path | None:
    """Load ``.env`` files once per process and return the last one read."""
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    loaded_path: Path | None = None
    for path in _candidates():
        if not path.exists():
            continue
        loaded_path = path
        # Real environment variables win over the file.
        load_dotenv(dotenv_path=path, override=False)
    return loaded_path
