from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


_LOADED = False


def _candidate_paths() -> Iterable[Path]:
    explicit = os.getenv("PILEDECK_ENV_FILE")
    if explicit:
        yield Path(explicit)

    yield Path.cwd() / ".env"

    yield Path(__file__).resolve().parents[1] / ".env"


def parse_env_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if stripped.startswith("export "):
        stripped = stripped[len("export ") :].strip()

    key, sep, value = stripped.partition("=")
    key = key.strip()
    if not sep or not key:
        return None

    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]

    return key, value


def load_env_file(force: bool = False) -> None:
    """Merge the first readable .env file into os.environ, keeping existing values."""
    global _LOADED
    if _LOADED and not force:
        return

    for path in _candidate_paths():
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            continue
        for raw_line in text.splitlines():
            parsed = parse_env_line(raw_line)
            if parsed:
                os.environ.setdefault(*parsed)
        break
    _LOADED = True
