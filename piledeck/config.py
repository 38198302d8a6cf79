from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Optional


def _env_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def trace_enabled() -> bool:
    return _env_bool(os.getenv("DECK_TRACE", "false"))


@dataclass
class DeckConfig:
    shuffle_seed: Optional[int] = None
    log_level: str = "WARNING"
    trace: bool = False

    @property
    def trace_level(self) -> int:
        return logging.INFO if self.trace else logging.DEBUG

    @classmethod
    def from_env(cls) -> "DeckConfig":
        shuffle_seed = _env_int(os.getenv("DECK_SHUFFLE_SEED"))
        log_level = os.getenv("DECK_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        trace = trace_enabled()
        return cls(shuffle_seed=shuffle_seed, log_level=log_level, trace=trace)
