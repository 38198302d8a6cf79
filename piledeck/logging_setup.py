from __future__ import annotations

import logging
from typing import Optional, Union

from .config import DeckConfig
from .env_loader import load_env_file


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    load_env_file()
    if level is None:
        level = DeckConfig.from_env().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("piledeck").setLevel(level)
