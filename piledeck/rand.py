from __future__ import annotations

import random
from typing import MutableSequence, Optional, TypeVar

from .config import DeckConfig


T = TypeVar("T")

_RNG: Optional[random.Random] = None


def default_rng() -> random.Random:
    global _RNG
    if _RNG is None:
        _RNG = random.Random(DeckConfig.from_env().shuffle_seed)
    return _RNG


def reseed(seed: Optional[int] = None) -> random.Random:
    global _RNG
    _RNG = random.Random(seed)
    return _RNG


def shuffle(items: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Permute ``items`` in place (Fisher-Yates) and return it."""
    if rng is None:
        rng = default_rng()
    rng.shuffle(items)
    return items

