from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .deck import Deck


RANKS = "AKQJT98765432"
SUITS = "shdc"  # spades, hearts, diamonds, clubs


@dataclass(eq=False)
class Card:
    """A card compared by identity.

    ``deck`` points at the Deck that currently owns the card. Decks set and
    clear it as cards move in and out of them.
    """

    label: Optional[str] = None
    deck: Optional["Deck"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.label if self.label is not None else "?"


def standard_labels() -> List[str]:
    return [f"{rank}{suit}" for rank in RANKS for suit in SUITS]


def _validate_label(label: str) -> str:
    if len(label) != 2 or label[0] not in RANKS or label[1] not in SUITS:
        raise ValueError(f"Invalid card string: {label}")
    return label


def parse_labels(cards: list[str] | str | None) -> List[str]:
    """Parse labels from a list like ['As','Kd'] or a string like 'As Kd'."""
    if cards is None:
        return []
    if isinstance(cards, str):
        parts = [p for p in cards.replace(",", " ").split() if p]
    else:
        parts = list(cards)
    labels = [_validate_label(p) for p in parts]
    if len(set(labels)) != len(labels):
        raise ValueError("Duplicate cards found in input")
    return labels


def build_cards(cards: list[str] | str | None) -> List[Card]:
    return [Card(label) for label in parse_labels(cards)]


def standard_cards() -> List[Card]:
    return [Card(label) for label in standard_labels()]
