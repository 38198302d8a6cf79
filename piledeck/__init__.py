from .cards import Card, build_cards, parse_labels, standard_cards, standard_labels
from .deck import Deck
from .errors import (
    DeckError,
    DeckInvariantError,
    EmptyDeckError,
    InvalidPileError,
    NotMemberError,
    TypeNotCardError,
)
from .piles import CardLocation, Pile, PileCounts
from .rand import default_rng, reseed, shuffle

__all__ = [
    "Card",
    "CardLocation",
    "Deck",
    "DeckError",
    "DeckInvariantError",
    "EmptyDeckError",
    "InvalidPileError",
    "NotMemberError",
    "Pile",
    "PileCounts",
    "TypeNotCardError",
    "build_cards",
    "default_rng",
    "parse_labels",
    "reseed",
    "shuffle",
    "standard_cards",
    "standard_labels",
]
