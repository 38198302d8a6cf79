from __future__ import annotations


class DeckError(Exception):
    """Base class for every error raised by a Deck."""


class InvalidPileError(DeckError, ValueError):
    pass


class EmptyDeckError(DeckError, IndexError):
    pass


class TypeNotCardError(DeckError, TypeError):
    pass


class NotMemberError(DeckError, LookupError):
    pass


class DeckInvariantError(DeckError, RuntimeError):
    """A member card was found in none of the piles."""
