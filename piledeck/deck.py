from __future__ import annotations

import logging
import random
from typing import Callable, Dict, Iterable, List, Optional, Set, Union

from .cards import Card
from .config import trace_enabled
from .errors import DeckInvariantError, EmptyDeckError, NotMemberError, TypeNotCardError
from .piles import CardLocation, Pile, PileCounts
from .rand import shuffle


logger = logging.getLogger("piledeck.deck")

PileName = Union[Pile, str]


class Deck:
    """A set of cards split across a draw pile, a held pile and a discard pile.

    Every member card sits in exactly one pile. The draw pile's first element
    is the top of the deck.
    """

    def __init__(self, cards: Iterable[Card] = (), rng: Optional[random.Random] = None) -> None:
        self._cards: Set[Card] = set()
        self._draw: List[Card] = []
        self._held: List[Card] = []
        self._discard: List[Card] = []
        self._rng = rng
        for card in cards:
            self.add(card)

    def _pile(self, pile: Pile) -> List[Card]:
        piles: Dict[Pile, List[Card]] = {
            Pile.DRAW: self._draw,
            Pile.HELD: self._held,
            Pile.DISCARD: self._discard,
        }
        return piles[pile]

    def _log(self, message: str, *args: object) -> None:
        logger.log(logging.INFO if trace_enabled() else logging.DEBUG, message, *args)

    @property
    def total_length(self) -> int:
        return len(self._cards)

    @property
    def remaining_length(self) -> int:
        return len(self._draw)

    @property
    def remaining(self) -> List[Card]:
        return list(self._draw)

    @property
    def held(self) -> List[Card]:
        return list(self._held)

    @property
    def discarded(self) -> List[Card]:
        return list(self._discard)

    def counts(self) -> PileCounts:
        return PileCounts(
            draw=len(self._draw),
            held=len(self._held),
            discard=len(self._discard),
            total=len(self._cards),
        )

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and card in self._cards

    def __repr__(self) -> str:
        return (
            f"Deck(draw={len(self._draw)}, held={len(self._held)}, "
            f"discard={len(self._discard)})"
        )

    def add(self, card: Card, pile: PileName = Pile.DRAW) -> None:
        """Add ``card`` to the end of ``pile``.

        A card owned by another deck is taken out of it first; a card already
        in this deck is moved.
        """
        target = Pile.coerce(pile)
        self._require_card(card)
        if card.deck is not None:
            card.deck.remove(card)

        card.deck = self
        self._cards.add(card)
        self._pile(target).append(card)

    def remove(self, card: Card) -> None:
        if card not in self._cards:
            return
        self._cards.discard(card)
        for cards in (self._draw, self._held, self._discard):
            if card in cards:
                cards.remove(card)
        if card.deck is self:
            card.deck = None
        self._log("removed %s from %r", card, self)

    def merge(self, other: "Deck", pile: PileName = Pile.DRAW) -> None:
        """Move every card of ``other`` into ``pile`` of this deck."""
        target = Pile.coerce(pile)
        snapshot = other._draw + other._held + other._discard
        for card in snapshot:
            other.remove(card)
            self.add(card, target)
        self._log("merged %d cards into %s pile", len(snapshot), target.value)

    def _require_drawable(self) -> None:
        if not self._draw:
            raise EmptyDeckError("cannot draw from deck, no cards remaining")

    def _take_top(self, count: int) -> List[Card]:
        cards = self._draw[:count]
        del self._draw[:count]
        return cards

    def _take_bottom(self, count: int) -> List[Card]:
        start = max(len(self._draw) - count, 0)
        cards = self._draw[start:]
        del self._draw[start:]
        cards.reverse()
        return cards

    def draw(self, count: int = 1) -> List[Card]:
        self._require_drawable()
        if count < 0:
            return []
        cards = self._take_top(count)
        self._held.extend(cards)
        return cards

    def draw_from_bottom(self, count: int = 1) -> List[Card]:
        self._require_drawable()
        if count < 0:
            return []
        cards = self._take_bottom(count)
        self._held.extend(cards)
        return cards

    def draw_to_discard(self, count: int = 1) -> List[Card]:
        self._require_drawable()
        if count < 0:
            return []
        cards = self._take_top(count)
        self._discard.extend(cards)
        return cards

    def draw_to_discard_from_bottom(self, count: int = 1) -> List[Card]:
        self._require_drawable()
        if count < 0:
            return []
        cards = self._take_bottom(count)
        self._discard.extend(cards)
        return cards

    def _require_card(self, card: object) -> None:
        if not isinstance(card, Card):
            raise TypeNotCardError(f"value provided is not a Card instance: {card!r}")

    def _require_member(self, card: object) -> None:
        self._require_card(card)
        if card not in self._cards:
            raise NotMemberError(f"card {card} does not belong to this deck")

    def discard(self, card: Union[Card, Iterable[Card]]) -> None:
        """Move ``card`` (or each card of a sequence) from draw or held to discard.

        Cards already in the discard pile stay where they are.
        """
        if not isinstance(card, (Card, str)) and isinstance(card, Iterable):
            for item in card:
                self.discard(item)
            return

        self._require_member(card)
        for source in (self._draw, self._held):
            if card in source:
                source.remove(card)
                self._discard.append(card)
                return

    def locate_card(self, card: Card) -> CardLocation:
        self._require_member(card)
        for pile in (Pile.DRAW, Pile.HELD, Pile.DISCARD):
            cards = self._pile(pile)
            if card in cards:
                return CardLocation(pile=pile, index=cards.index(card), card=card)
        raise DeckInvariantError(f"failed to find {card} in any pile")

    def _shuffle(self, cards: List[Card]) -> None:
        shuffle(cards, self._rng)

    def shuffle_all(self) -> None:
        self._draw.extend(self._held)
        self._draw.extend(self._discard)
        self._held.clear()
        self._discard.clear()
        self._shuffle(self._draw)
        self._log("shuffled all %d cards into draw pile", len(self._draw))

    def shuffle_remaining(self) -> None:
        self._shuffle(self._draw)
        self._log("shuffled %d remaining cards", len(self._draw))

    def shuffle_discard(self) -> None:
        """Shuffle the discard pile and place it under the draw pile."""
        self._shuffle(self._discard)
        self._draw.extend(self._discard)
        self._log("shuffled %d discarded cards under draw pile", len(self._discard))
        self._discard.clear()

    def shuffle_deck_and_discard(self) -> None:
        self._draw.extend(self._discard)
        self._discard.clear()
        self._shuffle(self._draw)
        self._log("shuffled discard into draw pile, %d cards", len(self._draw))

    def discard_all_held(self) -> None:
        self._discard.extend(self._held)
        self._held.clear()

    def find_cards(self, predicate: Callable[[Card], bool]) -> List[Card]:
        """Return the member cards matching ``predicate``, in no particular order.

        For example ``deck.find_cards(lambda card: str(card).startswith("A"))``
        collects the aces of a standard deck.
        """
        return [card for card in self._cards if predicate(card)]
