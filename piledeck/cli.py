from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .cards import standard_cards
from .config import DeckConfig
from .deck import Deck
from .errors import EmptyDeckError
from .logging_setup import configure_logging


logger = logging.getLogger("piledeck.cli")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Shuffle a standard deck and deal hands from it.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--hands", type=int, default=2, help="Number of hands to deal")
    parser.add_argument("--hand-size", type=int, default=5, help="Cards per hand")
    args = parser.parse_args(argv)

    configure_logging()
    seed = args.seed if args.seed is not None else DeckConfig.from_env().shuffle_seed
    deck = Deck(standard_cards(), rng=random.Random(seed))
    deck.shuffle_remaining()

    for number in range(1, args.hands + 1):
        try:
            hand = deck.draw(args.hand_size)
        except EmptyDeckError:
            logger.warning("deck ran out after %d hands", number - 1)
            break
        print(f"Hand {number}: {' '.join(str(card) for card in hand)}")
        deck.discard(hand)

    counts = deck.counts()
    print(f"Draw: {counts.draw}  Held: {counts.held}  Discard: {counts.discard}")


if __name__ == "__main__":
    main()
