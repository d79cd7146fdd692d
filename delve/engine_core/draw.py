"""
Draw Engine - Moves cards from the deck into a new hand.

When the deck runs dry mid-draw the discard pile is shuffled into a fresh
deck. If both are empty the draw stops short and the hand is smaller than
requested. None of the piles passed in are modified.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Sequence

from .card import Card
from .shuffle import RandomSource, shuffle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawResult:
    """
    Outcome of a draw.

    is_shuffled is True when the discard pile was recycled at least once
    during the draw.
    """
    new_deck: tuple[Card, ...]
    new_hand: tuple[Card, ...]
    new_discard_pile: tuple[Card, ...]
    is_shuffled: bool = False


def draw_cards(
    deck: Sequence[Card],
    count: int,
    discard_pile: Sequence[Card],
    random_source: RandomSource = random.random,
) -> DrawResult:
    """
    Draw up to `count` cards from the front of the deck.

    Returns the remaining deck, the drawn cards in draw order, the
    remaining discard pile and whether a recycle happened.
    """
    working_deck = list(deck)
    working_discard = list(discard_pile)
    hand: list[Card] = []
    is_shuffled = False

    for _ in range(count):
        if not working_deck:
            if not working_discard:
                logger.debug("Deck and discard pile exhausted after %d card(s)", len(hand))
                break
            working_deck = shuffle(working_discard, random_source)
            working_discard = []
            is_shuffled = True
            logger.info("Recycled %d discarded card(s) into the deck", len(working_deck))
        hand.append(working_deck.pop(0))

    return DrawResult(
        new_deck=tuple(working_deck),
        new_hand=tuple(hand),
        new_discard_pile=tuple(working_discard),
        is_shuffled=is_shuffled,
    )
