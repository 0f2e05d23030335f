import random

import pytest

from klondike import common as C
from klondike.engine import SolitaireEngine


@pytest.fixture
def engine():
    """An engine that has not dealt yet: 52 cards in the draw pile, empty table."""
    return SolitaireEngine(random.Random(42))


@pytest.fixture
def card(engine):
    """Fetch the engine's own instance of a card and set its orientation."""

    def _card(suit: C.Suit, rank: int, up: bool = True) -> C.Card:
        c = next(c for c in engine.deck.cards if c.suit is suit and c.rank == rank)
        c.face_up = up
        return c

    return _card


def snapshot(engine):
    """Everything observable about a game, card identity and orientation included."""
    def pile(cards):
        return tuple((id(c), c.face_up) for c in cards)

    return (
        pile(engine.draw_pile),
        pile(engine.discard_pile),
        tuple(pile(p) for p in engine.tableau_piles),
        tuple(f.top_rank for f in engine.foundation_piles),
    )


@pytest.fixture
def state_of():
    return snapshot
