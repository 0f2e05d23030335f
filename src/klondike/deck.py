# deck.py - the 52 cards and the draw/discard piles that hold them between deals
import random
from typing import Iterable, List, Optional, Tuple

from klondike import common as C
from klondike.shuffler import shuffle as _shuffle


class Deck:
    """Owns every card of the game plus the draw and discard piles.

    Both piles keep their top card at the end of the list. Cards dealt to the
    tableau belong to neither pile until they come back through ``reset``.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng
        self._cards: Tuple[C.Card, ...] = tuple(C.make_cards())
        self._draw_pile: List[C.Card] = []
        self._discard_pile: List[C.Card] = []
        self.reset()

    @property
    def cards(self) -> Tuple[C.Card, ...]:
        return self._cards

    @property
    def draw_pile(self) -> List[C.Card]:
        return list(self._draw_pile)

    @property
    def discard_pile(self) -> List[C.Card]:
        return list(self._discard_pile)

    def reset(self):
        for c in self._cards:
            c.face_up = False
        self._draw_pile = list(self._cards)
        self._discard_pile = []
        self.shuffle()

    def draw(self) -> Optional[C.Card]:
        if not self._draw_pile:
            return None
        return self._draw_pile.pop()

    def discard(self, card: C.Card):
        self._discard_pile.append(card)

    def top_discard(self) -> Optional[C.Card]:
        return self._discard_pile[-1] if self._discard_pile else None

    def pop_discard(self) -> Optional[C.Card]:
        if not self._discard_pile:
            return None
        return self._discard_pile.pop()

    def shuffle(self):
        _shuffle(self._draw_pile, self._rng)

    def recycle(self):
        # Callers only recycle once the draw pile is empty
        while self._discard_pile:
            c = self._discard_pile.pop()
            if c.face_up:
                c.flip()
            self._draw_pile.append(c)
        self.shuffle()

    def _load(self, draw: Iterable[C.Card], discard: Iterable[C.Card] = ()):
        """Replace both piles with the given cards, top last. Used by tests."""
        self._draw_pile = list(draw)
        self._discard_pile = list(discard)
