# foundation.py - per-suit foundation counters
from klondike import common as C


class FoundationPile:
    """A suit's foundation, tracked only by the rank on top (0 when empty)."""
    __slots__ = ("suit", "_top_rank")

    def __init__(self, suit: C.Suit):
        self.suit = C.Suit(suit)
        self._top_rank = 0

    @property
    def top_rank(self) -> int:
        return self._top_rank

    value = top_rank

    @property
    def is_complete(self) -> bool:
        return self._top_rank == C.KING

    def reset(self):
        self._top_rank = 0

    def add_card(self):
        # legality is checked by the engine before this is called
        self._top_rank += 1

    def accepts(self, card: C.Card) -> bool:
        return card.suit is self.suit and card.rank == self._top_rank + 1

    def __repr__(self):
        return f"FoundationPile({self.suit.value}, top_rank={self._top_rank})"
