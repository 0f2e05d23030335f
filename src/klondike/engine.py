# engine.py - Klondike rules: dealing, stock cycling and legal card movement
import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Sequence

from klondike import common as C
from klondike.deck import Deck
from klondike.foundation import FoundationPile

logger = logging.getLogger(__name__)

TABLEAU_COUNT = 7
DEAL_SIZE = TABLEAU_COUNT * (TABLEAU_COUNT + 1) // 2  # 28

# Display order of the foundation row
FOUNDATION_ORDER = (C.Suit.SPADE, C.Suit.CLUB, C.Suit.HEART, C.Suit.DIAMOND)


class MoveResult(str, Enum):
    """Outcome of an engine command. Only ``OK`` is truthy."""
    OK = "OK"
    EMPTY_SOURCE = "EMPTY_SOURCE"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    DRAW_PILE_NOT_EMPTY = "DRAW_PILE_NOT_EMPTY"

    def __bool__(self):
        return self is MoveResult.OK


def can_stack_tableau(card: C.Card, pile: Sequence[C.Card]) -> bool:
    """Whether ``card`` may be placed on top of ``pile``."""
    if not pile:
        return card.rank == C.KING
    top = pile[-1]
    if top.rank == C.ACE:
        return False
    if top.color is card.color:
        return False
    return top.rank == card.rank + 1


class SolitaireEngine:
    """
    Owns the deck, the four foundations and the seven tableau piles.

    Every command returns a MoveResult and leaves the game untouched unless
    it returns MoveResult.OK. Observers hand out copies of the piles; the
    Card objects inside are shared, so orientation is visible but pile
    membership can only change through commands.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._deck = Deck(rng)
        self._foundations: Dict[C.Suit, FoundationPile] = {s: FoundationPile(s) for s in C.Suit}
        self._tableau: List[List[C.Card]] = [[] for _ in range(TABLEAU_COUNT)]

    # ---------- Observers ----------
    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def draw_pile(self) -> List[C.Card]:
        return self._deck.draw_pile

    @property
    def discard_pile(self) -> List[C.Card]:
        return self._deck.discard_pile

    @property
    def foundation_piles(self) -> List[FoundationPile]:
        return [self._foundations[s] for s in FOUNDATION_ORDER]

    def foundation_for(self, suit: C.Suit) -> FoundationPile:
        return self._foundations[suit]

    @property
    def tableau_piles(self) -> List[List[C.Card]]:
        return [list(p) for p in self._tableau]

    @property
    def won_game(self) -> bool:
        return all(f.is_complete for f in self._foundations.values())

    def cards_in_play(self) -> int:
        """Cards accounted for across every pile; 52 once a game is dealt."""
        return (
            len(self._deck.draw_pile)
            + len(self._deck.discard_pile)
            + sum(len(p) for p in self._tableau)
            + sum(f.top_rank for f in self._foundations.values())
        )

    # ---------- Commands ----------
    def new_game(self) -> MoveResult:
        self._deck.reset()
        for f in self._foundations.values():
            f.reset()
        self._tableau = [[] for _ in range(TABLEAU_COUNT)]

        for j in range(TABLEAU_COUNT):
            for i in range(j + 1):
                c = self._deck.draw()
                if c is None:
                    raise RuntimeError(f"deck ran out while dealing ({DEAL_SIZE} cards needed)")
                if i == j:
                    c.flip()
                self._tableau[j].append(c)
        logger.info("New game dealt, %d cards left in the draw pile", len(self._deck.draw_pile))
        return MoveResult.OK

    def draw_card(self) -> MoveResult:
        c = self._deck.draw()
        if c is None:
            return self._reject("draw_card", MoveResult.EMPTY_SOURCE)
        c.flip()
        self._deck.discard(c)
        return MoveResult.OK

    def shuffle_discard_into_draw(self) -> MoveResult:
        if self._deck.draw_pile:
            return self._reject("shuffle_discard_into_draw", MoveResult.DRAW_PILE_NOT_EMPTY)
        self._deck.recycle()
        return MoveResult.OK

    def play_discard_to_foundation(self) -> MoveResult:
        c = self._deck.top_discard()
        if c is None:
            return self._reject("play_discard_to_foundation", MoveResult.EMPTY_SOURCE)
        if not self._can_move_to_foundation(c):
            return self._reject("play_discard_to_foundation", MoveResult.ILLEGAL_MOVE, c)
        self._foundations[c.suit].add_card()
        self._deck.pop_discard()
        return MoveResult.OK

    def play_discard_to_tableau(self, target_index: int) -> MoveResult:
        c = self._deck.top_discard()
        if c is None:
            return self._reject("play_discard_to_tableau", MoveResult.EMPTY_SOURCE)
        target = self._pile(target_index)
        if target is None or not can_stack_tableau(c, target):
            return self._reject("play_discard_to_tableau", MoveResult.ILLEGAL_MOVE, c)
        target.append(self._deck.pop_discard())
        return MoveResult.OK

    def flip_top_of_tableau(self, index: int) -> MoveResult:
        pile = self._pile(index)
        if pile is None:
            return self._reject("flip_top_of_tableau", MoveResult.ILLEGAL_MOVE)
        if not pile or pile[-1].face_up:
            return self._reject("flip_top_of_tableau", MoveResult.EMPTY_SOURCE)
        pile[-1].flip()
        return MoveResult.OK

    def move_tableau_to_tableau(self, from_index: int, card_index: int, to_index: int) -> MoveResult:
        src = self._pile(from_index)
        dst = self._pile(to_index)
        if src is None or dst is None or src is dst:
            return self._reject("move_tableau_to_tableau", MoveResult.ILLEGAL_MOVE)
        if not src:
            return self._reject("move_tableau_to_tableau", MoveResult.EMPTY_SOURCE)
        if isinstance(card_index, bool) or not 0 <= card_index < len(src):
            return self._reject("move_tableau_to_tableau", MoveResult.ILLEGAL_MOVE)
        c = src[card_index]
        if not c.face_up or not can_stack_tableau(c, dst):
            return self._reject("move_tableau_to_tableau", MoveResult.ILLEGAL_MOVE, c)
        run = src[card_index:]
        del src[card_index:]
        dst.extend(run)
        return MoveResult.OK

    def move_tableau_to_foundation(self, index: int) -> MoveResult:
        pile = self._pile(index)
        if pile is None:
            return self._reject("move_tableau_to_foundation", MoveResult.ILLEGAL_MOVE)
        if not pile:
            return self._reject("move_tableau_to_foundation", MoveResult.EMPTY_SOURCE)
        c = pile[-1]
        if not self._can_move_to_foundation(c):
            return self._reject("move_tableau_to_foundation", MoveResult.ILLEGAL_MOVE, c)
        self._foundations[c.suit].add_card()
        pile.pop()
        return MoveResult.OK

    # ---------- Helpers ----------
    def _can_move_to_foundation(self, card: C.Card) -> bool:
        return self._foundations[card.suit].accepts(card)

    def _pile(self, index: int) -> Optional[List[C.Card]]:
        # negative indexes are out of range, not Python-style offsets; bools are not indexes
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < TABLEAU_COUNT:
            return None
        return self._tableau[index]

    def _reject(self, command: str, result: MoveResult, card: Optional[C.Card] = None) -> MoveResult:
        if card is None:
            logger.debug("%s rejected: %s", command, result.value)
        else:
            logger.debug("%s rejected: %s (%s)", command, result.value, card)
        return result

    def _set_tableau(self, piles: Sequence[Sequence[C.Card]]):
        """Lay out the tableau directly. Used by tests to build positions."""
        if len(piles) != TABLEAU_COUNT:
            raise ValueError(f"expected {TABLEAU_COUNT} piles, got {len(piles)}")
        self._tableau = [list(p) for p in piles]
