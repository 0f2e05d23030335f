# common.py - suits, colors and cards shared by the engine and the scenes
from enum import Enum
from typing import Dict, List


class Color(str, Enum):
    RED = "RED"
    BLACK = "BLACK"


class Suit(str, Enum):
    """The four suits. Foundations are keyed by these values."""
    CLUB = "CLUB"
    SPADE = "SPADE"
    HEART = "HEART"
    DIAMOND = "DIAMOND"


SUIT_TO_COLOR: Dict[Suit, Color] = {
    Suit.CLUB: Color.BLACK,
    Suit.SPADE: Color.BLACK,
    Suit.HEART: Color.RED,
    Suit.DIAMOND: Color.RED,
}

SUIT_GLYPHS: Dict[Suit, str] = {
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
}

SUIT_NAMES: Dict[Suit, str] = {
    Suit.CLUB: "Clubs",
    Suit.SPADE: "Spades",
    Suit.HEART: "Hearts",
    Suit.DIAMOND: "Diamonds",
}

ACE = 1
KING = 13
RANKS = range(ACE, KING + 1)

RANK_TO_TEXT = {1: "A", 11: "J", 12: "Q", 13: "K"}
for _r in range(2, 11):
    RANK_TO_TEXT[_r] = str(_r)

RANK_NAMES = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}
for _r in range(2, 11):
    RANK_NAMES[_r] = str(_r)


def color_of(suit: Suit) -> Color:
    return SUIT_TO_COLOR[suit]


def is_red(suit: Suit) -> bool:
    return SUIT_TO_COLOR[suit] is Color.RED


class Card:
    """A playing card.

    Suit and rank never change after construction; only the orientation does.
    Cards use identity equality: the deck creates each card exactly once and
    piles move the same object around.
    """
    __slots__ = ("_suit", "_rank", "face_up")

    def __init__(self, suit: Suit, rank: int, face_up: bool = False):
        if rank not in RANKS:
            raise ValueError(f"rank must be in 1..13, got {rank!r}")
        self._suit = Suit(suit)
        self._rank = rank
        self.face_up = face_up

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def color(self) -> Color:
        return color_of(self._suit)

    def flip(self):
        self.face_up = not self.face_up

    def __str__(self):
        return f"{RANK_NAMES[self._rank]} of {SUIT_NAMES[self._suit]}"

    def __repr__(self):
        return f"{RANK_TO_TEXT[self._rank]}{SUIT_GLYPHS[self._suit]}{'↑' if self.face_up else '↓'}"


def make_cards() -> List[Card]:
    """One face-down card per suit and rank, unshuffled."""
    return [Card(suit, rank, False) for suit in Suit for rank in RANKS]
