"""Klondike solitaire: a rules engine plus a small pygame table."""
from klondike.common import Card, Color, Suit
from klondike.deck import Deck
from klondike.engine import MoveResult, SolitaireEngine
from klondike.foundation import FoundationPile

__all__ = ["Card", "Color", "Suit", "Deck", "FoundationPile", "MoveResult", "SolitaireEngine"]
