"""Game models."""

from .card import Card, CardData, CardKind, Zone
from .deck import Deck
from .game_state import DiscardPile, GamePhase, GameState, TurnStep
from .hand import Hand
from .player import Player

__all__ = [
    "Card",
    "CardData",
    "CardKind",
    "Zone",
    "Deck",
    "Hand",
    "Player",
    "GameState",
    "GamePhase",
    "TurnStep",
    "DiscardPile",
]
