"""Game state models."""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from .card import Card


class GamePhase(str, Enum):
    """Top-level game phase (linear, no return from GAME_END)."""

    SETUP = "setup"
    PLAYER_TURN = "player_turn"
    GAME_END = "game_end"


class TurnStep(str, Enum):
    """Position within one player's reveal/swap/discard cycle."""

    IDLE = "idle"  # Must draw or take a discard top
    REVEALED = "revealed"  # Must swap with a hand card or drop the revealed card
    AWAITING_DISCARD = "awaiting_discard"  # Must choose a pile


class DiscardPile:
    """Stack of discarded cards. Only the top card is visible."""

    def __init__(self, index: int):
        self.index = index
        self._cards: list[Card] = []

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def pop(self) -> Card | None:
        """Remove and return the top card, or None if empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def top(self) -> Card | None:
        """Get the top card without removing it."""
        return self._cards[-1] if self._cards else None

    def is_empty(self) -> bool:
        return not self._cards

    def clear(self) -> None:
        self._cards = []

    def __iter__(self) -> Iterator[Card]:
        """Iterate bottom to top."""
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        top = self.top()
        return f"Pile {self.index}: {top.data if top else '[empty]'} ({len(self)})"


class GameState(BaseModel):
    """Overall game state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    phase: GamePhase = GamePhase.SETUP
    turn_number: int = 0
    current_player: int = 0

    revealed_card: Card | None = None
    card_awaiting_discard: Card | None = None

    winner: int | None = None
    final_scores: list[int] = Field(default_factory=list)

    @property
    def step(self) -> TurnStep:
        """Derive the sub-step from the staged cards."""
        if self.card_awaiting_discard is not None:
            return TurnStep.AWAITING_DISCARD
        if self.revealed_card is not None:
            return TurnStep.REVEALED
        return TurnStep.IDLE

    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYER_TURN

    def reset_for_new_game(self) -> None:
        """Reset state for a new game."""
        self.phase = GamePhase.SETUP
        self.turn_number = 0
        self.current_player = 0
        self.revealed_card = None
        self.card_awaiting_discard = None
        self.winner = None
        self.final_scores = []

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}", f"[{self.phase.value}]"]
        if self.is_playing():
            parts.append(f"Player {self.current_player}'s turn ({self.step.value})")
        elif self.winner is not None:
            parts.append(f"Winner: Player {self.winner}")
        return " ".join(parts)
