"""Player model."""

from pydantic import BaseModel, ConfigDict, Field

from .hand import Hand


class Player(BaseModel):
    """Player state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: int  # 0-3
    name: str = "Player"
    hand: Hand = Field(default_factory=Hand)

    @property
    def score(self) -> int:
        """Current score over face-up cards."""
        return self.hand.calculate_score()

    def reset_game_state(self, hand_size: int) -> None:
        """Reset game-related state (called at start of new game)."""
        self.hand = Hand(hand_size)

    def __str__(self) -> str:
        return f"Player{self.player_id}[{self.name}]"

    def __repr__(self) -> str:
        return f"Player(id={self.player_id}, name={self.name!r}, score={self.score})"
