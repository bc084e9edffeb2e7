"""Action validation against the current turn step."""

from dataclasses import dataclass
from enum import Enum

from dragoncrow.models.deck import Deck
from dragoncrow.models.game_state import DiscardPile, GameState, TurnStep


class RejectReason(str, Enum):
    """Why an action was refused."""

    NONE = "none"
    GAME_NOT_IN_PROGRESS = "game_not_in_progress"
    WRONG_STEP = "wrong_step"  # Action not legal in the current sub-step
    WRONG_PLAYER = "wrong_player"
    INVALID_SLOT = "invalid_slot"
    INVALID_PILE = "invalid_pile"
    EMPTY_PILE = "empty_pile"
    DECK_EMPTY = "deck_empty"


@dataclass
class ActionResult:
    """Result of a player action."""

    accepted: bool
    reason: RejectReason = RejectReason.NONE
    message: str = ""

    @classmethod
    def ok(cls) -> "ActionResult":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectReason, message: str = "") -> "ActionResult":
        return cls(accepted=False, reason=reason, message=message)

    def __bool__(self) -> bool:
        return self.accepted


class ActionValidator:
    """Checks whether an action is legal without changing anything."""

    def __init__(self, hand_size: int):
        """Initialize validator.

        Args:
            hand_size: Number of slots per hand
        """
        self.hand_size = hand_size

    def validate_draw(self, state: GameState, deck: Deck) -> ActionResult:
        """Validate drawing from the deck."""
        result = self._check_step(state, TurnStep.IDLE)
        if not result:
            return result
        if deck.is_empty():
            return ActionResult.reject(RejectReason.DECK_EMPTY, "The deck is empty")
        return ActionResult.ok()

    def validate_take_discard(
        self,
        state: GameState,
        piles: list[DiscardPile],
        pile_index: int,
    ) -> ActionResult:
        """Validate taking the top card of a discard pile."""
        result = self._check_step(state, TurnStep.IDLE)
        if not result:
            return result
        result = self._check_pile(piles, pile_index)
        if not result:
            return result
        if piles[pile_index].is_empty():
            return ActionResult.reject(
                RejectReason.EMPTY_PILE, f"Discard pile {pile_index} is empty"
            )
        return ActionResult.ok()

    def validate_hand_click(
        self,
        state: GameState,
        player_index: int,
        slot: int,
    ) -> ActionResult:
        """Validate swapping a hand card with the revealed card."""
        result = self._check_step(state, TurnStep.REVEALED)
        if not result:
            return result
        if player_index != state.current_player:
            return ActionResult.reject(
                RejectReason.WRONG_PLAYER,
                f"It is player {state.current_player}'s turn, not player {player_index}'s",
            )
        if not 0 <= slot < self.hand_size:
            return ActionResult.reject(RejectReason.INVALID_SLOT, f"No hand slot {slot}")
        return ActionResult.ok()

    def validate_revealed_click(self, state: GameState) -> ActionResult:
        """Validate dropping the revealed card without a swap."""
        return self._check_step(state, TurnStep.REVEALED)

    def validate_choose_pile(
        self,
        state: GameState,
        piles: list[DiscardPile],
        pile_index: int,
    ) -> ActionResult:
        """Validate discarding onto a pile."""
        result = self._check_step(state, TurnStep.AWAITING_DISCARD)
        if not result:
            return result
        return self._check_pile(piles, pile_index)

    def _check_step(self, state: GameState, expected: TurnStep) -> ActionResult:
        if not state.is_playing():
            return ActionResult.reject(
                RejectReason.GAME_NOT_IN_PROGRESS,
                f"Game is in phase {state.phase.value}",
            )
        if state.step != expected:
            return ActionResult.reject(
                RejectReason.WRONG_STEP,
                f"Action needs step {expected.value}, current step is {state.step.value}",
            )
        return ActionResult.ok()

    def _check_pile(self, piles: list[DiscardPile], pile_index: int) -> ActionResult:
        if not 0 <= pile_index < len(piles):
            return ActionResult.reject(
                RejectReason.INVALID_PILE, f"No discard pile {pile_index}"
            )
        return ActionResult.ok()
