"""Simple strategy implementation.

Strategy:
- Source: take a discard top if swapping it in lowers the estimated score,
  otherwise draw (take a top anyway once the deck is empty)
- Swap: put the card where it lowers the estimate most, treating face-down
  cards as the average card value; decline it if nothing improves
- Empty deck: always replace a face-down card so the game can finish
- Discard: cover the lowest visible top so the next player cannot take it
"""

from dragoncrow.game.controller import GameController
from dragoncrow.models.card import Card
from dragoncrow.models.hand import Hand, has_pair
from dragoncrow.models.player import Player

from .base import Strategy


def average_card_value(game: GameController) -> float:
    """Mean value over the configured card types."""
    deck = game.config.deck
    values = [d.value for d in deck.dragons] + [c.value for c in deck.crows]
    return sum(values) / len(values) if values else 0.0


def estimate_hand(hand: Hand, unknown: float, replace: tuple[int, Card] | None = None) -> float:
    """Estimate a hand's final score.

    Args:
        hand: Hand to estimate
        unknown: Value assumed for face-down cards
        replace: Optional (slot, card) to evaluate as if already swapped in

    Returns:
        Estimated score
    """
    total = 0.0
    for column in hand.columns():
        known: list[int] = []
        hidden = 0
        for slot in column:
            card = hand.get(slot)
            if replace is not None and replace[0] == slot:
                card = replace[1]
            if card is None:
                continue
            if card.face_up or (replace is not None and card is replace[1]):
                known.append(card.value)
            else:
                hidden += 1
        if has_pair(known):
            continue
        total += sum(known) + hidden * unknown
    return total


class SimpleStrategy(Strategy):
    """Greedy one-step strategy."""

    def choose_source(self, game: GameController, player: Player) -> int | None:
        unknown = average_card_value(game)
        best_pile = None
        best_gain = 0.0
        fallback = None
        for pile in game.piles:
            top = pile.top()
            if top is None:
                continue
            if fallback is None:
                fallback = pile.index
            slot, gain = self._best_slot(player.hand, top, unknown)
            if slot is not None and gain > best_gain:
                best_pile, best_gain = pile.index, gain

        if best_pile is not None:
            return best_pile
        if game.deck.is_empty():
            return fallback
        return None

    def choose_swap(
        self, game: GameController, player: Player, card: Card
    ) -> int | None:
        unknown = average_card_value(game)
        if game.deck.is_empty():
            hidden = [i for i, c in enumerate(player.hand) if c is not None and not c.face_up]
            if hidden:
                slot, _ = self._best_slot(player.hand, card, unknown, hidden)
                return slot

        slot, gain = self._best_slot(player.hand, card, unknown)
        if slot is not None and gain > 0:
            return slot
        return None

    def choose_pile(self, game: GameController, player: Player, card: Card) -> int:
        covered = [p for p in game.piles if p.top() is not None]
        if not covered:
            return 0
        return min(covered, key=lambda p: p.top().value).index

    def _best_slot(
        self,
        hand: Hand,
        card: Card,
        unknown: float,
        slots: list[int] | None = None,
    ) -> tuple[int | None, float]:
        """Find the slot where the card lowers the estimate most.

        Args:
            slots: Candidate slots (defaults to every occupied slot)

        Returns:
            (slot, gain) where gain is the estimate reduction; slot is None
            for an empty hand
        """
        before = estimate_hand(hand, unknown)
        best_slot = None
        best_gain = float("-inf")
        candidates = slots if slots is not None else range(hand.size)
        for slot in candidates:
            if hand.get(slot) is None:
                continue
            gain = before - estimate_hand(hand, unknown, replace=(slot, card))
            if gain > best_gain:
                best_slot, best_gain = slot, gain
        return best_slot, best_gain
