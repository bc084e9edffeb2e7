"""Notifications from the game core to presentation layers.

The core never draws or animates anything itself. Shells subclass
GameListener, override the callbacks they care about and register with the
controller. Callbacks fire synchronously, in the order the state changes
happen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dragoncrow.models.card import Card, Zone
    from dragoncrow.models.player import Player

    from .validator import RejectReason


class GameListener:
    """Base class for game event subscribers. All callbacks default to no-ops."""

    def on_game_started(self, players: list[Player]) -> None:
        """A new game has been dealt and the first turn begins."""

    def on_deck_shuffled(self, remaining: int) -> None:
        """The deck has been built and shuffled."""

    def on_card_moved(self, card: Card, zone: Zone, slot: int | None) -> None:
        """A card changed zone (slot is the hand slot or pile index)."""

    def on_card_face_changed(self, card: Card, face_up: bool) -> None:
        """A card was flipped."""

    def on_scores_updated(self, scores: list[int]) -> None:
        """Scores were recomputed for every player."""

    def on_turn_changed(self, player_index: int) -> None:
        """It is now this player's turn."""

    def on_game_ended(self, winner: int, scores: list[int]) -> None:
        """The game is over; all hands are revealed."""

    def on_action_rejected(self, reason: RejectReason) -> None:
        """An action was refused; nothing changed."""


class EventDispatcher(GameListener):
    """Fans events out to registered listeners in registration order."""

    def __init__(self, listeners: list[GameListener] | None = None):
        self._listeners: list[GameListener] = list(listeners or [])

    def add(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def on_game_started(self, players: list[Player]) -> None:
        for listener in self._listeners:
            listener.on_game_started(players)

    def on_deck_shuffled(self, remaining: int) -> None:
        for listener in self._listeners:
            listener.on_deck_shuffled(remaining)

    def on_card_moved(self, card: Card, zone: Zone, slot: int | None) -> None:
        for listener in self._listeners:
            listener.on_card_moved(card, zone, slot)

    def on_card_face_changed(self, card: Card, face_up: bool) -> None:
        for listener in self._listeners:
            listener.on_card_face_changed(card, face_up)

    def on_scores_updated(self, scores: list[int]) -> None:
        for listener in self._listeners:
            listener.on_scores_updated(list(scores))

    def on_turn_changed(self, player_index: int) -> None:
        for listener in self._listeners:
            listener.on_turn_changed(player_index)

    def on_game_ended(self, winner: int, scores: list[int]) -> None:
        for listener in self._listeners:
            listener.on_game_ended(winner, list(scores))

    def on_action_rejected(self, reason: RejectReason) -> None:
        for listener in self._listeners:
            listener.on_action_rejected(reason)

    def __len__(self) -> int:
        return len(self._listeners)
