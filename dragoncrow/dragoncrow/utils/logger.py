"""Logging utilities and game state display."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from dragoncrow.game.events import GameListener
from dragoncrow.models.card import Zone

if TYPE_CHECKING:
    from dragoncrow.game.controller import GameController
    from dragoncrow.game.validator import RejectReason
    from dragoncrow.models.card import Card
    from dragoncrow.models.hand import Hand
    from dragoncrow.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay(GameListener):
    """Display game events to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show face-down card values
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def format_hand(self, hand: Hand) -> str:
        """Render a hand row by row, one cell per column."""
        h = hand.column_height
        slots = list(hand)
        rows = []
        for r in range(h):
            cells = []
            for c in range(len(slots) // h):
                card = slots[c * h + r]
                cells.append(self._cell(card))
            rows.append(" ".join(cells))
        return "  |  ".join(rows)

    def _cell(self, card: Card | None) -> str:
        if card is None:
            return "[  ]"
        if card.face_up:
            return f"[{card.value:>2}]"
        if self.show_hands:
            return f"({card.value:>2})"
        return "[??]"

    def print_table(self, game: GameController) -> None:
        """Print hands, pile tops and the staged card."""
        for player in game.players:
            marker = ">" if player.player_id == game.current_player else " "
            print(
                f"{marker} P{player.player_id}: {self.format_hand(player.hand)}"
                f"   score {player.score}"
            )
        tops = []
        for pile in game.piles:
            top = pile.top()
            tops.append(f"pile {pile.index}: {top.value if top else '-'}")
        print(f"  Deck: {game.deck.remaining()} | " + " | ".join(tops))
        staged = game.state.revealed_card or game.state.card_awaiting_discard
        if staged is not None:
            print(f"  Reveal slot: {staged.data} ({game.state.step.value})")

    def on_game_started(self, players: list[Player]) -> None:
        self.print_separator()
        print(f"NEW GAME: {len(players)} players")
        self.print_separator()

    def on_turn_changed(self, player_index: int) -> None:
        print(f"\nPlayer {player_index}'s turn")

    def on_card_moved(self, card: Card, zone: Zone, slot: int | None) -> None:
        if zone == Zone.DISCARD:
            print(f"  -> {card.data} discarded on pile {slot}")
        elif zone == Zone.REVEAL:
            print(f"  -> {card.data} in reveal slot")

    def on_action_rejected(self, reason: RejectReason) -> None:
        print(f"  !! Action rejected: {reason.value}")

    def on_game_ended(self, winner: int, scores: list[int]) -> None:
        self.print_separator()
        print("GAME OVER")
        self.print_separator()
        for player_id, score in enumerate(scores):
            tag = "  <- winner" if player_id == winner else ""
            print(f"  Player {player_id}: {score} points{tag}")
