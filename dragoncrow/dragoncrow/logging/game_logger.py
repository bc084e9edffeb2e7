"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from dragoncrow.game.events import GameListener
from dragoncrow.game.validator import RejectReason
from dragoncrow.models.card import Card, Zone
from dragoncrow.models.player import Player

from .formatters import format_card_data, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger(GameListener):
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game. Register the logger as a
    listener on the game controller.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._players: list[Player] = []
        self._game_num = 0
        self._turn = 0
        self._scores: list[int] = []

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def on_game_started(self, players: list[Player]) -> None:
        """Log game start with initial hands."""
        self._players = players
        self._game_num += 1
        self._turn = 0
        self._write({
            "type": "game_start",
            "game": self._game_num,
            "timestamp": datetime.now().isoformat(),
            "players": [{"id": p.player_id, "name": p.name} for p in players],
            "hands": format_hands([p.hand for p in players]),
        })

    def on_deck_shuffled(self, remaining: int) -> None:
        self._players = []

    def on_card_moved(self, card: Card, zone: Zone, slot: int | None) -> None:
        """Log a card changing zone (skipped during the deal)."""
        if not self._players:
            return
        record: dict[str, Any] = {
            "type": "move",
            "game": self._game_num,
            "turn": self._turn,
            "card": format_card_data(card.data),
            "face_up": card.face_up,
            "zone": zone.value,
        }
        if slot is not None:
            record["slot"] = slot
        if card.owner is not None:
            record["owner"] = card.owner
        self._write(record)

    def on_scores_updated(self, scores: list[int]) -> None:
        self._scores = list(scores)

    def on_turn_changed(self, player_index: int) -> None:
        """Log the start of a turn with the current hands and scores."""
        self._turn += 1
        self._write({
            "type": "turn",
            "game": self._game_num,
            "turn": self._turn,
            "player": player_index,
            "scores": self._scores,
            "hands": format_hands([p.hand for p in self._players]),
        })

    def on_action_rejected(self, reason: RejectReason) -> None:
        self._write({
            "type": "reject",
            "game": self._game_num,
            "turn": self._turn,
            "reason": reason.value,
        })

    def on_game_ended(self, winner: int, scores: list[int]) -> None:
        """Log game end with revealed hands and results."""
        self._write({
            "type": "game_end",
            "game": self._game_num,
            "turns": self._turn,
            "winner": winner,
            "scores": list(scores),
            "hands": format_hands([p.hand for p in self._players]),
        })
        self._players = []
