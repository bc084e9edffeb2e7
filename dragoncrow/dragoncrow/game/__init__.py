"""Game logic."""

from .controller import DealStep, GameController
from .events import EventDispatcher, GameListener
from .scoring import current_scores, determine_winner
from .validator import ActionResult, ActionValidator, RejectReason

__all__ = [
    "ActionResult",
    "ActionValidator",
    "DealStep",
    "EventDispatcher",
    "GameController",
    "GameListener",
    "RejectReason",
    "current_scores",
    "determine_winner",
]
