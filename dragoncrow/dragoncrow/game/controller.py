"""Game controller: the turn state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterator

from dragoncrow.config import Config
from dragoncrow.errors import ConfigError, InvariantViolation
from dragoncrow.models.card import Card, CardData, Zone
from dragoncrow.models.deck import Deck
from dragoncrow.models.game_state import DiscardPile, GamePhase, GameState, TurnStep
from dragoncrow.models.player import Player

from .events import EventDispatcher, GameListener
from .scoring import current_scores, determine_winner
from .validator import ActionResult, ActionValidator

logger = logging.getLogger(__name__)


@dataclass
class DealStep:
    """One card placed during the initial deal."""

    player_id: int
    slot: int
    card: Card


class GameController:
    """Runs one game of Dragon/Crow.

    Every public action performs a single atomic transition and returns an
    ActionResult. Illegal actions change nothing and are reported through
    on_action_rejected.
    """

    def __init__(
        self,
        config: Config | None = None,
        listeners: list[GameListener] | None = None,
        deck_factory: Callable[[], Deck] | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game controller.

        Args:
            config: Configuration (uses defaults if not provided)
            listeners: Presentation layers to notify
            deck_factory: Builds a ready-to-deal deck for each game
                (defaults to a shuffled deck from config)
            rng: Random source for shuffling
        """
        self.config = config or Config()
        self.rules = self.config.game
        self.rng = rng or random.Random(self.rules.seed)
        self.events = EventDispatcher(listeners)
        self._deck_factory = deck_factory or self._build_shuffled_deck

        self.validator = ActionValidator(self.rules.cards_per_player)

        self.state = GameState()
        self.deck = Deck()
        self.players: list[Player] = [
            Player(player_id=i, name=f"Player {i}")
            for i in range(self.rules.num_players)
        ]
        self.piles: list[DiscardPile] = [
            DiscardPile(i) for i in range(self.rules.num_discard_piles)
        ]

        self._next_card_id = 0
        self._generation = 0

    def add_listener(self, listener: GameListener) -> None:
        self.events.add(listener)

    # Setup

    def start(self) -> None:
        """Build the deck, deal every hand and begin the first turn.

        Raises:
            ConfigError: If the configured deck cannot be built or dealt.
        """
        for _ in self.deal_steps():
            pass

    def restart(self) -> ActionResult:
        """Discard the current game and start a new one."""
        logger.info("Restarting game")
        self.start()
        return ActionResult.ok()

    def deal_steps(self) -> Iterator[DealStep]:
        """Deal the initial hands one card at a time.

        Cards go to player 0 slots 0..5, then player 1, and so on. Play begins
        once the sequence is exhausted. Starting another deal (or restarting)
        abandons a sequence that is still in flight.

        Yields:
            One DealStep per dealt card.
        """
        self._generation += 1
        generation = self._generation
        self._init_game()

        face_up = not self.rules.deal_face_down
        for player in self.players:
            for slot in range(self.rules.cards_per_player):
                if generation != self._generation:
                    return
                data = self.deck.draw()
                if data is None:
                    raise InvariantViolation("Deck ran out during the deal")
                card = self._new_card(data)
                player.hand.deal_card(slot, card, face_up=face_up)
                card.move_to(Zone.HAND, slot, player.player_id)
                self.events.on_card_moved(card, Zone.HAND, slot)
                if card.face_up:
                    self.events.on_card_face_changed(card, True)
                yield DealStep(player.player_id, slot, card)

        if generation != self._generation:
            return
        self._begin_play()

    def _build_shuffled_deck(self) -> Deck:
        deck = Deck.from_config(self.config.deck)
        deck.shuffle(self.rng)
        return deck

    def _check_rules(self) -> None:
        """Reject table shapes that cannot be played.

        Config models validate on load, but a config mutated afterwards
        reaches the controller unchecked.
        """
        rules = self.rules
        if rules.num_players < 1:
            raise ConfigError(f"Need at least one player, got {rules.num_players}")
        if rules.cards_per_player < 2 or rules.cards_per_player % 2:
            raise ConfigError(
                "cards_per_player must be a positive even number, "
                f"got {rules.cards_per_player}"
            )
        if rules.num_discard_piles < 1:
            raise ConfigError(
                f"Need at least one discard pile, got {rules.num_discard_piles}"
            )
        if (
            len(self.players) != rules.num_players
            or len(self.piles) != rules.num_discard_piles
        ):
            raise ConfigError("Table size changed after the controller was created")

    def _init_game(self) -> None:
        """Reset every zone and build a fresh deck."""
        self._check_rules()
        self.validator.hand_size = self.rules.cards_per_player
        self.state.reset_for_new_game()
        self._next_card_id = 0
        for player in self.players:
            player.reset_game_state(self.rules.cards_per_player)
        for pile in self.piles:
            pile.clear()

        self.deck = self._deck_factory()
        needed = self.rules.num_players * self.rules.cards_per_player
        if self.deck.remaining() < needed:
            raise ConfigError(
                f"Deck holds {self.deck.remaining()} cards, dealing needs {needed}"
            )
        self.events.on_deck_shuffled(self.deck.remaining())
        logger.debug(f"Deck ready with {self.deck.remaining()} cards")

    def _begin_play(self) -> None:
        self.state.phase = GamePhase.PLAYER_TURN
        self.state.current_player = 0
        self.state.turn_number = 1
        self._refresh_interactability()

        logger.info(f"Game started, first player: {self.state.current_player}")
        self.events.on_game_started(self.players)
        self.events.on_scores_updated(self.scores())
        self.events.on_turn_changed(self.state.current_player)

    def _new_card(self, data: CardData) -> Card:
        card = Card(card_id=self._next_card_id, data=data)
        self._next_card_id += 1
        return card

    # Actions

    def draw_from_deck(self) -> ActionResult:
        """Draw the next deck card into the reveal slot."""
        result = self.validator.validate_draw(self.state, self.deck)
        if not result:
            return self._reject(result)

        data = self.deck.draw()
        if data is None:
            raise InvariantViolation("Deck empty after validation")
        card = self._new_card(data)
        self._stage(card)
        self.state.revealed_card = card
        self._refresh_interactability()

        logger.debug(f"Player {self.state.current_player} drew {card.data}")
        return result

    def select_discard_top(self, pile_index: int) -> ActionResult:
        """Lift the top card of a discard pile into the reveal slot."""
        result = self.validator.validate_take_discard(self.state, self.piles, pile_index)
        if not result:
            return self._reject(result)

        card = self.piles[pile_index].pop()
        if card is None:
            raise InvariantViolation(f"Pile {pile_index} empty after validation")
        self._stage(card)
        self.state.revealed_card = card
        self._refresh_interactability()

        logger.debug(
            f"Player {self.state.current_player} took {card.data} from pile {pile_index}"
        )
        return result

    def click_hand_card(self, player_index: int, slot: int) -> ActionResult:
        """Swap a hand card with the revealed card.

        The revealed card takes over the clicked slot and the hand card moves
        to the reveal slot, where it waits to be discarded.
        """
        result = self.validator.validate_hand_click(self.state, player_index, slot)
        if not result:
            return self._reject(result)

        revealed = self.state.revealed_card
        if revealed is None:
            raise InvariantViolation("No revealed card after validation")
        hand = self.players[player_index].hand
        try:
            current = hand.get(slot)
            if current is None or current.owner != player_index:
                raise InvariantViolation(
                    f"Slot {slot} of player {player_index} does not hold their card"
                )
            old = hand.swap(slot, revealed)
        except InvariantViolation:
            logger.exception(f"Swap failed for player {player_index} slot {slot}")
            raise

        revealed.move_to(Zone.HAND, slot, player_index)
        self.events.on_card_moved(revealed, Zone.HAND, slot)
        self._stage(old)

        self.state.revealed_card = None
        self.state.card_awaiting_discard = old
        self._refresh_interactability()

        logger.debug(
            f"Player {player_index} swapped slot {slot}: "
            f"kept {revealed.data}, released {old.data}"
        )
        return result

    def click_revealed_card(self) -> ActionResult:
        """Decline the revealed card; it goes straight to discard."""
        result = self.validator.validate_revealed_click(self.state)
        if not result:
            return self._reject(result)

        self.state.card_awaiting_discard = self.state.revealed_card
        self.state.revealed_card = None
        self._refresh_interactability()

        logger.debug(f"Player {self.state.current_player} declined the revealed card")
        return result

    def choose_discard_pile(self, pile_index: int) -> ActionResult:
        """Put the card awaiting discard on a pile and end the turn."""
        result = self.validator.validate_choose_pile(self.state, self.piles, pile_index)
        if not result:
            return self._reject(result)

        card = self.state.card_awaiting_discard
        if card is None:
            raise InvariantViolation("No card awaiting discard after validation")
        self.state.card_awaiting_discard = None

        if card.set_face_up():
            self.events.on_card_face_changed(card, True)
        card.interactable = False
        card.move_to(Zone.DISCARD, pile_index)
        self.piles[pile_index].push(card)
        self.events.on_card_moved(card, Zone.DISCARD, pile_index)

        logger.debug(
            f"Player {self.state.current_player} discarded {card.data} on pile {pile_index}"
        )
        self._next_turn()
        return result

    # Turn flow

    def _next_turn(self) -> None:
        """Advance to the next player and check for game end."""
        self.state.current_player = (self.state.current_player + 1) % len(self.players)
        self.state.turn_number += 1
        self._refresh_interactability()
        self.events.on_scores_updated(self.scores())

        if self._check_end():
            self._end_game()
            return

        self.events.on_turn_changed(self.state.current_player)

    def _check_end(self) -> bool:
        """The game ends once any hand is completely face-up."""
        return any(p.hand.all_face_up() for p in self.players)

    def _end_game(self) -> None:
        self.state.phase = GamePhase.GAME_END

        for player in self.players:
            for card in player.hand.reveal_all():
                self.events.on_card_face_changed(card, True)

        scores = self.scores()
        winner = determine_winner(scores)
        self.state.final_scores = scores
        self.state.winner = winner
        self._refresh_interactability()

        logger.info(f"Game over after {self.state.turn_number - 1} turns, winner: {winner}")
        logger.info(f"Final scores: {scores}")
        self.events.on_scores_updated(scores)
        self.events.on_game_ended(winner, scores)

    def _stage(self, card: Card) -> None:
        """Move a card into the reveal slot, face-up."""
        card.move_to(Zone.REVEAL)
        self.events.on_card_moved(card, Zone.REVEAL, None)
        if card.set_face_up():
            self.events.on_card_face_changed(card, True)

    def _refresh_interactability(self) -> None:
        """Re-derive which cards the shell may let the user click."""
        playing = self.state.is_playing()
        revealed = self.state.revealed_card
        swapping = playing and revealed is not None

        for player in self.players:
            mine = player.player_id == self.state.current_player
            for card in player.hand.cards():
                card.interactable = swapping and mine

        idle = playing and self.state.step == TurnStep.IDLE
        for pile in self.piles:
            top = pile.top()
            for card in pile:
                card.interactable = idle and card is top

        if revealed is not None:
            revealed.interactable = playing
        if self.state.card_awaiting_discard is not None:
            self.state.card_awaiting_discard.interactable = False

    def _reject(self, result: ActionResult) -> ActionResult:
        logger.debug(f"Action rejected ({result.reason.value}): {result.message}")
        self.events.on_action_rejected(result.reason)
        return result

    # Queries

    @property
    def current_player(self) -> int:
        return self.state.current_player

    @property
    def deck_interactable(self) -> bool:
        """Check if drawing from the deck is currently offered."""
        return (
            self.state.is_playing()
            and self.state.step == TurnStep.IDLE
            and not self.deck.is_empty()
        )

    def pile_interactable(self, pile_index: int) -> bool:
        """Check if the top of a discard pile can currently be taken."""
        top = self.piles[pile_index].top()
        return top is not None and top.interactable

    def scores(self) -> list[int]:
        """Get every player's current score."""
        return current_scores(self.players)

    def is_game_over(self) -> bool:
        return self.state.phase == GamePhase.GAME_END
