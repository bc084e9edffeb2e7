"""Base strategy class for automatic players.

Defines the decisions an automatic player makes during one turn.
"""

from abc import ABC, abstractmethod

from dragoncrow.game.controller import GameController
from dragoncrow.game.validator import ActionResult
from dragoncrow.models.card import Card
from dragoncrow.models.player import Player


class Strategy(ABC):
    """Abstract base class for game strategies.

    All automatic players must inherit from this class
    and implement the required methods.
    """

    @abstractmethod
    def choose_source(self, game: GameController, player: Player) -> int | None:
        """Choose where the turn's card comes from.

        Args:
            game: Running game
            player: Player taking the turn

        Returns:
            Discard pile index to take the top from, or None to draw
        """
        pass

    @abstractmethod
    def choose_swap(
        self, game: GameController, player: Player, card: Card
    ) -> int | None:
        """Choose a hand slot to swap the revealed card into.

        Args:
            game: Running game
            player: Player taking the turn
            card: The revealed card

        Returns:
            Hand slot index, or None to decline the card
        """
        pass

    @abstractmethod
    def choose_pile(self, game: GameController, player: Player, card: Card) -> int:
        """Choose the discard pile for the released card.

        Args:
            game: Running game
            player: Player taking the turn
            card: Card awaiting discard

        Returns:
            Discard pile index
        """
        pass

    def play_turn(self, game: GameController) -> list[ActionResult]:
        """Play one full reveal/swap/discard cycle for the current player.

        Returns:
            Results of the actions sent, in order
        """
        player = game.players[game.current_player]
        results: list[ActionResult] = []

        pile = self.choose_source(game, player)
        if pile is None:
            results.append(game.draw_from_deck())
        else:
            results.append(game.select_discard_top(pile))
        if not results[-1]:
            return results

        revealed = game.state.revealed_card
        if revealed is None:
            return results
        slot = self.choose_swap(game, player, revealed)
        if slot is None:
            results.append(game.click_revealed_card())
        else:
            results.append(game.click_hand_card(player.player_id, slot))
        if not results[-1]:
            return results

        released = game.state.card_awaiting_discard
        if released is None:
            return results
        results.append(game.choose_discard_pile(self.choose_pile(game, player, released)))
        return results
