"""Tests for automatic players."""

import random

import pytest

from dragoncrow.config import Config
from dragoncrow.game.controller import GameController
from dragoncrow.game.scoring import determine_winner
from dragoncrow.models.card import CardData, CardKind
from dragoncrow.models.deck import Deck
from dragoncrow.strategy.simple import SimpleStrategy, average_card_value


def dragon(value: int) -> CardData:
    return CardData(kind=CardKind.DRAGON, value=value, name=f"Dragon {value}")


def run_to_end(game: GameController, strategy: SimpleStrategy, max_turns: int = 500) -> int:
    turns = 0
    while not game.is_game_over() and turns < max_turns:
        results = strategy.play_turn(game)
        assert all(results), results[-1]
        turns += 1
    return turns


@pytest.fixture
def strategy():
    return SimpleStrategy()


class TestSimpleStrategy:
    """Tests for SimpleStrategy decisions."""

    def test_average_card_value(self):
        game = GameController()
        # Dragons -2,0..8 sum to 34, crows 9..11 sum to 30, over 13 types
        assert average_card_value(game) == pytest.approx(64 / 13)

    def test_swaps_low_card_for_hidden(self, strategy):
        """Test a low revealed card replaces a face-down card."""
        values = [5, 6, 7, 8, 8, 7] * 4 + [-2]
        game = GameController(deck_factory=lambda: Deck([dragon(v) for v in values]))
        game.start()
        game.draw_from_deck()

        slot = strategy.choose_swap(game, game.players[0], game.state.revealed_card)
        assert slot is not None

    def test_declines_high_card(self, strategy):
        """Test a high card is declined while the deck still has cards."""
        values = [0] * 24 + [11, 11]
        game = GameController(deck_factory=lambda: Deck([dragon(v) for v in values]))
        game.start()
        game.draw_from_deck()

        assert strategy.choose_swap(game, game.players[0], game.state.revealed_card) is None

    def test_completes_column_pair_from_discard(self, strategy):
        """Test a discard top that pairs a visible card is taken and swapped in."""
        hands = [[1, 2, 3, 4, 6, 7], [8, 2, 3, 4, 6, 7], [1, 2, 3, 4, 6, 7], [1, 2, 3, 4, 6, 7]]
        values = [v for hand in hands for v in hand] + [8, 0]
        game = GameController(deck_factory=lambda: Deck([dragon(v) for v in values]))
        game.start()

        # Player 0 discards an 8; player 1 shows [8, 2, 3] in its left column
        game.draw_from_deck()
        game.click_revealed_card()
        game.choose_discard_pile(0)
        for slot in (0, 1, 2):
            game.players[1].hand.get(slot).set_face_up()

        player = game.players[1]
        assert strategy.choose_source(game, player) == 0

        game.select_discard_top(0)
        slot = strategy.choose_swap(game, player, game.state.revealed_card)
        assert slot == 1

        game.click_hand_card(1, slot)
        assert player.hand.calculate_score() == 0

    def test_choose_pile_covers_lowest_top(self, strategy):
        values = [1, 2, 3, 4, 6, 7] * 4 + [-2, 8, 5]
        game = GameController(deck_factory=lambda: Deck([dragon(v) for v in values]))
        game.start()
        game.draw_from_deck()
        game.click_revealed_card()
        game.choose_discard_pile(0)  # -2 on pile 0
        game.draw_from_deck()
        game.click_revealed_card()
        game.choose_discard_pile(1)  # 8 on pile 1
        game.draw_from_deck()
        game.click_revealed_card()

        card = game.state.card_awaiting_discard
        assert strategy.choose_pile(game, game.players[2], card) == 0

    def test_takes_discard_when_deck_empty(self, strategy):
        values = [1, 2, 3, 4, 6, 7] * 4 + [9]
        game = GameController(deck_factory=lambda: Deck([dragon(v) for v in values]))
        game.start()
        game.draw_from_deck()
        game.click_revealed_card()
        game.choose_discard_pile(1)

        assert game.deck.is_empty()
        assert strategy.choose_source(game, game.players[1]) == 1


class TestAutoGame:
    """Tests for full automatic games."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_game_terminates(self, strategy, seed):
        """Test the strategy always finishes a shuffled game."""
        game = GameController(Config(), rng=random.Random(seed))
        game.start()

        run_to_end(game, strategy)

        assert game.is_game_over()
        assert any(p.hand.all_face_up() for p in game.players)
        assert game.state.winner == determine_winner(game.state.final_scores)
        assert game.state.final_scores == game.scores()

    @pytest.mark.parametrize("seed", [5, 6])
    def test_cards_conserved(self, strategy, seed):
        """Test no card is created or lost over a whole game."""
        game = GameController(Config(), rng=random.Random(seed))
        game.start()
        run_to_end(game, strategy)

        in_hands = sum(len(p.hand) for p in game.players)
        in_piles = sum(len(p) for p in game.piles)
        assert in_hands + in_piles + game.deck.remaining() == 52
        assert in_hands == 24

        ids = [c.card_id for p in game.players for c in p.hand.cards()]
        ids += [c.card_id for pile in game.piles for c in pile]
        assert len(ids) == len(set(ids))
