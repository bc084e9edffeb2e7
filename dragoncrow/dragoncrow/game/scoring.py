"""End-of-game scoring."""

from dragoncrow.models.player import Player


def current_scores(players: list[Player]) -> list[int]:
    """Get every player's score over face-up cards, in player order."""
    return [p.hand.calculate_score() for p in players]


def determine_winner(scores: list[int]) -> int:
    """Pick the winner: lowest score, first player in index order on ties.

    Args:
        scores: Final scores indexed by player

    Returns:
        Winning player index
    """
    if not scores:
        raise ValueError("No scores to compare")
    winner = 0
    for i, score in enumerate(scores):
        if score < scores[winner]:
            winner = i
    return winner
