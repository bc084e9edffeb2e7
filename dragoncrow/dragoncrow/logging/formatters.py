"""Formatters for game log output."""

from dragoncrow.models.card import Card, CardData, CardKind
from dragoncrow.models.hand import Hand

# Kind codes for log output
KIND_CODES: dict[CardKind, str] = {
    CardKind.DRAGON: "D",
    CardKind.CROW: "C",
}


def format_card_data(data: CardData) -> str:
    """Format a card identity to string.

    Args:
        data: Card identity to format.

    Returns:
        Formatted string (e.g., "D5" for a value-5 dragon, "C10" for a crow).
    """
    return f"{KIND_CODES[data.kind]}{data.value}"


def format_card(card: Card) -> str:
    """Format a dealt card, wrapping face-down cards in parentheses.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "D-2" face-up, "(C9)" face-down).
    """
    code = format_card_data(card.data)
    return code if card.face_up else f"({code})"


def format_hand(hand: Hand) -> str:
    """Format a hand to comma-separated string in slot order.

    Args:
        hand: Hand to format.

    Returns:
        Comma-separated card strings; "-" marks an empty slot.
    """
    return ",".join(format_card(c) if c else "-" for c in hand)


def format_hands(hands: list[Hand]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        hands: List of hands indexed by player_id.

    Returns:
        Dict mapping player_id (as string) to formatted hand string.
    """
    return {str(i): format_hand(h) for i, h in enumerate(hands)}
