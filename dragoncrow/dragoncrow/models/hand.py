"""Hand model and column scoring."""

from typing import Iterator

from dragoncrow.errors import InvariantViolation

from .card import Card

HAND_SIZE = 6
NUM_COLUMNS = 2


def has_pair(values: list[int]) -> bool:
    """Check if any two values are equal (three of a kind counts too)."""
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] == values[j]:
                return True
    return False


def column_score(values: list[int]) -> int:
    """Score one column: a pair cancels the column, otherwise sum the values."""
    if has_pair(values):
        return 0
    return sum(values)


class Hand:
    """A player's cards laid out as ordered slots.

    Slots are split into two columns of equal height: with six slots the
    left column is {0, 1, 2} and the right column is {3, 4, 5}. Slot order
    never changes; a swapped-in card takes the slot it replaced.
    """

    def __init__(self, size: int = HAND_SIZE):
        """Initialize an empty hand.

        Args:
            size: Number of slots (must split evenly into two columns)
        """
        if size <= 0 or size % NUM_COLUMNS:
            raise ValueError(f"Hand size must be a positive multiple of {NUM_COLUMNS}")
        self.size = size
        self._slots: list[Card | None] = [None] * size

    @property
    def column_height(self) -> int:
        return self.size // NUM_COLUMNS

    def columns(self) -> list[list[int]]:
        """Get slot indices grouped by column."""
        h = self.column_height
        return [list(range(c * h, (c + 1) * h)) for c in range(NUM_COLUMNS)]

    def deal_card(self, slot: int, card: Card, face_up: bool = False) -> None:
        """Place a card into an empty slot.

        Args:
            slot: Slot index
            card: Card to place
            face_up: Deal face-up instead of face-down
        """
        self._check_slot(slot)
        if self._slots[slot] is not None:
            raise InvariantViolation(f"Slot {slot} is already occupied")
        if face_up:
            card.set_face_up()
        else:
            card.set_face_down()
        self._slots[slot] = card

    def swap(self, slot: int, card: Card) -> Card:
        """Replace the card in a slot.

        Returns:
            The card previously held in the slot.
        """
        self._check_slot(slot)
        old = self._slots[slot]
        if old is None:
            raise InvariantViolation(f"Slot {slot} is empty")
        self._slots[slot] = card
        return old

    def get(self, slot: int) -> Card | None:
        self._check_slot(slot)
        return self._slots[slot]

    def index_of(self, card: Card) -> int:
        """Find the slot holding a card.

        Raises:
            InvariantViolation: If the card is not in this hand.
        """
        for i, c in enumerate(self._slots):
            if c is card:
                return i
        raise InvariantViolation(f"Card {card!r} not found in hand")

    def reveal_all(self) -> list[Card]:
        """Turn every face-down card face-up.

        Returns:
            Cards that were flipped.
        """
        return [c for c in self.cards() if c.set_face_up()]

    def all_face_up(self) -> bool:
        """Check if every slot holds a face-up card."""
        return all(c is not None and c.face_up for c in self._slots)

    def calculate_score(self) -> int:
        """Calculate the score over face-up cards.

        Each column is scored independently: equal values anywhere in a
        column cancel it to zero, otherwise it adds its values.
        """
        score = 0
        for column in self.columns():
            values = [
                card.value
                for card in (self._slots[i] for i in column)
                if card is not None and card.face_up
            ]
            score += column_score(values)
        return score

    def cards(self) -> list[Card]:
        """Get the dealt cards in slot order."""
        return [c for c in self._slots if c is not None]

    def clear(self) -> None:
        self._slots = [None] * self.size

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.size:
            raise IndexError(f"Slot {slot} out of range 0..{self.size - 1}")

    def __iter__(self) -> Iterator[Card | None]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self.cards())

    def __str__(self) -> str:
        rows = []
        h = self.column_height
        for r in range(h):
            row = [self._slots[c * h + r] for c in range(NUM_COLUMNS)]
            rows.append(" ".join(str(c) if c else "[  ]" for c in row))
        return " / ".join(rows)
