"""Card models."""

from enum import Enum

from pydantic import BaseModel


class CardKind(str, Enum):
    """Card family."""

    DRAGON = "dragon"
    CROW = "crow"


class Zone(str, Enum):
    """Where a card currently lives."""

    DECK = "deck"
    HAND = "hand"
    REVEAL = "reveal"  # Staging slot for the card being decided on
    DISCARD = "discard"


class CardData(BaseModel, frozen=True):
    """Immutable card identity."""

    kind: CardKind
    value: int
    name: str
    asset: str | None = None  # Front image binding, opaque to the core

    @property
    def is_crow(self) -> bool:
        """Check if this is a crow card."""
        return self.kind == CardKind.CROW

    @property
    def description(self) -> str:
        if self.kind == CardKind.DRAGON:
            return f"Dragon card with value {self.value}"
        return f"Crow card with special ability {self.value}"

    def __str__(self) -> str:
        return f"{self.name}({self.value})"

    def __repr__(self) -> str:
        return str(self)


class Card(BaseModel):
    """A dealt card: identity plus table state.

    Cards are created when drawn from the deck and then move between zones
    until the game ends. Exactly one zone holds a card at any time.
    """

    card_id: int
    data: CardData
    face_up: bool = False
    interactable: bool = False
    owner: int | None = None  # Player index while in a hand
    zone: Zone = Zone.DECK
    slot: int | None = None  # Hand slot or discard pile index

    @property
    def value(self) -> int:
        return self.data.value

    def set_face_up(self) -> bool:
        """Turn the card face-up.

        Returns:
            True if the card was flipped, False if it already was face-up.
        """
        if self.face_up:
            return False
        self.face_up = True
        return True

    def set_face_down(self) -> bool:
        """Turn the card face-down.

        Returns:
            True if the card was flipped, False if it already was face-down.
        """
        if not self.face_up:
            return False
        self.face_up = False
        return True

    def move_to(self, zone: Zone, slot: int | None = None, owner: int | None = None) -> None:
        """Record the card's new location."""
        self.zone = zone
        self.slot = slot
        self.owner = owner

    def __str__(self) -> str:
        if not self.face_up:
            return "[??]"
        return f"[{self.data.value}]"

    def __repr__(self) -> str:
        return (
            f"Card(id={self.card_id}, data={self.data!r}, "
            f"face_up={self.face_up}, zone={self.zone.value})"
        )
