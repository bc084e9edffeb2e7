"""Deck model."""

import logging
import random
from typing import Iterator

from dragoncrow.config import DeckConfig
from dragoncrow.errors import ConfigError

from .card import CardData, CardKind

logger = logging.getLogger(__name__)


class Deck:
    """Ordered draw pile of card identities.

    Cards are drawn from the front. A cursor marks the next undrawn card so
    every card is handed out exactly once.
    """

    def __init__(self, cards: list[CardData] | None = None):
        """Initialize deck.

        Args:
            cards: Cards in draw order (first element is drawn first).
        """
        self._cards: list[CardData] = list(cards) if cards else []
        self._cursor = 0

    @classmethod
    def from_config(cls, config: DeckConfig) -> "Deck":
        """Create an unshuffled deck from configuration."""
        deck = cls()
        deck.initialize(config)
        return deck

    def initialize(self, config: DeckConfig) -> None:
        """Build the full card set.

        Args:
            config: Deck composition.

        Raises:
            ConfigError: If asset bindings are missing for some card type,
                or a crow value collides with a dragon value.
        """
        if len(config.dragon_assets) < len(config.dragons):
            raise ConfigError(
                f"Need {len(config.dragons)} dragon assets, got {len(config.dragon_assets)}"
            )
        if len(config.crow_assets) < len(config.crows):
            raise ConfigError(
                f"Need {len(config.crows)} crow assets, got {len(config.crow_assets)}"
            )

        dragon_values = {d.value for d in config.dragons}
        clashes = sorted(c.value for c in config.crows if c.value in dragon_values)
        if clashes:
            raise ConfigError(f"Crow values overlap dragon values: {clashes}")

        cards: list[CardData] = []
        for i, dragon in enumerate(config.dragons):
            data = CardData(
                kind=CardKind.DRAGON,
                value=dragon.value,
                name=dragon.display_name,
                asset=config.dragon_assets[i],
            )
            cards.extend([data] * config.copies_per_type)

        for i, crow in enumerate(config.crows):
            data = CardData(
                kind=CardKind.CROW,
                value=crow.value,
                name=crow.name,
                asset=config.crow_assets[i],
            )
            cards.extend([data] * config.copies_per_type)

        self._cards = cards
        self._cursor = 0
        logger.debug(f"Deck initialized with {len(cards)} cards")

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the undrawn cards (Fisher-Yates) and reset the cursor."""
        rng = rng or random.Random()
        cards = self._cards[self._cursor:]
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        self._cards = cards
        self._cursor = 0

    def draw(self) -> CardData | None:
        """Draw the next card.

        Returns:
            The next card, or None if the deck is exhausted.
        """
        if self._cursor >= len(self._cards):
            logger.warning("Deck is empty!")
            return None
        data = self._cards[self._cursor]
        self._cursor += 1
        return data

    def remaining(self) -> int:
        """Get number of undrawn cards."""
        return len(self._cards) - self._cursor

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def __iter__(self) -> Iterator[CardData]:
        return iter(self._cards[self._cursor:])

    def __len__(self) -> int:
        return self.remaining()

    def __str__(self) -> str:
        return f"Deck({self.remaining()} remaining)"
