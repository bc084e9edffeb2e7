"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class DragonType(BaseModel):
    """One dragon card type (value and display name)."""

    value: int
    display_name: str


class CrowType(BaseModel):
    """One crow card type (name and fixed value)."""

    name: str
    value: int


DEFAULT_DRAGONS = [
    DragonType(value=-2, display_name="Ancient Dragon"),
    DragonType(value=0, display_name="Dragonling"),
    DragonType(value=1, display_name="Fire Drake"),
    DragonType(value=2, display_name="Frost Wyrm"),
    DragonType(value=3, display_name="Volcanic Dragon"),
    DragonType(value=4, display_name="Thunder Drake"),
    DragonType(value=5, display_name="Shadow Dragon"),
    DragonType(value=6, display_name="Golden Wyvern"),
    DragonType(value=7, display_name="Emerald Serpent"),
    DragonType(value=8, display_name="Celestial Dragon"),
]

# Crow values sit above the dragon range so they never tie with a dragon
DEFAULT_CROWS = [
    CrowType(name="Scout Crow", value=9),
    CrowType(name="Thief Crow", value=10),
    CrowType(name="Mirror Crow", value=11),
]


class GameConfig(BaseModel):
    """Game configuration."""

    num_players: int = Field(default=4, ge=1)
    cards_per_player: int = Field(default=6, ge=2)
    num_discard_piles: int = Field(default=2, ge=1)
    deal_face_down: bool = True
    # Seconds between dealt cards (presentation only)
    deal_delay: float = Field(default=0.0, ge=0.0)
    seed: int | None = None

    @field_validator("cards_per_player")
    @classmethod
    def _even_hand(cls, value: int) -> int:
        # Hands are laid out in two columns of equal height
        if value % 2:
            raise ValueError(f"cards_per_player must be even, got {value}")
        return value


class DeckConfig(BaseModel):
    """Deck composition."""

    dragons: list[DragonType] = Field(default_factory=lambda: list(DEFAULT_DRAGONS))
    crows: list[CrowType] = Field(default_factory=lambda: list(DEFAULT_CROWS))
    copies_per_type: int = Field(default=4, ge=1)

    # Asset bindings, one per card type in table order
    dragon_assets: list[str] = Field(
        default_factory=lambda: [f"dragon_{d.value}.png" for d in DEFAULT_DRAGONS]
    )
    crow_assets: list[str] = Field(
        default_factory=lambda: [
            f"crow_{c.name.lower().replace(' ', '_')}.png" for c in DEFAULT_CROWS
        ]
    )

    @property
    def total_cards(self) -> int:
        """Number of cards a full deck holds."""
        return (len(self.dragons) + len(self.crows)) * self.copies_per_type


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogSettings(BaseModel):
    """Game log (JSONL) configuration."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    deck: DeckConfig = DeckConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
