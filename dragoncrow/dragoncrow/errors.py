"""Exception types."""


class DragonCrowError(Exception):
    """Base class for game errors."""


class ConfigError(DragonCrowError):
    """Configuration cannot produce a playable deck."""


class InvariantViolation(DragonCrowError):
    """Internal game state is inconsistent (e.g. a card is not where it should be)."""
