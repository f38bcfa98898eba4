"""
Domain enums for type-safe constants.
"""

from enum import Enum, IntEnum


class Team(IntEnum):
    """In-game team discriminator used to keep per-team cosmetic variants apart."""

    NONE = 0
    TERRORIST = 2
    COUNTER_TERRORIST = 3


class CosmeticCategory(str, Enum):
    """The five cosmetic attribute kinds kept in sync with the store."""

    KNIFE = "knife"
    GLOVE = "glove"
    AGENT = "agent"
    MUSIC = "music"
    WEAPON_SKIN = "weapon_skin"

    def __str__(self) -> str:
        return self.value


class LoadStatus(str, Enum):
    """Outcome of loading one category for one player."""

    LOADED = "loaded"
    EMPTY = "empty"  # No identity or nothing stored; cache untouched
    STALE = "stale"  # Slot was reassigned before the load finished
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class SaveStatus(str, Enum):
    """Outcome of a persist operation."""

    SAVED = "saved"
    SKIPPED = "skipped"  # Disabled category, empty identity or nothing cached
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value
