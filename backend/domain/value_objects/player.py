"""
Immutable player and configuration value objects.

A PlayerContext is captured when a connect or equip event fires and travels
with every asynchronous operation started for it, so a slot that gets reused
mid-flight never leaks one player's data onto another.
"""

from dataclasses import dataclass
from typing import Optional

from domain.exceptions import InvalidIdentityError
from domain.value_objects.enums import CosmeticCategory


@dataclass(frozen=True)
class PlayerContext:
    """(slot, identity) pair of a connected player."""

    slot: int
    identity: Optional[str]

    def __post_init__(self):
        if self.slot < 0:
            raise ValueError(f"slot must be non-negative, got {self.slot}")

    @property
    def has_identity(self) -> bool:
        return bool(self.identity and self.identity.strip())

    def require_identity(self) -> str:
        """
        Return the identity or raise when it is missing.

        Raises:
            InvalidIdentityError: If the identity is None, empty or blank
        """
        if not self.has_identity:
            raise InvalidIdentityError(self.identity)
        return self.identity


@dataclass(frozen=True)
class FeatureFlags:
    """Per-category toggles; a disabled category is neither loaded nor saved."""

    knife_enabled: bool = True
    glove_enabled: bool = True
    agent_enabled: bool = True
    music_enabled: bool = True
    skin_enabled: bool = True

    def is_enabled(self, category: CosmeticCategory) -> bool:
        return {
            CosmeticCategory.KNIFE: self.knife_enabled,
            CosmeticCategory.GLOVE: self.glove_enabled,
            CosmeticCategory.AGENT: self.agent_enabled,
            CosmeticCategory.MUSIC: self.music_enabled,
            CosmeticCategory.WEAPON_SKIN: self.skin_enabled,
        }[CosmeticCategory(category)]

    def enabled_categories(self) -> list[CosmeticCategory]:
        return [category for category in CosmeticCategory if self.is_enabled(category)]
