"""
Cosmetic record types held in the session cache.

Knife, glove and music selections are plain team-keyed dicts. Agent models and
weapon finishes are frozen dataclasses; a shallow copy of a record is enough
to detach it from the cache.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

# Sentinel knife item used when a stored row carries no knife name
DEFAULT_KNIFE = "weapon_knife"

KnifeRecord = Dict[int, str]  # team -> knife item name
GloveRecord = Dict[int, int]  # team -> glove item definition index
MusicRecord = Dict[int, int]  # team -> music kit index


@dataclass(frozen=True)
class AgentModels:
    """Agent model selection; one per identity, no team split."""

    ct: Optional[str] = None
    t: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.ct and not self.t


@dataclass(frozen=True)
class WeaponFinish:
    """Paint kit parameters applied to one weapon definition."""

    paint: int = 0
    wear: float = 0.0
    seed: int = 0
    team: int = 0

    @property
    def wear_in_range(self) -> bool:
        return 0.0 <= self.wear <= 1.0


WeaponSkinRecord = Dict[int, WeaponFinish]  # weapon def index -> finish

CosmeticRecord = Union[KnifeRecord, GloveRecord, MusicRecord, AgentModels, WeaponSkinRecord]


def copy_record(record: CosmeticRecord) -> CosmeticRecord:
    """Shallow-copy a record so cached state cannot be mutated from outside the cache."""
    if isinstance(record, dict):
        return dict(record)
    return record
