"""
Immutable value objects and enums.
"""

from .enums import CosmeticCategory, LoadStatus, SaveStatus, Team
from .player import FeatureFlags, PlayerContext
from .results import LoadReport, SaveResult

__all__ = [
    "CosmeticCategory",
    "FeatureFlags",
    "LoadReport",
    "LoadStatus",
    "PlayerContext",
    "SaveResult",
    "SaveStatus",
    "Team",
]
