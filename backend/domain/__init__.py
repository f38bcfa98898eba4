"""
Domain layer for the cosmetic synchronization core.

This package contains the dataclasses, enums and exceptions shared by the
store gateway, the repositories, the cache and the facade.

Structure:
- entities/: Cosmetic record types (AgentModels, WeaponFinish, team-keyed maps)
- value_objects/: Immutable types and enums (PlayerContext, FeatureFlags, Team, results)
- exceptions.py: Failure taxonomy
"""

from .entities import (
    DEFAULT_KNIFE,
    AgentModels,
    CosmeticRecord,
    GloveRecord,
    KnifeRecord,
    MusicRecord,
    WeaponFinish,
    WeaponSkinRecord,
)
from .exceptions import (
    ConfigurationError,
    CosmeticSyncError,
    InvalidIdentityError,
    QueryFailureError,
    StoreUnavailableError,
)
from .value_objects import (
    CosmeticCategory,
    FeatureFlags,
    LoadReport,
    LoadStatus,
    PlayerContext,
    SaveResult,
    SaveStatus,
    Team,
)

__all__ = [
    # Entities
    "DEFAULT_KNIFE",
    "AgentModels",
    "CosmeticRecord",
    "GloveRecord",
    "KnifeRecord",
    "MusicRecord",
    "WeaponFinish",
    "WeaponSkinRecord",
    # Exceptions
    "ConfigurationError",
    "CosmeticSyncError",
    "InvalidIdentityError",
    "QueryFailureError",
    "StoreUnavailableError",
    # Value objects
    "CosmeticCategory",
    "FeatureFlags",
    "LoadReport",
    "LoadStatus",
    "PlayerContext",
    "SaveResult",
    "SaveStatus",
    "Team",
]
