"""
Domain entities: the cosmetic records kept per connected player.
"""

from .cosmetics import (
    DEFAULT_KNIFE,
    AgentModels,
    CosmeticRecord,
    GloveRecord,
    KnifeRecord,
    MusicRecord,
    WeaponFinish,
    WeaponSkinRecord,
    copy_record,
)

__all__ = [
    "DEFAULT_KNIFE",
    "AgentModels",
    "CosmeticRecord",
    "GloveRecord",
    "KnifeRecord",
    "MusicRecord",
    "WeaponFinish",
    "WeaponSkinRecord",
    "copy_record",
]
