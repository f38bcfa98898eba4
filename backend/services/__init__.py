"""
Services layer.

This package contains the per-category repositories and the facade that
coordinate the session cache with the relational store.
"""

from .cosmetic_repositories import (
    AgentRepository,
    CosmeticRepository,
    GloveRepository,
    KnifeRepository,
    MusicRepository,
    WeaponSkinRepository,
    build_repositories,
)
from .facades import CosmeticsFacade

__all__ = [
    "AgentRepository",
    "CosmeticRepository",
    "CosmeticsFacade",
    "GloveRepository",
    "KnifeRepository",
    "MusicRepository",
    "WeaponSkinRepository",
    "build_repositories",
]
