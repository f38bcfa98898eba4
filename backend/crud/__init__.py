"""
CRUD operations module.

This module provides database operations organized by cosmetic category.
All CRUD functions are exported at the package level.
"""

# Agent model operations
from .agents import load_agents, save_agents

# Glove operations
from .gloves import load_gloves, save_glove

# Shared helpers
from .helpers import build_upsert

# Knife operations
from .knives import load_knives, save_knife

# Music kit operations
from .music import load_music, save_music

# Weapon finish operations
from .weapon_skins import load_weapon_skins, save_weapon_skin, save_weapon_skins

# Export all functions
__all__ = [
    "build_upsert",
    # Knife operations
    "load_knives",
    "save_knife",
    # Glove operations
    "load_gloves",
    "save_glove",
    # Agent model operations
    "load_agents",
    "save_agents",
    # Music kit operations
    "load_music",
    "save_music",
    # Weapon finish operations
    "load_weapon_skins",
    "save_weapon_skin",
    "save_weapon_skins",
]
