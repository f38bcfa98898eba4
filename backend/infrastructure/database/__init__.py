"""
Database infrastructure package.

Re-exports commonly used database components for convenient imports.
"""

from .connection import (
    Base,
    SerializedWrite,
    StoreGateway,
    build_engine,
    get_database_type,
    retry_on_db_lock,
)
from .models import PlayerAgents, PlayerGloves, PlayerKnife, PlayerMusic, PlayerSkins

__all__ = [
    # Connection
    "Base",
    "SerializedWrite",
    "StoreGateway",
    "build_engine",
    "get_database_type",
    "retry_on_db_lock",
    # Models
    "PlayerAgents",
    "PlayerGloves",
    "PlayerKnife",
    "PlayerMusic",
    "PlayerSkins",
]
