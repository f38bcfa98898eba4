"""
CRUD operations for the music kit table (wp_player_music).
"""

import logging

from domain.entities.cosmetics import MusicRecord
from infrastructure.database import StoreGateway
from infrastructure.database.models import PlayerMusic
from sqlalchemy import select

from .helpers import build_upsert, int_or_default

logger = logging.getLogger("MusicCRUD")


async def load_music(gateway: StoreGateway, identity: str) -> MusicRecord:
    """Load the music kit chosen for each team."""
    if not identity:
        return {}

    rows = await gateway.fetch_all(
        select(PlayerMusic.team, PlayerMusic.music_id)
        .where(PlayerMusic.steamid == identity)
        .order_by(PlayerMusic.team),
        operation="load music",
    )

    kits: MusicRecord = {}
    for row in rows:
        kits[int_or_default(row.team)] = int_or_default(row.music_id)
    return kits


async def save_music(gateway: StoreGateway, identity: str, music_id: int, team: int = 0) -> int:
    """Upsert the music kit for one (identity, team)."""
    stmt = build_upsert(
        gateway.dialect_name,
        PlayerMusic,
        {"steamid": identity, "team": int(team), "music_id": int(music_id)},
        key_columns=("steamid", "team"),
    )
    return await gateway.execute(stmt, operation="save music")
