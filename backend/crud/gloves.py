"""
CRUD operations for the glove selection table (wp_player_gloves).
"""

import logging

from domain.entities.cosmetics import GloveRecord
from infrastructure.database import StoreGateway
from infrastructure.database.models import PlayerGloves
from sqlalchemy import select

from .helpers import build_upsert, int_or_default

logger = logging.getLogger("GloveCRUD")


async def load_gloves(gateway: StoreGateway, identity: str) -> GloveRecord:
    """
    Load the glove definition index chosen for each team.

    Returns:
        team -> glove definition index (empty when the player has no rows)
    """
    if not identity:
        return {}

    rows = await gateway.fetch_all(
        select(PlayerGloves.weapon_team, PlayerGloves.weapon_defindex)
        .where(PlayerGloves.steamid == identity)
        .order_by(PlayerGloves.weapon_team),
        operation="load gloves",
    )

    gloves: GloveRecord = {}
    for row in rows:
        gloves[int_or_default(row.weapon_team)] = int_or_default(row.weapon_defindex)
    return gloves


async def save_glove(gateway: StoreGateway, identity: str, defindex: int, team: int) -> int:
    """Upsert the glove for one (identity, team)."""
    stmt = build_upsert(
        gateway.dialect_name,
        PlayerGloves,
        {"steamid": identity, "weapon_team": int(team), "weapon_defindex": int(defindex)},
        key_columns=("steamid", "weapon_team"),
    )
    rows = await gateway.execute(stmt, operation="save glove")
    logger.debug(f"Saved glove {defindex} (team {int(team)})")
    return rows
