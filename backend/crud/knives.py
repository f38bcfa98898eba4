"""
CRUD operations for the knife selection table (wp_player_knife).

This module contains pure database operations only; caching and the error
policy live in services/cosmetic_repositories.py.
"""

import logging

from domain.entities.cosmetics import DEFAULT_KNIFE, KnifeRecord
from infrastructure.database import StoreGateway
from infrastructure.database.models import PlayerKnife
from sqlalchemy import select

from .helpers import build_upsert, int_or_default, str_or_default

logger = logging.getLogger("KnifeCRUD")


async def load_knives(gateway: StoreGateway, identity: str) -> KnifeRecord:
    """
    Load the knife chosen for each team.

    Rows are folded in team order; a later row for the same team wins.

    Returns:
        team -> knife item name (empty when the player has no rows)
    """
    if not identity:
        return {}

    rows = await gateway.fetch_all(
        select(PlayerKnife.team, PlayerKnife.knife)
        .where(PlayerKnife.steamid == identity)
        .order_by(PlayerKnife.team),
        operation="load knives",
    )

    knives: KnifeRecord = {}
    for row in rows:
        knives[int_or_default(row.team)] = str_or_default(row.knife, DEFAULT_KNIFE)
    return knives


async def save_knife(gateway: StoreGateway, identity: str, knife: str, team: int) -> int:
    """Upsert the knife for one (identity, team)."""
    stmt = build_upsert(
        gateway.dialect_name,
        PlayerKnife,
        {"steamid": identity, "team": int(team), "knife": knife},
        key_columns=("steamid", "team"),
    )
    rows = await gateway.execute(stmt, operation="save knife")
    logger.debug(f"Saved knife {knife} (team {int(team)})")
    return rows
