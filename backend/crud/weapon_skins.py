"""
CRUD operations for the weapon finish table (wp_player_skins).

Each (identity, weapon_defindex, weapon_team) row is written with one atomic
upsert, so concurrent saves for the same weapon converge on a single row.
"""

import logging
from typing import Mapping, Optional

from domain.entities.cosmetics import WeaponFinish, WeaponSkinRecord
from infrastructure.database import StoreGateway
from infrastructure.database.models import PlayerSkins
from sqlalchemy import select

from .helpers import build_upsert, float_or_default, int_or_default

logger = logging.getLogger("WeaponSkinCRUD")

SKIN_KEY_COLUMNS = ("steamid", "weapon_defindex", "weapon_team")


async def load_weapon_skins(gateway: StoreGateway, identity: str) -> WeaponSkinRecord:
    """
    Load every weapon finish for an identity.

    Rows are ordered by (weapon_defindex, weapon_team) and folded by weapon, so
    when one weapon has rows for several teams the highest team number wins.

    Returns:
        weapon definition index -> WeaponFinish
    """
    if not identity:
        return {}

    rows = await gateway.fetch_all(
        select(
            PlayerSkins.weapon_defindex,
            PlayerSkins.weapon_paint_id,
            PlayerSkins.weapon_wear,
            PlayerSkins.weapon_seed,
            PlayerSkins.weapon_team,
        )
        .where(PlayerSkins.steamid == identity)
        .order_by(PlayerSkins.weapon_defindex, PlayerSkins.weapon_team),
        operation="load weapon skins",
    )

    skins: WeaponSkinRecord = {}
    for row in rows:
        skins[int_or_default(row.weapon_defindex)] = WeaponFinish(
            paint=int_or_default(row.weapon_paint_id),
            wear=float_or_default(row.weapon_wear),
            seed=int_or_default(row.weapon_seed),
            team=int_or_default(row.weapon_team),
        )
    return skins


def _skin_upsert(dialect_name: str, identity: str, defindex: int, finish: WeaponFinish, team: int):
    return build_upsert(
        dialect_name,
        PlayerSkins,
        {
            "steamid": identity,
            "weapon_defindex": int(defindex),
            "weapon_team": int(team),
            "weapon_paint_id": int(finish.paint),
            "weapon_wear": float(finish.wear),
            "weapon_seed": int(finish.seed),
        },
        key_columns=SKIN_KEY_COLUMNS,
    )


async def save_weapon_skin(
    gateway: StoreGateway,
    identity: str,
    defindex: int,
    finish: WeaponFinish,
    team: Optional[int] = None,
) -> int:
    """Upsert one weapon finish; team defaults to the finish's own team."""
    stmt = _skin_upsert(gateway.dialect_name, identity, defindex, finish, finish.team if team is None else team)
    return await gateway.execute(stmt, operation="save weapon skin")


async def save_weapon_skins(
    gateway: StoreGateway,
    identity: str,
    skins: Mapping[int, WeaponFinish],
    team: Optional[int] = None,
) -> int:
    """
    Upsert a batch of weapon finishes in one transaction.

    Args:
        gateway: Store gateway
        identity: Player identity
        skins: weapon definition index -> finish
        team: If given, every finish is stored under this team; otherwise each
            finish keeps its own team

    Returns:
        Number of rows reported as affected
    """
    statements = [
        _skin_upsert(gateway.dialect_name, identity, defindex, finish, finish.team if team is None else team)
        for defindex, finish in sorted(skins.items())
    ]
    rows = await gateway.execute_many(statements, operation="save weapon skins")
    logger.debug(f"Saved {len(statements)} weapon finish(es)")
    return rows
