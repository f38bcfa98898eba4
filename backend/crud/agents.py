"""
CRUD operations for the agent model table (wp_player_agents).

One row per identity; there is no team split.
"""

import logging
from typing import Optional

from domain.entities.cosmetics import AgentModels
from infrastructure.database import StoreGateway
from infrastructure.database.models import PlayerAgents
from sqlalchemy import select

from .helpers import build_upsert, str_or_default

logger = logging.getLogger("AgentCRUD")


async def load_agents(gateway: StoreGateway, identity: str) -> Optional[AgentModels]:
    """
    Load the agent models for an identity.

    Returns:
        AgentModels, or None when there is no row or both sides are empty
    """
    if not identity:
        return None

    rows = await gateway.fetch_all(
        select(PlayerAgents.agent_ct, PlayerAgents.agent_t).where(PlayerAgents.steamid == identity).limit(1),
        operation="load agents",
    )
    if not rows:
        return None

    agents = AgentModels(ct=str_or_default(rows[0].agent_ct), t=str_or_default(rows[0].agent_t))
    return None if agents.is_empty else agents


async def save_agents(gateway: StoreGateway, identity: str, agents: AgentModels) -> int:
    """Upsert both agent models for an identity."""
    stmt = build_upsert(
        gateway.dialect_name,
        PlayerAgents,
        {"steamid": identity, "agent_ct": agents.ct, "agent_t": agents.t},
        key_columns=("steamid",),
    )
    return await gateway.execute(stmt, operation="save agents")
