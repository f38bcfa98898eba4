"""
Attribute repositories, one per cosmetic category.

Each repository pairs the category's CRUD module with the session cache and
applies the error policy:
- load() never raises for store failures; it logs them and leaves the cache
  untouched, so one broken category cannot stop the others from loading.
- save() never raises for store failures either, but reports them through a
  SaveResult so callers can retry or tell the player.

Every operation works on the PlayerContext captured by the caller and never
looks the identity up again from the slot.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

import crud
from domain.entities.cosmetics import AgentModels, CosmeticRecord, WeaponFinish
from domain.exceptions import CosmeticSyncError, InvalidIdentityError
from domain.value_objects.enums import CosmeticCategory, LoadStatus
from domain.value_objects.player import PlayerContext
from domain.value_objects.results import SaveResult
from infrastructure.cache import PlayerCosmeticCache
from infrastructure.database import StoreGateway

logger = logging.getLogger("CosmeticRepository")


class CosmeticRepository:
    """Base class: load into the cache, persist with a result."""

    category: CosmeticCategory

    def __init__(self, gateway: StoreGateway, cache: PlayerCosmeticCache):
        self.gateway = gateway
        self.cache = cache

    async def fetch(self, identity: str) -> Optional[CosmeticRecord]:
        """Read the stored record; None means there is nothing to cache."""
        raise NotImplementedError

    async def load(self, player: PlayerContext) -> LoadStatus:
        """
        Load the stored record for player.identity into the cache slot.

        Returns:
            LoadStatus describing what happened to the cache
        """
        try:
            identity = player.require_identity()
        except InvalidIdentityError:
            return LoadStatus.EMPTY

        try:
            record = await self.fetch(identity)
        except CosmeticSyncError as e:
            logger.error(f"❌ Loading {self.category} for slot {player.slot} failed: {e}")
            return LoadStatus.FAILED

        if record is None:
            return LoadStatus.EMPTY
        if not self.cache.set_for(player, self.category, record):
            return LoadStatus.STALE
        return LoadStatus.LOADED

    async def _persist(self, player: PlayerContext, write: Callable[[str], Awaitable[int]]) -> SaveResult:
        try:
            identity = player.require_identity()
        except InvalidIdentityError:
            return SaveResult.skipped(self.category, "no identity")

        try:
            rows = await write(identity)
        except CosmeticSyncError as e:
            logger.error(f"❌ Saving {self.category} for slot {player.slot} failed: {e}")
            return SaveResult.failed(self.category, e)

        return SaveResult.saved(self.category, rows)


class KnifeRepository(CosmeticRepository):
    category = CosmeticCategory.KNIFE

    async def fetch(self, identity: str):
        return await crud.load_knives(self.gateway, identity)

    async def save(self, player: PlayerContext, knife: str, team: int) -> SaveResult:
        if not knife:
            return SaveResult.skipped(self.category, "no knife given")
        return await self._persist(player, lambda identity: crud.save_knife(self.gateway, identity, knife, team))


class GloveRepository(CosmeticRepository):
    category = CosmeticCategory.GLOVE

    async def fetch(self, identity: str):
        return await crud.load_gloves(self.gateway, identity)

    async def save(self, player: PlayerContext, defindex: int, team: int) -> SaveResult:
        return await self._persist(player, lambda identity: crud.save_glove(self.gateway, identity, defindex, team))


class AgentRepository(CosmeticRepository):
    category = CosmeticCategory.AGENT

    async def fetch(self, identity: str):
        return await crud.load_agents(self.gateway, identity)

    async def save(self, player: PlayerContext) -> SaveResult:
        """Persist the agent models currently cached for the player's slot."""
        if not player.has_identity:
            return SaveResult.skipped(self.category, "no identity")

        # Snapshot before the first suspension point
        agents = self.cache.snapshot_for(player, self.category)
        if not isinstance(agents, AgentModels):
            return SaveResult.skipped(self.category, "nothing cached")

        return await self._persist(player, lambda identity: crud.save_agents(self.gateway, identity, agents))


class MusicRepository(CosmeticRepository):
    category = CosmeticCategory.MUSIC

    async def fetch(self, identity: str):
        return await crud.load_music(self.gateway, identity)

    async def save(self, player: PlayerContext, music_id: int, team: int = 0) -> SaveResult:
        return await self._persist(player, lambda identity: crud.save_music(self.gateway, identity, music_id, team))


class WeaponSkinRepository(CosmeticRepository):
    category = CosmeticCategory.WEAPON_SKIN

    async def fetch(self, identity: str):
        return await crud.load_weapon_skins(self.gateway, identity)

    async def save(self, player: PlayerContext, team: Optional[int] = None) -> SaveResult:
        """
        Persist every weapon finish cached for the player's slot.

        Args:
            player: Captured player context
            team: Store every finish under this team; None keeps each finish's own team
        """
        if not player.has_identity:
            return SaveResult.skipped(self.category, "no identity")

        skins = self.cache.snapshot_for(player, self.category)
        if not skins:
            return SaveResult.skipped(self.category, "nothing cached")

        for defindex, finish in skins.items():
            if isinstance(finish, WeaponFinish) and not finish.wear_in_range:
                # Range is owned by the caller; stored unchanged
                logger.warning(f"Weapon {defindex} wear {finish.wear} is outside [0, 1] (slot {player.slot})")

        return await self._persist(
            player, lambda identity: crud.save_weapon_skins(self.gateway, identity, skins, team=team)
        )


REPOSITORY_TYPES: dict[CosmeticCategory, Any] = {
    CosmeticCategory.KNIFE: KnifeRepository,
    CosmeticCategory.GLOVE: GloveRepository,
    CosmeticCategory.AGENT: AgentRepository,
    CosmeticCategory.MUSIC: MusicRepository,
    CosmeticCategory.WEAPON_SKIN: WeaponSkinRepository,
}


def build_repositories(gateway: StoreGateway, cache: PlayerCosmeticCache) -> dict[CosmeticCategory, CosmeticRepository]:
    """Create one repository per category sharing the same gateway and cache."""
    return {category: repo_type(gateway, cache) for category, repo_type in REPOSITORY_TYPES.items()}
