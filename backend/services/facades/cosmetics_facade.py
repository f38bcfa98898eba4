"""
Cosmetics facade - the synchronization entry point used by event handlers.

This facade owns the cache <-> store boundary for cosmetic loadouts:
- The cache is authoritative for the live session
- The store is authoritative across sessions

Connect handlers call load_all(); equip handlers update the cache and then
call the matching save_*() method.
"""

import asyncio
import logging
from typing import Optional

from domain.value_objects.enums import CosmeticCategory, LoadStatus, Team
from domain.value_objects.player import FeatureFlags, PlayerContext
from domain.value_objects.results import LoadReport, SaveResult
from infrastructure.cache import PlayerCosmeticCache
from infrastructure.database import StoreGateway

from services.cosmetic_repositories import (
    AgentRepository,
    CosmeticRepository,
    GloveRepository,
    KnifeRepository,
    MusicRepository,
    WeaponSkinRepository,
    build_repositories,
)

logger = logging.getLogger("CosmeticsFacade")


class CosmeticsFacade:
    """
    Load and persist cosmetic loadouts for connected players.

    Usage:
        facade = CosmeticsFacade(gateway, cache, settings.feature_flags())
        player = PlayerContext(slot=3, identity="76561198000000001")

        await facade.load_all(player)
        cache.merge(CosmeticCategory.GLOVE, player.slot, {Team.COUNTER_TERRORIST: 5027})
        result = await facade.save_glove(player, 5027, Team.COUNTER_TERRORIST)
    """

    def __init__(
        self,
        gateway: StoreGateway,
        cache: PlayerCosmeticCache,
        flags: Optional[FeatureFlags] = None,
    ):
        """
        Initialize the facade.

        Args:
            gateway: Store gateway shared by every repository
            cache: Session cache shared with the event handlers
            flags: Per-category toggles (all enabled when omitted)
        """
        self.gateway = gateway
        self.cache = cache
        self.flags = flags or FeatureFlags()
        self.repositories = build_repositories(gateway, cache)

    def _repository(self, category: CosmeticCategory) -> CosmeticRepository:
        return self.repositories[CosmeticCategory(category)]

    # =========================================================================
    # Load (store -> cache)
    # =========================================================================

    async def load_all(self, player: PlayerContext) -> LoadReport:
        """
        Load every enabled category for a newly connected player.

        Categories load concurrently and fail independently; a failed category
        leaves its cache entry untouched.

        Returns:
            LoadReport listing loaded, skipped and failed categories
        """
        report = LoadReport()
        if not player.has_identity:
            logger.debug(f"Slot {player.slot} has no identity, nothing to load")
            report.skipped.extend(CosmeticCategory)
            return report

        self.cache.bind(player)

        categories = self.flags.enabled_categories()
        report.skipped.extend(c for c in CosmeticCategory if c not in categories)

        results = await asyncio.gather(
            *[self._repository(category).load(player) for category in categories],
            return_exceptions=True,
        )

        for category, res in zip(categories, results):
            if isinstance(res, Exception):
                # Repositories only swallow store errors; anything else is a bug worth seeing
                logger.exception(f"💥 Unexpected error loading {category} for slot {player.slot}", exc_info=res)
                report.record(category, LoadStatus.FAILED)
            else:
                report.record(category, res)

        logger.info(
            f"Loaded slot {player.slot}: {len(report.loaded)} loaded, "
            f"{len(report.skipped)} skipped, {len(report.failed)} failed"
        )
        return report

    # =========================================================================
    # Save (cache -> store)
    # =========================================================================

    def _disabled(self, category: CosmeticCategory) -> Optional[SaveResult]:
        if not self.flags.is_enabled(category):
            return SaveResult.skipped(category, "category disabled")
        return None

    async def save_knife(self, player: PlayerContext, knife: str, team: int) -> SaveResult:
        """Persist the knife chosen for one team."""
        repository: KnifeRepository = self._repository(CosmeticCategory.KNIFE)
        return self._disabled(CosmeticCategory.KNIFE) or await repository.save(player, knife, team)

    async def save_glove(self, player: PlayerContext, defindex: int, team: int) -> SaveResult:
        """Persist the glove definition index chosen for one team."""
        repository: GloveRepository = self._repository(CosmeticCategory.GLOVE)
        return self._disabled(CosmeticCategory.GLOVE) or await repository.save(player, defindex, team)

    async def save_agent(self, player: PlayerContext) -> SaveResult:
        """Persist the CT/T agent models currently cached for the slot."""
        repository: AgentRepository = self._repository(CosmeticCategory.AGENT)
        return self._disabled(CosmeticCategory.AGENT) or await repository.save(player)

    async def save_music(self, player: PlayerContext, music_id: int, team: int = Team.NONE) -> SaveResult:
        """Persist the music kit, per team when the caller supplies one."""
        repository: MusicRepository = self._repository(CosmeticCategory.MUSIC)
        return self._disabled(CosmeticCategory.MUSIC) or await repository.save(player, music_id, team)

    async def save_weapon_skins(self, player: PlayerContext, team: Optional[int] = None) -> SaveResult:
        """Persist every weapon finish cached for the slot."""
        repository: WeaponSkinRepository = self._repository(CosmeticCategory.WEAPON_SKIN)
        return self._disabled(CosmeticCategory.WEAPON_SKIN) or await repository.save(player, team=team)

    async def save_one(self, category: CosmeticCategory, player: PlayerContext, **kwargs) -> SaveResult:
        """
        Persist one category, dispatching to the matching save method.

        Args:
            category: Category to persist
            player: Captured player context
            **kwargs: Arguments of the category's save method (knife/team,
                defindex/team, music_id/team, team)
        """
        savers = {
            CosmeticCategory.KNIFE: self.save_knife,
            CosmeticCategory.GLOVE: self.save_glove,
            CosmeticCategory.AGENT: self.save_agent,
            CosmeticCategory.MUSIC: self.save_music,
            CosmeticCategory.WEAPON_SKIN: self.save_weapon_skins,
        }
        return await savers[CosmeticCategory(category)](player, **kwargs)

    # =========================================================================
    # Session end
    # =========================================================================

    def forget(self, player: PlayerContext) -> bool:
        """
        Drop the slot's cached cosmetics on disconnect.

        Does nothing when the slot already belongs to another identity.
        """
        removed = self.cache.remove_for(player)
        if not removed:
            logger.debug(f"Slot {player.slot} already reassigned, keeping its cache entries")
        return removed
