"""
Unit tests for the component factory and lifespan.
"""

from core.app_factory import cosmetics_lifespan, create_cosmetics_facade
from core.settings import Settings
from domain import CosmeticCategory, SaveStatus


def test_facade_uses_settings_flags(gateway, cache):
    settings = Settings(_env_file=None, agent_enabled=False)

    facade = create_cosmetics_facade(settings, gateway=gateway, cache=cache)

    assert facade.gateway is gateway
    assert facade.cache is cache
    assert not facade.flags.is_enabled(CosmeticCategory.AGENT)


async def test_lifespan_creates_schema_and_cleans_up(database_url, player):
    settings = Settings(_env_file=None, database_url=database_url)

    async with cosmetics_lifespan(settings) as facade:
        result = await facade.save_knife(player, "weapon_bayonet", 2)
        assert result.status is SaveStatus.SAVED

        await facade.load_all(player)
        assert facade.cache.get(CosmeticCategory.KNIFE, player.slot) == {2: "weapon_bayonet"}

    assert facade.cache.get_stats()["size"] == 0
