"""
Integration tests for a full player session.

Walks connect -> equip -> save -> disconnect -> reconnect through the lifespan
wiring, with several players connecting at once.
"""

import asyncio

import pytest
from core.app_factory import cosmetics_lifespan
from core.settings import Settings
from domain import AgentModels, CosmeticCategory, PlayerContext, SaveStatus, Team, WeaponFinish


@pytest.fixture
def settings(database_url) -> Settings:
    return Settings(_env_file=None, database_url=database_url)


async def equip_everything(facade, player: PlayerContext, offset: int) -> None:
    cache = facade.cache
    cache.merge(CosmeticCategory.KNIFE, player.slot, {Team.TERRORIST: "weapon_knife_butterfly"})
    cache.merge(CosmeticCategory.GLOVE, player.slot, {Team.COUNTER_TERRORIST: 5027 + offset})
    cache.merge(CosmeticCategory.MUSIC, player.slot, {Team.NONE: 30 + offset})
    cache.set(CosmeticCategory.AGENT, player.slot, AgentModels(ct="ctm_sas", t=None))
    cache.merge(
        CosmeticCategory.WEAPON_SKIN,
        player.slot,
        {
            7: WeaponFinish(paint=12 + offset, wear=0.15, seed=3, team=Team.TERRORIST),
            9: WeaponFinish(paint=344, wear=0.01, seed=0, team=Team.COUNTER_TERRORIST),
        },
    )

    results = await asyncio.gather(
        facade.save_knife(player, "weapon_knife_butterfly", Team.TERRORIST),
        facade.save_glove(player, 5027 + offset, Team.COUNTER_TERRORIST),
        facade.save_music(player, 30 + offset),
        facade.save_agent(player),
        facade.save_weapon_skins(player),
    )
    assert all(r.status is SaveStatus.SAVED for r in results), results


async def test_session_survives_reconnect(settings):
    players = [PlayerContext(slot=i, identity=f"7656119800000{i:04d}") for i in range(4)]

    async with cosmetics_lifespan(settings) as facade:
        reports = await asyncio.gather(*[facade.load_all(p) for p in players])
        assert all(r.complete for r in reports)

        await asyncio.gather(*[equip_everything(facade, p, offset=p.slot) for p in players])

        for p in players:
            assert facade.forget(p)
        assert facade.cache.get_stats()["size"] == 0

    # New process, same database
    async with cosmetics_lifespan(settings) as facade:
        await asyncio.gather(*[facade.load_all(p) for p in players])
        cache = facade.cache

        for p in players:
            assert cache.get(CosmeticCategory.KNIFE, p.slot) == {2: "weapon_knife_butterfly"}
            assert cache.get(CosmeticCategory.GLOVE, p.slot) == {3: 5027 + p.slot}
            assert cache.get(CosmeticCategory.MUSIC, p.slot) == {0: 30 + p.slot}
            assert cache.get(CosmeticCategory.AGENT, p.slot) == AgentModels(ct="ctm_sas", t=None)
            assert cache.get(CosmeticCategory.WEAPON_SKIN, p.slot) == {
                7: WeaponFinish(paint=12 + p.slot, wear=0.15, seed=3, team=2),
                9: WeaponFinish(paint=344, wear=0.01, seed=0, team=3),
            }


async def test_disabled_category_is_left_alone(settings, database_url, player):
    async with cosmetics_lifespan(settings) as facade:
        await facade.save_music(player, 31)

    muted = Settings(_env_file=None, database_url=database_url, music_enabled=False)
    async with cosmetics_lifespan(muted) as facade:
        report = await facade.load_all(player)

        assert CosmeticCategory.MUSIC in report.skipped
        assert facade.cache.get(CosmeticCategory.MUSIC, player.slot) is None
        assert (await facade.save_music(player, 45)).status is SaveStatus.SKIPPED

    async with cosmetics_lifespan(settings) as facade:
        await facade.load_all(player)
        assert facade.cache.get(CosmeticCategory.MUSIC, player.slot) == {0: 31}
