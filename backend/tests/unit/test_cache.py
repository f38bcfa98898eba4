"""
Unit tests for the player cosmetic cache.

Tests per-category isolation, copy semantics, slot binding and thread safety.
"""

import threading

import pytest
from domain import AgentModels, CosmeticCategory, PlayerContext, Team, WeaponFinish
from infrastructure.cache import PlayerCosmeticCache


class TestRecordAccess:
    def test_get_missing_returns_none(self, cache):
        assert cache.get(CosmeticCategory.KNIFE, 5) is None

    def test_set_then_get(self, cache):
        cache.set(CosmeticCategory.GLOVE, 5, {Team.COUNTER_TERRORIST: 5027})
        assert cache.get(CosmeticCategory.GLOVE, 5) == {3: 5027}

    def test_categories_are_independent(self, cache):
        cache.set(CosmeticCategory.GLOVE, 5, {3: 5027})
        assert cache.get(CosmeticCategory.MUSIC, 5) is None
        assert cache.get(CosmeticCategory.GLOVE, 6) is None

    def test_accepts_plain_string_category(self, cache):
        cache.set("music", 1, {0: 3})
        assert cache.get(CosmeticCategory.MUSIC, 1) == {0: 3}

    def test_returned_records_are_copies(self, cache):
        cache.set(CosmeticCategory.KNIFE, 1, {2: "weapon_bayonet"})
        record = cache.get(CosmeticCategory.KNIFE, 1)
        record[3] = "weapon_karambit"

        assert cache.get(CosmeticCategory.KNIFE, 1) == {2: "weapon_bayonet"}

    def test_stored_records_are_copies(self, cache):
        source = {2: "weapon_bayonet"}
        cache.set(CosmeticCategory.KNIFE, 1, source)
        source[2] = "weapon_karambit"

        assert cache.get(CosmeticCategory.KNIFE, 1) == {2: "weapon_bayonet"}

    def test_merge_creates_and_updates(self, cache):
        cache.merge(CosmeticCategory.WEAPON_SKIN, 1, {7: WeaponFinish(paint=12)})
        cache.merge(CosmeticCategory.WEAPON_SKIN, 1, {9: WeaponFinish(paint=44)})
        cache.merge(CosmeticCategory.WEAPON_SKIN, 1, {7: WeaponFinish(paint=13)})

        assert cache.get(CosmeticCategory.WEAPON_SKIN, 1) == {
            7: WeaponFinish(paint=13),
            9: WeaponFinish(paint=44),
        }

    def test_merge_rejects_agent_records(self, cache):
        with pytest.raises(TypeError):
            cache.merge(CosmeticCategory.AGENT, 1, {"ct": "x"})

    def test_remove_clears_every_category(self, cache):
        for category in (CosmeticCategory.KNIFE, CosmeticCategory.GLOVE, CosmeticCategory.MUSIC):
            cache.set(category, 4, {0: 1})
        cache.set(CosmeticCategory.AGENT, 4, AgentModels(ct="ct_model", t=None))
        cache.set(CosmeticCategory.KNIFE, 5, {0: "weapon_knife"})

        cache.remove(4)

        for category in CosmeticCategory:
            assert cache.get(category, 4) is None
        assert cache.get(CosmeticCategory.KNIFE, 5) == {0: "weapon_knife"}

    def test_slots(self, cache):
        cache.set(CosmeticCategory.MUSIC, 9, {0: 1})
        cache.set(CosmeticCategory.MUSIC, 2, {0: 1})
        assert cache.slots(CosmeticCategory.MUSIC) == [2, 9]


class TestSlotBinding:
    def test_bind_records_identity(self, cache, player):
        cache.bind(player)
        assert cache.bound_identity(player.slot) == player.identity

    def test_set_for_requires_binding(self, cache, player):
        assert cache.set_for(player, CosmeticCategory.MUSIC, {0: 5}) is False
        assert cache.get(CosmeticCategory.MUSIC, player.slot) is None

        cache.bind(player)
        assert cache.set_for(player, CosmeticCategory.MUSIC, {0: 5}) is True
        assert cache.get(CosmeticCategory.MUSIC, player.slot) == {0: 5}

    def test_set_for_drops_write_for_previous_occupant(self, cache, player):
        newcomer = PlayerContext(slot=player.slot, identity="76561198000000099")
        cache.bind(player)
        cache.remove(player.slot)
        cache.bind(newcomer)

        assert cache.set_for(player, CosmeticCategory.KNIFE, {2: "weapon_bayonet"}) is False
        assert cache.get(CosmeticCategory.KNIFE, player.slot) is None
        assert cache.get_stats()["stale_writes"] == 1

    def test_rebind_without_eviction_clears_records(self, cache, player):
        cache.bind(player)
        cache.set(CosmeticCategory.KNIFE, player.slot, {2: "weapon_bayonet"})

        cache.bind(PlayerContext(slot=player.slot, identity="someone_else"))

        assert cache.get(CosmeticCategory.KNIFE, player.slot) is None

    def test_snapshot_for_unbound_slot(self, cache, player):
        cache.set(CosmeticCategory.MUSIC, player.slot, {0: 5})
        assert cache.snapshot_for(player, CosmeticCategory.MUSIC) == {0: 5}

    def test_snapshot_for_other_occupant(self, cache, player):
        cache.bind(PlayerContext(slot=player.slot, identity="someone_else"))
        cache.set(CosmeticCategory.MUSIC, player.slot, {0: 5})
        assert cache.snapshot_for(player, CosmeticCategory.MUSIC) is None

    def test_remove_for_respects_occupant(self, cache, player):
        cache.bind(PlayerContext(slot=player.slot, identity="someone_else"))
        cache.set(CosmeticCategory.MUSIC, player.slot, {0: 5})

        assert cache.remove_for(player) is False
        assert cache.get(CosmeticCategory.MUSIC, player.slot) == {0: 5}


class TestStats:
    def test_hits_and_misses(self, cache):
        cache.set(CosmeticCategory.MUSIC, 1, {0: 5})
        cache.get(CosmeticCategory.MUSIC, 1)
        cache.get(CosmeticCategory.MUSIC, 2)

        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0
        assert stats["size"] == 1

    def test_clear(self, cache, player):
        cache.bind(player)
        cache.set(CosmeticCategory.MUSIC, 1, {0: 5})
        cache.clear()

        assert cache.get_stats()["size"] == 0
        assert cache.bound_identity(player.slot) is None


class TestThreadSafety:
    def test_concurrent_merges_from_threads(self):
        cache = PlayerCosmeticCache()

        def equip(thread_index: int):
            for defindex in range(100):
                cache.merge(
                    CosmeticCategory.WEAPON_SKIN,
                    thread_index % 4,
                    {thread_index * 1000 + defindex: WeaponFinish(paint=defindex)},
                )

        threads = [threading.Thread(target=equip, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        total = sum(len(cache.get(CosmeticCategory.WEAPON_SKIN, slot)) for slot in range(4))
        assert total == 800
