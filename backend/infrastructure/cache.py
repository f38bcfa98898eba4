"""
In-memory cosmetic cache keyed by session slot.

This module provides the per-connected-player cache consulted by the rest of
the game server whenever a cosmetic attribute is needed:
- Knife, glove and music selections (team-keyed maps)
- Agent models
- Weapon finishes (weapon-definition-keyed map)

Entries are created by a load, overwritten on equip, and removed when the
session ends. There is no TTL; eviction belongs to the disconnect handler.

Threading model:
- One threading.Lock guards every map; it is held only for dict operations,
  never across I/O, so event-loop code and game-thread handlers can both use it.
- Records are copied on the way in and on the way out.
"""

import logging
from threading import Lock
from typing import Dict, Mapping, Optional

from domain.entities.cosmetics import CosmeticRecord, copy_record
from domain.value_objects.enums import CosmeticCategory
from domain.value_objects.player import PlayerContext

logger = logging.getLogger("CosmeticCache")


class PlayerCosmeticCache:
    """
    Thread-safe slot -> record maps, one per cosmetic category.

    Besides the records the cache remembers which identity currently occupies
    each slot. Loads use that binding to drop results that arrive after the
    slot was handed to another player.
    """

    def __init__(self):
        """Initialize the cache with one empty map per category."""
        self._records: Dict[CosmeticCategory, Dict[int, CosmeticRecord]] = {
            category: {} for category in CosmeticCategory
        }
        self._occupants: Dict[int, str] = {}
        self._lock = Lock()
        self._stats = {"hits": 0, "misses": 0, "stale_writes": 0, "evictions": 0}

    # ------------------------------------------------------------------
    # Slot binding
    # ------------------------------------------------------------------

    def bind(self, player: PlayerContext) -> None:
        """Record that player.identity now occupies player.slot."""
        with self._lock:
            previous = self._occupants.get(player.slot)
            if previous is not None and previous != player.identity:
                # Previous occupant was never evicted; its records are not ours
                for records in self._records.values():
                    records.pop(player.slot, None)
                logger.debug(f"Slot {player.slot} rebound without eviction, cleared stale records")
            if player.identity:
                self._occupants[player.slot] = player.identity

    def bound_identity(self, slot: int) -> Optional[str]:
        with self._lock:
            return self._occupants.get(slot)

    def _owned_by(self, player: PlayerContext, strict: bool = False) -> bool:
        occupant = self._occupants.get(player.slot)
        if occupant is None:
            return not strict
        return occupant == player.identity

    # ------------------------------------------------------------------
    # Record access
    # ------------------------------------------------------------------

    def get(self, category: CosmeticCategory, slot: int) -> Optional[CosmeticRecord]:
        """
        Get a copy of the cached record for a slot.

        Args:
            category: Cosmetic category
            slot: Session slot

        Returns:
            Copy of the cached record or None if absent
        """
        with self._lock:
            record = self._records[CosmeticCategory(category)].get(slot)
            if record is None:
                self._stats["misses"] += 1
                return None
            self._stats["hits"] += 1
            return copy_record(record)

    def set(self, category: CosmeticCategory, slot: int, record: CosmeticRecord) -> None:
        """Store (a copy of) a record for a slot, replacing any previous one."""
        with self._lock:
            self._records[CosmeticCategory(category)][slot] = copy_record(record)

    def merge(self, category: CosmeticCategory, slot: int, entries: Mapping) -> None:
        """
        Merge entries into a map-shaped record, creating it if needed.

        Used by equip handlers that change one team or one weapon at a time.
        """
        category = CosmeticCategory(category)
        if category is CosmeticCategory.AGENT:
            raise TypeError("agent records are replaced with set(), not merged")
        with self._lock:
            current = dict(self._records[category].get(slot) or {})
            current.update(entries)
            self._records[category][slot] = current

    def set_for(self, player: PlayerContext, category: CosmeticCategory, record: CosmeticRecord) -> bool:
        """
        Store a record only if the slot is bound to player.identity.

        An unbound slot is treated as reassigned: the player disconnected
        while the load was in flight.

        Returns:
            True if stored, False if the slot now belongs to someone else
        """
        with self._lock:
            if not self._owned_by(player, strict=True):
                self._stats["stale_writes"] += 1
                logger.warning(f"Dropped stale {category} record for slot {player.slot}: slot was reassigned")
                return False
            self._records[CosmeticCategory(category)][player.slot] = copy_record(record)
            return True

    def snapshot_for(self, player: PlayerContext, category: CosmeticCategory) -> Optional[CosmeticRecord]:
        """Get a copy of the record only if player still occupies its slot."""
        with self._lock:
            if not self._owned_by(player):
                return None
            record = self._records[CosmeticCategory(category)].get(player.slot)
            return copy_record(record) if record is not None else None

    def remove(self, slot: int) -> None:
        """Clear all five categories and the occupant binding for a slot."""
        with self._lock:
            self._evict(slot)

    def remove_for(self, player: PlayerContext) -> bool:
        """Evict a slot only if player still occupies it."""
        with self._lock:
            if not self._owned_by(player):
                return False
            self._evict(player.slot)
            return True

    def _evict(self, slot: int) -> None:
        removed = 0
        for records in self._records.values():
            if records.pop(slot, None) is not None:
                removed += 1
        self._occupants.pop(slot, None)
        self._stats["evictions"] += 1
        logger.debug(f"Slot {slot} evicted ({removed} categories)")

    def slots(self, category: CosmeticCategory) -> list[int]:
        with self._lock:
            return sorted(self._records[CosmeticCategory(category)])

    def clear(self) -> None:
        """Clear all cache entries."""
        with self._lock:
            count = sum(len(records) for records in self._records.values())
            for records in self._records.values():
                records.clear()
            self._occupants.clear()
            logger.info(f"Cosmetic cache cleared: {count} entries removed")

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            total = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total * 100) if total > 0 else 0
            size = sum(len(records) for records in self._records.values())
            return {**self._stats, "total_requests": total, "hit_rate": round(hit_rate, 2), "size": size}

    def log_stats(self):
        """Log current cache statistics."""
        stats = self.get_stats()
        logger.info(
            f"Cosmetic cache stats: {stats['hits']} hits, {stats['misses']} misses, "
            f"{stats['hit_rate']}% hit rate, {stats['size']} entries, "
            f"{stats['stale_writes']} stale writes dropped"
        )
