"""Result objects returned by the synchronization facade."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.exceptions import CosmeticSyncError
from domain.value_objects.enums import CosmeticCategory, LoadStatus, SaveStatus


@dataclass
class SaveResult:
    """Result of persisting one category for one player."""

    category: CosmeticCategory
    status: SaveStatus
    rows: int = 0
    reason: str = ""
    error: Optional[CosmeticSyncError] = None

    @property
    def ok(self) -> bool:
        """True unless the store rejected the write; skips count as success."""
        return self.status is not SaveStatus.FAILED

    @classmethod
    def saved(cls, category: CosmeticCategory, rows: int) -> "SaveResult":
        return cls(category=category, status=SaveStatus.SAVED, rows=rows)

    @classmethod
    def skipped(cls, category: CosmeticCategory, reason: str) -> "SaveResult":
        return cls(category=category, status=SaveStatus.SKIPPED, reason=reason)

    @classmethod
    def failed(cls, category: CosmeticCategory, error: CosmeticSyncError) -> "SaveResult":
        return cls(category=category, status=SaveStatus.FAILED, reason=str(error), error=error)


@dataclass
class LoadReport:
    """Result of loading every enabled category for a newly connected player."""

    loaded: List[CosmeticCategory] = field(default_factory=list)
    skipped: List[CosmeticCategory] = field(default_factory=list)  # Empty, stale or disabled
    failed: List[CosmeticCategory] = field(default_factory=list)

    def record(self, category: CosmeticCategory, status: LoadStatus) -> None:
        if status is LoadStatus.LOADED:
            self.loaded.append(category)
        elif status is LoadStatus.FAILED:
            self.failed.append(category)
        else:
            self.skipped.append(category)

    @property
    def complete(self) -> bool:
        return not self.failed
