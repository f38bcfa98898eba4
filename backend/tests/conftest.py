"""
Pytest configuration and shared fixtures for backend tests.

This module provides fixtures for a throwaway SQLite store, the session cache,
the facade and commonly used players.

Each test gets its own database file so concurrent connections see the same
schema (an in-memory SQLite database is private to one connection).
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Import store fixtures to make them available to all tests
from tests.fixtures.store_fixtures import (  # noqa: E402, F401
    broken_query_gateway,
    unavailable_gateway,
)

# Type hints only - not imported at runtime
if TYPE_CHECKING:
    from typing import AsyncGenerator

    from infrastructure.database import StoreGateway


def pytest_collection_modifyitems(items):
    """Auto-apply markers based on test directory."""
    for item in items:
        filepath = str(item.fspath)
        if "/tests/unit/" in filepath:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in filepath:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep host environment toggles out of the tests."""
    from core.settings import reset_settings

    for name in ("DATABASE_URL", "KNIFE_ENABLED", "GLOVE_ENABLED", "AGENT_ENABLED", "MUSIC_ENABLED", "SKIN_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'weapon_paints.db'}"


@pytest.fixture
async def gateway(database_url) -> "AsyncGenerator[StoreGateway, None]":
    """
    Create a fresh store for each test function.

    Tables are created up front and the engine is disposed afterwards.
    """
    from infrastructure.database import StoreGateway

    store = StoreGateway.from_url(database_url)
    await store.create_schema()
    yield store
    await store.dispose()


@pytest.fixture
def cache():
    from infrastructure.cache import PlayerCosmeticCache

    return PlayerCosmeticCache()


@pytest.fixture
def facade(gateway, cache):
    from services import CosmeticsFacade

    return CosmeticsFacade(gateway, cache)


@pytest.fixture
def player():
    """A connected player in slot 1."""
    from domain import PlayerContext

    return PlayerContext(slot=1, identity="76561198000000001")


@pytest.fixture
def anonymous_player():
    """A connected player whose identity has not been resolved."""
    from domain import PlayerContext

    return PlayerContext(slot=2, identity="")

