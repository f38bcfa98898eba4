"""
Factory for wiring the cosmetic synchronization components.

This module builds the store gateway, the session cache and the facade from
settings, and provides a lifespan context manager for the host plugin.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from domain.value_objects.enums import CosmeticCategory
from infrastructure.cache import PlayerCosmeticCache
from infrastructure.database import StoreGateway
from services import CosmeticsFacade

from core.logging import get_logger
from core.settings import Settings, get_settings

logger = get_logger("AppFactory")


def create_cosmetics_facade(
    settings: Optional[Settings] = None,
    gateway: Optional[StoreGateway] = None,
    cache: Optional[PlayerCosmeticCache] = None,
) -> CosmeticsFacade:
    """
    Create a facade with its gateway and cache.

    Args:
        settings: Settings to use (defaults to the process-wide singleton)
        gateway: Existing gateway (built from settings.database_url when omitted)
        cache: Existing cache to share with event handlers (new one when omitted)

    Returns:
        Configured CosmeticsFacade
    """
    settings = settings or get_settings()
    gateway = gateway or StoreGateway.from_url(settings.database_url, echo=settings.sql_echo)
    cache = cache or PlayerCosmeticCache()
    flags = settings.feature_flags()

    disabled = [str(c) for c in CosmeticCategory if not flags.is_enabled(c)]
    if disabled:
        logger.info(f"Disabled cosmetic categories: {disabled}")

    return CosmeticsFacade(gateway, cache, flags)


@asynccontextmanager
async def cosmetics_lifespan(
    settings: Optional[Settings] = None,
    create_schema: bool = True,
) -> AsyncIterator[CosmeticsFacade]:
    """
    Lifespan context manager for plugin startup and shutdown.

    Yields:
        A ready-to-use CosmeticsFacade
    """
    # Startup
    logger.info("🚀 Cosmetic sync startup...")
    facade = create_cosmetics_facade(settings)

    if create_schema:
        await facade.gateway.create_schema()

    logger.info("✅ Cosmetic sync startup complete")

    try:
        yield facade
    finally:
        # Shutdown
        logger.info("🛑 Cosmetic sync shutdown...")
        facade.cache.log_stats()
        facade.cache.clear()
        await facade.gateway.dispose()
        logger.info("✅ Cosmetic sync shutdown complete")
