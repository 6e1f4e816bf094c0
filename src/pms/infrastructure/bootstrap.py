"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from pms.application.inventory_engine import InventoryEngine
from pms.domain.exceptions import StoreError
from pms.domain.repository.catalog_store import CatalogStore
from pms.infrastructure.config import Settings
from pms.infrastructure.persistence.in_memory_catalog_store import InMemoryCatalogStore
from pms.infrastructure.persistence.json_catalog_store import JsonCatalogStore
from pms.infrastructure.persistence.orm_catalog_store import OrmCatalogStore
from pms.infrastructure.persistence.sql_catalog_store import SqlCatalogStore
from pms.infrastructure.seed import SAMPLE_ITEMS
from pms.logging_config import configure_logging, get_logger

logger = get_logger("infrastructure.bootstrap")


def catalog_store(settings: Settings) -> CatalogStore:
    """Build the store named by ``settings.store``.

    Raises StoreError when a database store cannot reach its database.
    """
    if settings.store == "memory":
        return InMemoryCatalogStore()

    if settings.store == "json":
        return JsonCatalogStore(settings.json_path)

    url = settings.resolved_database_url
    if url.startswith("sqlite:///") and not settings.database_url:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    try:
        engine = create_engine(url)
    except SQLAlchemyError as exc:
        raise StoreError("connect", str(exc)) from exc

    if settings.store == "orm":
        return OrmCatalogStore(engine)
    return SqlCatalogStore(engine)


def inventory_engine(settings: Settings | None = None) -> InventoryEngine:
    """Build the engine, seeding an empty store with the sample catalog.

    If the configured store is unreachable, fall back to a seeded
    in-memory store instead of failing.
    """
    settings = settings or Settings.from_env()
    configure_logging(level=settings.log_level)

    try:
        engine = InventoryEngine(catalog_store(settings))
        if settings.seed:
            engine.seed_if_empty(SAMPLE_ITEMS)
    except StoreError as exc:
        logger.warning(
            "store_unavailable_falling_back_to_memory",
            extra={"store": settings.store, "error": str(exc)},
        )
        engine = InventoryEngine(InMemoryCatalogStore())
        if settings.seed:
            engine.seed_if_empty(SAMPLE_ITEMS)

    return engine
