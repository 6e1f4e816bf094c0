"""SQLAlchemy-ORM-backed implementation of CatalogStore.

Each call runs in its own short-lived Session that commits on success
and rolls back on failure. Driver errors are re-raised as StoreError
naming the operation and item id.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from pms.domain.exceptions import EntityNotFoundError, StoreError
from pms.domain.model.stock_item import StockItem
from pms.domain.repository.catalog_store import CatalogStore
from pms.infrastructure.persistence.orm_models import Base, StockItemRow
from pms.logging_config import get_logger

logger = get_logger("infrastructure.orm_store")


class OrmCatalogStore(CatalogStore):

    def __init__(self, engine: Engine) -> None:
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise StoreError("connect", str(exc)) from exc

    # --- CatalogStore interface -----------------------------------------------

    def put(self, item: StockItem) -> StockItem:
        with self._session_scope("put", item.id or None) as session:
            row = StockItemRow(
                name=item.name,
                description=item.description,
                price=item.price,
                category=item.category,
                stock_quantity=item.stock_quantity,
            )
            if item.id == 0:
                session.add(row)
            else:
                row.id = item.id
                row = session.merge(row)
            session.flush()
            return self._to_domain(row)

    def get(self, item_id: int) -> StockItem | None:
        with self._session_scope("get", item_id) as session:
            row = session.get(StockItemRow, item_id)
            return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[StockItem]:
        with self._session_scope("list") as session:
            rows = session.scalars(select(StockItemRow).order_by(StockItemRow.id))
            return [self._to_domain(row) for row in rows]

    def update(self, item: StockItem) -> None:
        with self._session_scope("update", item.id) as session:
            row = session.get(StockItemRow, item.id)
            if row is None:
                raise EntityNotFoundError(f"Item #{item.id} not found")
            row.name = item.name
            row.description = item.description
            row.price = item.price
            row.category = item.category
            row.stock_quantity = item.stock_quantity

    def delete(self, item_id: int) -> None:
        with self._session_scope("delete", item_id) as session:
            row = session.get(StockItemRow, item_id)
            if row is None:
                raise EntityNotFoundError(f"Item #{item_id} not found")
            session.delete(row)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: StockItemRow) -> StockItem:
        return StockItem(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            category=row.category,
            stock_quantity=row.stock_quantity,
        )

    # --- Session helpers ------------------------------------------------------

    @contextmanager
    def _session_scope(
        self, operation: str, item_id: int | None = None
    ) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(
                "store_operation_failed",
                extra={"operation": operation, "item_id": item_id},
            )
            raise StoreError(operation, str(exc), item_id) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
