"""SQLAlchemy-Core-backed implementation of CatalogStore.

Talks to the ``stock_items`` table through plain INSERT/SELECT/UPDATE/
DELETE statements built from an explicitly declared Table: the column
list is fixed here, never derived from the StockItem class at runtime.

Unlike the ORM store, ``put`` with an explicit id always INSERTs, so a
taken id surfaces as a StoreError from the primary-key constraint.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Column, Integer, MetaData, Numeric, String, Table, Text, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from pms.domain.exceptions import EntityNotFoundError, StoreError
from pms.domain.model.stock_item import StockItem
from pms.domain.repository.catalog_store import CatalogStore
from pms.logging_config import get_logger

logger = get_logger("infrastructure.sql_store")

metadata = MetaData()

stock_items = Table(
    "stock_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("price", Numeric(12, 2), nullable=False),
    Column("category", String(100), nullable=False, index=True),
    Column("stock_quantity", Integer, nullable=False, default=0),
)

# Every column except the primary key, in table order
_DATA_COLUMNS = ("name", "description", "price", "category", "stock_quantity")


class SqlCatalogStore(CatalogStore):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        try:
            metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise StoreError("connect", str(exc)) from exc

    # --- CatalogStore interface -----------------------------------------------

    def put(self, item: StockItem) -> StockItem:
        values = self._to_values(item)
        if item.id != 0:
            values["id"] = item.id

        with self._connect("put", item.id or None) as conn:
            result = conn.execute(stock_items.insert().values(**values))
            new_id = result.inserted_primary_key[0]
        return item.copy(id=new_id)

    def get(self, item_id: int) -> StockItem | None:
        with self._connect("get", item_id) as conn:
            row = conn.execute(
                select(stock_items).where(stock_items.c.id == item_id)
            ).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[StockItem]:
        with self._connect("list") as conn:
            rows = conn.execute(select(stock_items).order_by(stock_items.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def update(self, item: StockItem) -> None:
        with self._connect("update", item.id) as conn:
            result = conn.execute(
                stock_items.update()
                .where(stock_items.c.id == item.id)
                .values(**self._to_values(item))
            )
            if result.rowcount == 0:
                raise EntityNotFoundError(f"Item #{item.id} not found")

    def delete(self, item_id: int) -> None:
        with self._connect("delete", item_id) as conn:
            result = conn.execute(
                stock_items.delete().where(stock_items.c.id == item_id)
            )
            if result.rowcount == 0:
                raise EntityNotFoundError(f"Item #{item_id} not found")

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_values(item: StockItem) -> dict:
        return {column: getattr(item, column) for column in _DATA_COLUMNS}

    @staticmethod
    def _to_domain(row) -> StockItem:
        return StockItem(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            category=row.category,
            stock_quantity=row.stock_quantity,
        )

    # --- Connection helpers ---------------------------------------------------

    @contextmanager
    def _connect(self, operation: str, item_id: int | None = None) -> Iterator[Connection]:
        try:
            with self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            logger.error(
                "store_operation_failed",
                extra={"operation": operation, "item_id": item_id},
            )
            raise StoreError(operation, str(exc), item_id) from exc
