import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from inventory_sync.adapters.secondary.database.config import Base, SessionLocal
from inventory_sync.adapters.secondary.database.orm import InventoryItemModel
from inventory_sync.core.domain.errors import StorePersistenceError
from inventory_sync.core.domain.models import InventoryItem
from inventory_sync.core.ports.repository import ItemStorePort

logger = logging.getLogger(__name__)

# Driver errors that are not DBAPI errors (e.g. sqlite3 OverflowError for ints beyond 64 bits)
STORE_ERRORS = (SQLAlchemyError, OverflowError, ValueError)


def _to_row(item: InventoryItem) -> InventoryItemModel:
    return InventoryItemModel(**item.model_dump())


class SQLAlchemyItemStore(ItemStorePort):
    """
    Item store backed by a SQLAlchemy table.

    Each operation runs in its own short-lived session. SQLAlchemy errors are
    re-raised as StorePersistenceError.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory
        self._opened = False

    async def open(self) -> "SQLAlchemyItemStore":
        if self._opened:
            return self
        bind = self.session_factory.kw.get("bind")
        try:
            Base.metadata.create_all(bind=bind)
        except STORE_ERRORS as e:
            raise StorePersistenceError("open", cause=e) from e
        self._opened = True
        logger.info("Database opened successfully")
        return self

    async def get_all(self) -> List[InventoryItem]:
        try:
            with self.session_factory() as db:
                rows = db.query(InventoryItemModel).all()
                return [InventoryItem.model_validate(row) for row in rows]
        except STORE_ERRORS as e:
            raise StorePersistenceError("get_all", cause=e) from e

    async def get(self, item_id: str) -> Optional[InventoryItem]:
        try:
            with self.session_factory() as db:
                row = db.get(InventoryItemModel, item_id)
                if row:
                    return InventoryItem.model_validate(row)
                return None
        except STORE_ERRORS as e:
            raise StorePersistenceError("get", item_id, e) from e

    async def put(self, item: InventoryItem) -> None:
        try:
            with self.session_factory() as db:
                db.merge(_to_row(item))
                db.commit()
        except STORE_ERRORS as e:
            raise StorePersistenceError("put", item.id, e) from e
        logger.debug("Item %s saved", item.id)

    async def put_many(self, items: List[InventoryItem]) -> None:
        try:
            with self.session_factory() as db:
                for item in items:
                    db.merge(_to_row(item))
                db.commit()
        except STORE_ERRORS as e:
            raise StorePersistenceError("put_many", cause=e) from e
        logger.debug("%d items saved", len(items))

    async def delete(self, item_id: str) -> None:
        try:
            with self.session_factory() as db:
                deleted = db.query(InventoryItemModel).filter(
                    InventoryItemModel.id == item_id
                ).delete(synchronize_session=False)
                db.commit()
        except STORE_ERRORS as e:
            raise StorePersistenceError("delete", item_id, e) from e
        if not deleted:
            logger.debug("Delete of %s skipped, no such record", item_id)

    async def find_by_name(self, name: str) -> List[InventoryItem]:
        try:
            with self.session_factory() as db:
                rows = db.query(InventoryItemModel).filter(
                    InventoryItemModel.name == name
                ).all()
                return [InventoryItem.model_validate(row) for row in rows]
        except STORE_ERRORS as e:
            raise StorePersistenceError("find_by_name", cause=e) from e
