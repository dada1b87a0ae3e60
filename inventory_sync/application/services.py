"""
Inventory synchronization engine.

Every mutation runs in two phases:
1. Synchronous: validate, apply the change to the item cache, notify renderers
   and return a SyncResult.
2. Asynchronous: a background task writes the change to the store. Its outcome
   is logged and exposed through SyncResult.write; a failure never reverts the
   cache and is never raised to the original caller.
"""

import asyncio
import logging
import math
import numbers
import uuid
from datetime import date, datetime
from typing import Awaitable, Callable, List, Optional, Set, Tuple

from inventory_sync.application.aggregation import summarize
from inventory_sync.application.cache import ItemCache
from inventory_sync.application.notifier import RenderNotifier
from inventory_sync.core.domain.errors import NotFoundError, StorePersistenceError, ValidationError
from inventory_sync.core.domain.models import InventoryItem, SummaryRecord, SyncResult
from inventory_sync.core.ports.repository import ItemStorePort

logger = logging.getLogger(__name__)


# ============================================================================
# INPUT VALIDATION
# ============================================================================

def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", "Name cannot be empty.")
    return name


def validate_quantity(quantity) -> int:
    if not isinstance(quantity, numbers.Integral) or isinstance(quantity, bool):
        raise ValidationError("quantity", f"Quantity must be a whole number, got {quantity!r}.")
    if quantity < 0:
        raise ValidationError("quantity", "Quantity cannot be negative. Please enter a positive value.")
    return int(quantity)


def validate_price(price) -> float:
    if not _is_number(price) or math.isnan(price) or math.isinf(price):
        raise ValidationError("price", f"Price must be a number, got {price!r}.")
    if price < 0:
        raise ValidationError("price", "Price cannot be negative. Please enter a positive value.")
    return float(price)


def validate_restock_target(target) -> int:
    if not isinstance(target, numbers.Integral) or isinstance(target, bool) or target <= 0:
        raise ValidationError("quantity", "Please enter a valid positive restock quantity.")
    return int(target)


def validate_expiration(expiration) -> date:
    if isinstance(expiration, datetime):
        return expiration.date()
    if not isinstance(expiration, date):
        raise ValidationError("expiration", f"Expiration must be a date, got {expiration!r}.")
    return expiration


def new_item_id() -> str:
    return str(uuid.uuid4())


# ============================================================================
# SYNC ENGINE
# ============================================================================

class InventorySyncService:
    """
    Owns the item cache and mirrors every change to the store.

    Mutating methods must be called from inside the running event loop; they
    return immediately and leave the store write running in the background.
    """

    def __init__(
        self,
        store: ItemStorePort,
        notifier: Optional[RenderNotifier] = None,
        id_factory: Callable[[], str] = new_item_id,
    ):
        self.store = store
        self.notifier = notifier or RenderNotifier()
        self.id_factory = id_factory
        self._cache = ItemCache()
        self._pending: Set[asyncio.Task] = set()

    # --- reads --------------------------------------------------------------

    def snapshot(self) -> Tuple[InventoryItem, ...]:
        return self._cache.snapshot()

    def summary(self, today: Optional[date] = None) -> SummaryRecord:
        return summarize(self._cache.snapshot(), today)

    def get(self, item_id: str) -> InventoryItem:
        return self._require(item_id).model_copy()

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    # --- startup ------------------------------------------------------------

    async def load_all(self) -> Tuple[InventoryItem, ...]:
        """
        Replaces the cache with the full store contents and notifies renderers.

        A store failure propagates and leaves the current cache in place.
        """
        items = await self.store.get_all()
        self._cache = ItemCache(items)
        logger.info("Loaded %d items from the store", len(self._cache))
        self._refresh()
        return self._cache.snapshot()

    # --- mutations ----------------------------------------------------------

    def create(self, name: str, quantity: int, price: float, expiration: date) -> SyncResult:
        name = validate_name(name)
        quantity = validate_quantity(quantity)
        price = validate_price(price)
        expiration = validate_expiration(expiration)
        loop = asyncio.get_running_loop()

        item = InventoryItem(
            id=self._fresh_id(),
            name=name,
            quantity=quantity,
            price=price,
            expiration=expiration,
        )
        self._cache.add(item)
        logger.info("Item %s (%s) added", item.id, item.name)
        return self._commit(loop, item)

    def rename(self, item_id: str, new_name: str) -> SyncResult:
        item = self._require(item_id)
        new_name = validate_name(new_name)
        loop = asyncio.get_running_loop()
        if new_name == item.name:
            return SyncResult(item=item.model_copy(), changed=False)
        item.name = new_name
        return self._commit(loop, item)

    def set_quantity(self, item_id: str, new_quantity: int) -> SyncResult:
        item = self._require(item_id)
        new_quantity = validate_quantity(new_quantity)
        loop = asyncio.get_running_loop()
        if new_quantity == item.quantity:
            return SyncResult(item=item.model_copy(), changed=False)
        item.quantity = new_quantity
        return self._commit(loop, item)

    def set_price(self, item_id: str, new_price: float) -> SyncResult:
        item = self._require(item_id)
        new_price = validate_price(new_price)
        loop = asyncio.get_running_loop()
        if new_price == item.price:
            return SyncResult(item=item.model_copy(), changed=False)
        item.price = new_price
        return self._commit(loop, item)

    def restock(self, item_id: str, target_quantity: int) -> SyncResult:
        """Raises the quantity to target_quantity; never lowers it."""
        item = self._require(item_id)
        target_quantity = validate_restock_target(target_quantity)
        loop = asyncio.get_running_loop()
        return self._restock_item(loop, item, target_quantity)

    def restock_all(self, target_quantity: int) -> List[SyncResult]:
        """
        Restocks every cached item to the same target.

        Not atomic: each item gets its own store write and a failed write
        does not affect the rest.
        """
        target_quantity = validate_restock_target(target_quantity)
        loop = asyncio.get_running_loop()
        results = [
            self._restock_item(loop, item, target_quantity, refresh=False)
            for item in self._cache.items()
        ]
        self._refresh()
        return results

    def remove(self, item_id: str) -> SyncResult:
        item = self._require(item_id)
        loop = asyncio.get_running_loop()
        self._cache.pop(item_id)
        logger.info("Item %s (%s) removed", item.id, item.name)
        write = self._schedule(loop, "delete", item_id, lambda: self.store.delete(item_id))
        self._refresh()
        return SyncResult(item=item, write=write)

    def persist_all(self) -> asyncio.Task:
        """Writes the whole cache to the store in one background task."""
        loop = asyncio.get_running_loop()
        items = list(self._cache.snapshot())
        return self._schedule(loop, "put_many", None, lambda: self.store.put_many(items))

    async def drain(self) -> None:
        """Waits until every in-flight store write has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    # --- internals ----------------------------------------------------------

    def _require(self, item_id: str) -> InventoryItem:
        item = self._cache.get(item_id)
        if item is None:
            raise NotFoundError(item_id)
        return item

    def _fresh_id(self) -> str:
        item_id = self.id_factory()
        while item_id in self._cache:
            logger.warning("Generated id %s already in use, drawing another", item_id)
            item_id = self.id_factory()
        return item_id

    def _restock_item(self, loop, item: InventoryItem, target: int, refresh: bool = True) -> SyncResult:
        if item.quantity >= target:
            return SyncResult(item=item.model_copy(), changed=False)
        item.quantity = target
        return self._commit(loop, item, refresh=refresh)

    def _commit(self, loop, item: InventoryItem, refresh: bool = True) -> SyncResult:
        saved = item.model_copy()
        write = self._schedule(loop, "put", saved.id, lambda: self.store.put(saved))
        if refresh:
            self._refresh()
        return SyncResult(item=saved, write=write)

    def _schedule(
        self,
        loop: asyncio.AbstractEventLoop,
        operation: str,
        item_id: Optional[str],
        call: Callable[[], Awaitable[None]],
    ) -> asyncio.Task:
        task = loop.create_task(self._run_store_op(operation, item_id, call))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run_store_op(
        self,
        operation: str,
        item_id: Optional[str],
        call: Callable[[], Awaitable[None]],
    ) -> bool:
        try:
            await call()
        except StorePersistenceError:
            logger.exception("Error during store %s for item %s", operation, item_id)
            return False
        except Exception:
            # Adapters should raise StorePersistenceError, but the write handle must still resolve
            logger.exception("Unexpected error during store %s for item %s", operation, item_id)
            return False
        logger.debug("Store %s completed for item %s", operation, item_id)
        return True

    def _refresh(self):
        snapshot = self._cache.snapshot()
        self.notifier.notify(snapshot, summarize(snapshot))
