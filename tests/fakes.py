"""
Test doubles for the store, renderer and input ports.
"""

from typing import List, Optional

from inventory_sync.core.domain.errors import StorePersistenceError
from inventory_sync.core.ports.input import InventoryInputPort
from inventory_sync.core.ports.renderer import InventoryRendererPort
from inventory_sync.core.ports.repository import ItemStorePort


class RecordingRenderer(InventoryRendererPort):
    """Keeps every (snapshot, summary) pair it was asked to render."""

    def __init__(self):
        self.calls = []

    def render(self, snapshot, summary):
        self.calls.append((snapshot, summary))

    @property
    def last_snapshot(self):
        return self.calls[-1][0]

    @property
    def last_summary(self):
        return self.calls[-1][1]


class FailingStore(ItemStorePort):
    """Store whose writes fail for the ids listed in `fail_ids` (or all, if None)."""

    def __init__(self, fail_ids: Optional[set] = None):
        self.fail_ids = fail_ids
        self.records = {}
        self.calls: List[tuple] = []

    def _should_fail(self, item_id) -> bool:
        return self.fail_ids is None or item_id in self.fail_ids

    async def open(self):
        return self

    async def get_all(self):
        return [item.model_copy() for item in self.records.values()]

    async def get(self, item_id):
        item = self.records.get(item_id)
        return item.model_copy() if item else None

    async def put(self, item):
        self.calls.append(("put", item.id))
        if self._should_fail(item.id):
            raise StorePersistenceError("put", item.id, "disk full")
        self.records[item.id] = item.model_copy()

    async def put_many(self, items):
        for item in items:
            await self.put(item)

    async def delete(self, item_id):
        self.calls.append(("delete", item_id))
        if self._should_fail(item_id):
            raise StorePersistenceError("delete", item_id, "disk full")
        self.records.pop(item_id, None)

    async def find_by_name(self, name):
        return [item.model_copy() for item in self.records.values() if item.name == name]


class ScriptedPrompts(InventoryInputPort):
    """Answers prompts from preset values and records alerts."""

    def __init__(self, name=None, quantity=None, price=None, restock_quantity=None):
        self.name = name
        self.quantity = quantity
        self.price = price
        self.restock_quantity = restock_quantity
        self.alerts: List[str] = []

    def ask_name(self, item):
        return self.name

    def ask_quantity(self, item):
        return self.quantity

    def ask_price(self, item):
        return self.price

    def ask_restock_quantity(self):
        return self.restock_quantity

    def alert(self, message):
        self.alerts.append(message)

