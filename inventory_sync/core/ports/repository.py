from abc import ABC, abstractmethod
from typing import List, Optional
from inventory_sync.core.domain.models import InventoryItem

class ItemStorePort(ABC):
    """
    Persistent key-value store for inventory items, keyed by item id.

    Implementations raise StorePersistenceError when an operation fails.
    """

    @abstractmethod
    async def open(self) -> "ItemStorePort":
        """Opens the store, creating the schema on first use. Idempotent."""

    @abstractmethod
    async def get_all(self) -> List[InventoryItem]:
        pass

    @abstractmethod
    async def get(self, item_id: str) -> Optional[InventoryItem]:
        pass

    @abstractmethod
    async def put(self, item: InventoryItem) -> None:
        """Inserts the item, or replaces the whole record if the id exists."""

    @abstractmethod
    async def put_many(self, items: List[InventoryItem]) -> None:
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> None:
        """Deletes the record. Missing ids are not an error."""

    @abstractmethod
    async def find_by_name(self, name: str) -> List[InventoryItem]:
        pass
