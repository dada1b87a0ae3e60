from typing import Dict, Iterable, List, Optional, Tuple

from inventory_sync.core.domain.models import InventoryItem


class ItemCache:
    """
    Ordered in-memory item collection keyed by id.

    Only the sync engine holds a reference to the live cache. Everything else
    gets snapshots, which are copies.
    """

    def __init__(self, items: Iterable[InventoryItem] = ()):
        self._items: Dict[str, InventoryItem] = {}
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> Optional[InventoryItem]:
        return self._items.get(item_id)

    def add(self, item: InventoryItem) -> None:
        if item.id in self._items:
            raise KeyError(f"Duplicate item id: {item.id}")
        self._items[item.id] = item

    def pop(self, item_id: str) -> InventoryItem:
        return self._items.pop(item_id)

    def items(self) -> List[InventoryItem]:
        """Live items, for the owner's own iteration."""
        return list(self._items.values())

    def snapshot(self) -> Tuple[InventoryItem, ...]:
        return tuple(item.model_copy() for item in self._items.values())
