from abc import ABC, abstractmethod
from typing import Optional
from inventory_sync.core.domain.models import InventoryItem

class InventoryInputPort(ABC):
    """
    Prompts the user for primitive values.

    Each ask_* method returns None when the user cancels.
    """

    @abstractmethod
    def ask_name(self, item: InventoryItem) -> Optional[str]:
        pass

    @abstractmethod
    def ask_quantity(self, item: InventoryItem) -> Optional[int]:
        pass

    @abstractmethod
    def ask_price(self, item: InventoryItem) -> Optional[float]:
        pass

    @abstractmethod
    def ask_restock_quantity(self) -> Optional[int]:
        pass

    @abstractmethod
    def alert(self, message: str) -> None:
        pass
