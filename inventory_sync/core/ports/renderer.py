from abc import ABC, abstractmethod
from typing import Sequence
from inventory_sync.core.domain.models import InventoryItem, SummaryRecord

class InventoryRendererPort(ABC):
    """Draws the inventory table and the summary panel."""

    @abstractmethod
    def render(self, snapshot: Sequence[InventoryItem], summary: SummaryRecord) -> None:
        pass
