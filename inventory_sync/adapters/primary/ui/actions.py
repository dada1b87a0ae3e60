"""
User action handlers for the inventory table.

Each on_* callback matches a button in the table or the add form. Values come
from the input port; inventory errors are logged and shown to the user
through InventoryInputPort.alert instead of propagating to the UI loop.
"""

import logging
from typing import List, Optional

from inventory_sync.application.services import InventorySyncService
from inventory_sync.application.sweeper import ExpirationSweeper
from inventory_sync.config import settings
from inventory_sync.core.domain.errors import NotFoundError, ValidationError
from inventory_sync.core.domain.models import ItemForm, SyncResult
from inventory_sync.core.ports.input import InventoryInputPort

logger = logging.getLogger(__name__)


class InventoryActions:
    def __init__(
        self,
        service: InventorySyncService,
        prompts: InventoryInputPort,
        sweeper: Optional[ExpirationSweeper] = None,
        default_restock_quantity: int = settings.DEFAULT_RESTOCK_QUANTITY,
    ):
        self.service = service
        self.prompts = prompts
        self.sweeper = sweeper or ExpirationSweeper(service)
        self.default_restock_quantity = default_restock_quantity

    def on_submit(self, form: ItemForm) -> Optional[SyncResult]:
        return self._guard(
            "add item",
            lambda: self.service.create(form.name, form.quantity, form.price, form.expiration),
        )

    def on_rename(self, item_id: str) -> Optional[SyncResult]:
        def run():
            new_name = self.prompts.ask_name(self.service.get(item_id))
            if not new_name:
                return None
            return self.service.rename(item_id, new_name)
        return self._guard("rename", run)

    def on_set_quantity(self, item_id: str) -> Optional[SyncResult]:
        def run():
            new_quantity = self.prompts.ask_quantity(self.service.get(item_id))
            if new_quantity is None:
                return None
            return self.service.set_quantity(item_id, new_quantity)
        return self._guard("set quantity", run)

    def on_set_price(self, item_id: str) -> Optional[SyncResult]:
        def run():
            new_price = self.prompts.ask_price(self.service.get(item_id))
            if new_price is None:
                return None
            return self.service.set_price(item_id, new_price)
        return self._guard("set price", run)

    def on_remove(self, item_id: str) -> Optional[SyncResult]:
        return self._guard("remove", lambda: self.service.remove(item_id))

    def on_restock(self, item_id: str) -> Optional[SyncResult]:
        return self._guard(
            "restock",
            lambda: self.service.restock(item_id, self.default_restock_quantity),
        )

    def on_restock_all(self) -> List[SyncResult]:
        def run():
            target = self.prompts.ask_restock_quantity()
            if target is None:
                return []
            return self.service.restock_all(target)
        return self._guard("restock all", run) or []

    def on_sweep_expired(self) -> List[SyncResult]:
        return self.sweeper.sweep()

    def _guard(self, action: str, run):
        try:
            return run()
        except (ValidationError, NotFoundError) as e:
            logger.warning("%s rejected: %s", action, e)
            self.prompts.alert(str(e))
            return None
