import logging
from typing import Optional

from inventory_sync.adapters.primary.ui.actions import InventoryActions
from inventory_sync.adapters.secondary.database.config import SessionLocal
from inventory_sync.adapters.secondary.database.sqlalchemy_repository import SQLAlchemyItemStore
from inventory_sync.application.notifier import RenderNotifier
from inventory_sync.application.services import InventorySyncService
from inventory_sync.application.sweeper import ExpirationSweeper
from inventory_sync.core.logging_config import setup_logging
from inventory_sync.core.ports.input import InventoryInputPort
from inventory_sync.core.ports.renderer import InventoryRendererPort
from inventory_sync.core.ports.repository import ItemStorePort

logger = logging.getLogger(__name__)


async def start_session(
    renderer: InventoryRendererPort,
    prompts: InventoryInputPort,
    store: Optional[ItemStorePort] = None,
    configure_logging: bool = True,
) -> InventoryActions:
    """
    Opens the store, rehydrates the cache and wires the UI callbacks.

    Must be awaited inside the event loop that will run the UI.
    """
    if configure_logging:
        setup_logging()

    store = store or SQLAlchemyItemStore(SessionLocal)
    await store.open()

    notifier = RenderNotifier()
    notifier.subscribe("table", renderer)

    service = InventorySyncService(store, notifier)
    await service.load_all()

    return InventoryActions(service, prompts, ExpirationSweeper(service))
