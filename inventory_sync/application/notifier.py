"""
Render notifier.

Keeps the subscribed renderers and pushes every new (snapshot, summary)
pair to each of them.
"""

import logging
from typing import Dict, Sequence

from inventory_sync.core.domain.models import InventoryItem, SummaryRecord
from inventory_sync.core.ports.renderer import InventoryRendererPort

logger = logging.getLogger(__name__)


class RenderNotifier:
    """
    Fan-out of inventory updates to renderers.

    Keeps a simple dict: {renderer_name: renderer}. Registering a name again
    replaces the previous renderer.
    """

    def __init__(self):
        self.renderers: Dict[str, InventoryRendererPort] = {}

    def subscribe(self, name: str, renderer: InventoryRendererPort):
        self.renderers[name] = renderer
        logger.debug("Renderer %s subscribed", name)

    def unsubscribe(self, name: str):
        if name in self.renderers:
            del self.renderers[name]
            logger.debug("Renderer %s unsubscribed", name)

    def is_subscribed(self, name: str) -> bool:
        return name in self.renderers

    def notify(self, snapshot: Sequence[InventoryItem], summary: SummaryRecord):
        """
        Sends the snapshot and summary to every renderer.

        A renderer that raises is logged and skipped; the others still
        receive the update.
        """
        for name, renderer in list(self.renderers.items()):
            try:
                renderer.render(snapshot, summary)
            except Exception:
                logger.exception("Renderer %s failed", name)
