import logging
from datetime import date
from typing import Iterable, List, Optional

from inventory_sync.application.services import InventorySyncService
from inventory_sync.core.domain.errors import NotFoundError
from inventory_sync.core.domain.models import InventoryItem, SyncResult, as_day

logger = logging.getLogger(__name__)


def select_expired(snapshot: Iterable[InventoryItem], now: date) -> List[str]:
    """Ids of every item whose expiration date is on or before `now`."""
    return [item.id for item in snapshot if item.is_expired(now)]


class ExpirationSweeper:
    """Removes expired items through the sync engine."""

    def __init__(self, service: InventorySyncService):
        self.service = service

    def sweep(self, now: Optional[date] = None) -> List[SyncResult]:
        """
        Single pass over a snapshot taken when the sweep starts.

        Items added while the sweep runs are not considered. Returns one
        SyncResult per removed item, in snapshot order; the removed ids are
        `[result.item.id for result in results]`, the same ids
        `select_expired` picks for that snapshot.
        """
        now = as_day(now) if now is not None else date.today()

        expired_ids = select_expired(self.service.snapshot(), now)
        results = []
        for item_id in expired_ids:
            try:
                results.append(self.service.remove(item_id))
            except NotFoundError:
                logger.warning("Expired item %s was already removed", item_id)
        logger.info("Sweep removed %d expired items", len(results))
        return results
