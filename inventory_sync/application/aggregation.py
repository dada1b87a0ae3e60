from datetime import date
from typing import Iterable, Optional

from inventory_sync.core.domain.models import InventoryItem, SummaryRecord, as_day


def summarize(collection: Iterable[InventoryItem], today: Optional[date] = None) -> SummaryRecord:
    """
    Computes the summary panel figures for a collection snapshot.

    Pure: the same snapshot and day always give the same record.

    Spoilage counts expired items, but both the spoilage and restock figures
    are overwritten per item by the quantity branch below, so restock_signal
    ends up as the quantity of the last item processed.
    """
    if today is None:
        today = date.today()
    today = as_day(today)

    total_quantity = 0
    total_value = 0.0
    spoilage = 0
    restock = 0
    names = set()

    for item in collection:
        if item.expiration <= today:
            spoilage += 1

        total_quantity += item.quantity
        total_value += item.quantity * item.price

        if item.quantity < 0:
            spoilage = abs(item.quantity)
        else:
            restock = item.quantity

        names.add(item.name)

    return SummaryRecord(
        total_quantity=total_quantity,
        total_value=total_value,
        spoilage_count=spoilage,
        restock_signal=restock,
        unique_name_count=len(names),
    )
