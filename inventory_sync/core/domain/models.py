import asyncio
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from inventory_sync.config import settings


def as_day(value: date) -> date:
    """Drops the time part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_money(amount: float, symbol: Optional[str] = None) -> str:
    """Formats an amount with the currency symbol and 2 decimal places."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    return f"{symbol}{amount:.2f}"


class InventoryItem(BaseModel):
    """One stocked product line."""
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: str = Field(..., min_length=1, description="Opaque unique identifier, store primary key")
    name: str = Field(..., min_length=1, description="Display label, not unique")
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0)
    expiration: date

    @property
    def amount(self) -> float:
        """Line value: quantity times unit price."""
        return self.quantity * self.price

    def is_expired(self, today: date) -> bool:
        return self.expiration <= as_day(today)


class ItemForm(BaseModel):
    """Validated values coming from the add-item form."""
    name: str
    quantity: int
    price: float
    expiration: date


class SummaryRecord(BaseModel):
    """Figures shown next to the inventory table."""
    model_config = ConfigDict(frozen=True)

    total_quantity: int = 0
    total_value: float = 0.0
    spoilage_count: int = 0
    restock_signal: int = 0
    unique_name_count: int = 0

    @property
    def formatted_total_value(self) -> str:
        return format_money(self.total_value)


class SyncResult(BaseModel):
    """
    Outcome of a cache mutation.

    `item` is the cache state right after the mutation (a copy). `write` is
    the background store task, or None when nothing had to be persisted.
    Awaiting it yields True if the store acknowledged the write and False if
    it failed; it never raises.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    item: InventoryItem
    changed: bool = True
    write: Optional[asyncio.Task] = None

    async def persisted(self) -> bool:
        if self.write is None:
            return True
        return await self.write
