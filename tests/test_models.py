"""
Tests for domain models and errors.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from inventory_sync.core.domain.errors import (
    InventoryError,
    NotFoundError,
    StorePersistenceError,
    ValidationError,
)
from inventory_sync.core.domain.models import InventoryItem, SummaryRecord, format_money


class TestInventoryItem:

    def test_amount(self):
        item = InventoryItem(id="x", name="Soap", quantity=3, price=1.5, expiration=date(2030, 1, 1))

        assert item.amount == 4.5

    def test_negative_values_rejected_on_assignment(self):
        item = InventoryItem(id="x", name="Soap", quantity=3, price=1.5, expiration=date(2030, 1, 1))

        with pytest.raises(PydanticValidationError):
            item.quantity = -1
        with pytest.raises(PydanticValidationError):
            item.price = -0.5
        assert item.quantity == 3
        assert item.price == 1.5

    def test_is_expired(self):
        item = InventoryItem(id="x", name="Soap", quantity=3, price=1.5, expiration=date(2030, 1, 1))

        assert item.is_expired(date(2030, 1, 1))
        assert not item.is_expired(date(2029, 12, 31))
        assert item.is_expired(datetime(2030, 1, 1, 23, 59))
        assert not item.is_expired(datetime(2029, 12, 31, 23, 59))

    def test_expiration_parsed_from_iso_string(self):
        item = InventoryItem(id="x", name="Soap", quantity=3, price=1.5, expiration="2030-01-01")

        assert item.expiration == date(2030, 1, 1)


class TestSummaryRecord:

    def test_is_frozen(self):
        summary = SummaryRecord()

        with pytest.raises(PydanticValidationError):
            summary.total_quantity = 5


class TestFormatting:

    def test_format_money_default_symbol(self):
        assert format_money(3) == "₱3.00"

    def test_format_money_custom_symbol(self):
        assert format_money(12.345, "$") == "$12.35"


class TestErrors:

    def test_hierarchy(self):
        assert issubclass(ValidationError, InventoryError)
        assert issubclass(NotFoundError, InventoryError)
        assert issubclass(StorePersistenceError, InventoryError)

    def test_messages(self):
        assert str(NotFoundError("abc")) == "Item not found: abc"
        assert str(ValidationError("price", "Price cannot be negative.")) == "price: Price cannot be negative."
        assert str(StorePersistenceError("put", "abc", "disk full")) == "Store put failed for item abc (disk full)"
