"""
Tests for the summary panel figures.
"""

from datetime import date, datetime, timedelta

from inventory_sync.application.aggregation import summarize
from inventory_sync.core.domain.models import InventoryItem, SummaryRecord


def _item(item_id, name, quantity, price, expiration):
    return InventoryItem(id=item_id, name=name, quantity=quantity, price=price, expiration=expiration)


class TestSummarize:

    def test_empty_collection(self):
        summary = summarize([])

        assert summary == SummaryRecord(
            total_quantity=0,
            total_value=0,
            spoilage_count=0,
            restock_signal=0,
            unique_name_count=0,
        )

    def test_milk_scenario(self, milk_items, today):
        summary = summarize(milk_items, today)

        assert summary.unique_name_count == 1
        assert summary.total_quantity == 15
        assert summary.total_value == 40.0
        assert summary.spoilage_count == 1

    def test_restock_signal_is_last_item_quantity(self, next_year, today):
        items = [
            _item("1", "Rice", 70, 1.0, next_year),
            _item("2", "Beans", 3, 1.0, next_year),
        ]

        assert summarize(items, today).restock_signal == 3
        assert summarize(list(reversed(items)), today).restock_signal == 70

    def test_item_expiring_today_counts_as_spoiled(self, today):
        items = [_item("1", "Yogurt", 1, 1.0, today)]

        assert summarize(items, today).spoilage_count == 1
        assert summarize(items, today - timedelta(days=1)).spoilage_count == 0

    def test_distinct_names_are_case_sensitive(self, next_year, today):
        items = [
            _item("1", "Milk", 1, 1.0, next_year),
            _item("2", "milk", 1, 1.0, next_year),
            _item("3", "Milk", 1, 1.0, next_year),
        ]

        assert summarize(items, today).unique_name_count == 2

    def test_is_pure(self, milk_items, today):
        before = [item.model_copy() for item in milk_items]

        first = summarize(milk_items, today)
        second = summarize(milk_items, today)

        assert first == second
        assert milk_items == before

    def test_accepts_any_iterable(self, milk_items):
        summary = summarize(iter(milk_items), date(2000, 1, 1))

        assert summary.total_quantity == 15
        assert summary.spoilage_count == 0

    def test_formatted_total_value(self, milk_items, today):
        assert summarize(milk_items, today).formatted_total_value == "₱40.00"

    def test_accepts_datetime_for_today(self, milk_items):
        summary = summarize(milk_items, datetime.now())

        assert summary.spoilage_count == 1
        assert summary.total_quantity == 15
