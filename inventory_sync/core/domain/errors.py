"""
Error taxonomy for inventory operations.

ValidationError and NotFoundError are raised to the caller before any state
changes. StorePersistenceError is raised by store adapters and only ever
observed inside background store tasks, where it is logged.
"""


class InventoryError(Exception):
    """Base class for every error raised by the inventory core."""


class ValidationError(InventoryError):
    """Input rejected: negative quantity/price, empty name or non-numeric value."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(InventoryError):
    """The operation targets an id that is not in the item cache."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")


class StorePersistenceError(InventoryError):
    """A store operation failed; the cache keeps the already-applied change."""

    def __init__(self, operation: str, item_id=None, cause=None):
        self.operation = operation
        self.item_id = item_id
        self.cause = cause
        detail = f" ({cause})" if cause is not None else ""
        target = f" for item {item_id}" if item_id is not None else ""
        super().__init__(f"Store {operation} failed{target}{detail}")
