"""
Inventory synchronization core.

Keeps an in-memory item collection consistent with a durable key-value
store and derives the summary figures shown next to the inventory table:
- Items are created, edited, restocked and removed through the sync engine
- Every mutation lands in memory first, the store is written in the background
- Expired items can be swept in a single pass
"""
