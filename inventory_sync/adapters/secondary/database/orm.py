from sqlalchemy import Column, Date, Float, Integer, String
from inventory_sync.adapters.secondary.database.config import Base

class InventoryItemModel(Base):
    __tablename__ = "inventory"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, index=True)  # non-unique, for lookups by name
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False, default=0.0)
    expiration = Column(Date, nullable=False)
