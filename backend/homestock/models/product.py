"""
Product Model
Inventory products with price, stock quantity and optional dates.

Dates are kept as the strings the client sends (e.g. "2024-05-01");
they are not parsed or normalized.
"""

from sqlalchemy import Column, String, Float

from homestock.models.base import OwnedModel


class Product(OwnedModel):
    __tablename__ = "products"

    name = Column(String(255), nullable=False)

    # Category is referenced by name, not id (no referential integrity)
    category = Column(String(100), nullable=False, index=True)

    quantity = Column(Float, nullable=False)
    price = Column(Float, nullable=False)

    manufacture_date = Column(String(50), nullable=True)
    expiry_date = Column(String(50), nullable=True)

    # Image URL (external host or local path)
    image = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"
