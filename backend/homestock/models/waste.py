"""
Waste Model
Records of discarded food, with reason and optional photo.
"""

from sqlalchemy import Column, String, Float, Enum as SQLEnum
import enum

from homestock.models.base import OwnedModel
from homestock.models.food import QuantityUnit


class WasteCategory(str, enum.Enum):
    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"
    BAKERY = "Bakery"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    GRAINS = "Grains"
    SNACKS = "Snacks"
    BEVERAGES = "Beverages"
    LEFTOVERS = "Leftovers"
    OTHER = "Other"


class WasteReason(str, enum.Enum):
    EXPIRED = "Expired"
    SPOILED = "Spoiled"
    MOLDY = "Moldy"
    FREEZER_BURN = "Freezer Burn"
    OVERCOOKED = "Overcooked"
    DIDNT_LIKE = "Didnt Like"
    TOO_MUCH_PREPARED = "Too Much Prepared"
    FORGOT_ABOUT_IT = "Forgot About It"
    OTHER = "Other"


class WasteRecord(OwnedModel):
    """
    Waste record.

    Fields:
        item_name: What was thrown away
        category: WasteCategory
        quantity / unit: Amount wasted
        reason: WasteReason
        date: Day of disposal as sent by the client (string)
        image_url: "/images/<file>" for uploaded photos, or an external URL
    """
    __tablename__ = "waste_records"

    item_name = Column(String(255), nullable=False)
    category = Column(SQLEnum(WasteCategory, name="waste_category"), nullable=False, index=True)

    quantity = Column(Float, nullable=False)
    unit = Column(
        SQLEnum(QuantityUnit, name="quantity_unit"),
        default=QuantityUnit.COUNT,
        nullable=False
    )

    reason = Column(SQLEnum(WasteReason, name="waste_reason"), nullable=False)
    date = Column(String(50), nullable=False)
    image_url = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<WasteRecord(id={self.id}, item_name='{self.item_name}')>"
