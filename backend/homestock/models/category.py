"""
Category Model
User-defined categories for products, food, budgets and waste.

Other entities reference a category by its name. Renaming or deleting
a category does not touch the records that use it.
"""

from sqlalchemy import Column, String, Enum as SQLEnum
import enum

from homestock.models.base import OwnedModel


class CategoryStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Category(OwnedModel):
    __tablename__ = "categories"

    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=True)

    status = Column(
        SQLEnum(CategoryStatus, name="category_status"),
        default=CategoryStatus.ACTIVE,
        nullable=False
    )

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
