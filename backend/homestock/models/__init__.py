"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from homestock.db.base import Base
from homestock.models.base import BaseModel, OwnedModel
from homestock.models.user import User, UserRole
from homestock.models.user_token import UserToken
from homestock.models.product import Product
from homestock.models.food import FoodItem, QuantityUnit
from homestock.models.shopping_list import ShoppingListItem
from homestock.models.budget import Budget
from homestock.models.category import Category, CategoryStatus
from homestock.models.waste import WasteRecord, WasteCategory, WasteReason
from homestock.models.error_log import ErrorLog

__all__ = [
    "Base",
    "BaseModel",
    "OwnedModel",
    "User",
    "UserRole",
    "UserToken",
    "Product",
    "FoodItem",
    "QuantityUnit",
    "ShoppingListItem",
    "Budget",
    "Category",
    "CategoryStatus",
    "WasteRecord",
    "WasteCategory",
    "WasteReason",
    "ErrorLog",
]
