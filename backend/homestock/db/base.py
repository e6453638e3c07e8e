"""
SQLAlchemy Declarative Base
Defines the base class for all SQLAlchemy models.
"""

from sqlalchemy.orm import declarative_base

# All database models (User, Product, Waste, etc.) inherit from this base.
# SQLAlchemy uses it to track all models and create their tables.
Base = declarative_base()
