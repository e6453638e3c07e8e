"""
Budget Model
Spending budgets per category and period.
"""

from sqlalchemy import Column, String, Float

from homestock.models.base import OwnedModel


class Budget(OwnedModel):
    __tablename__ = "budgets"

    budget_name = Column(String(255), nullable=False)
    total_amount = Column(Float, nullable=False)

    # Period bounds as plain strings; lexicographic order only if ISO formatted
    start_date = Column(String(50), nullable=False)
    end_date = Column(String(50), nullable=False)

    category = Column(String(100), nullable=False)
    payment_method = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Budget(id={self.id}, budget_name='{self.budget_name}')>"
