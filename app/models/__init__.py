"""SQLAlchemy Models für das TESLYS Hosting-Backend"""
from app.models.car import Car
from app.models.earning import HostEarning
from app.models.expense import HostExpense
from app.models.claim import HostClaim
from app.models.fixed_expense import ClientCarExpense

__all__ = [
    "Car",
    "HostEarning",
    "HostExpense",
    "HostClaim",
    "ClientCarExpense",
]
