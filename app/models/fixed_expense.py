"""ClientCarExpense (Fixkosten des Kunden pro Fahrzeug) Model"""
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey, Float
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp

FREQUENCIES = ("monthly", "quarterly", "yearly")


class ClientCarExpense(Base):
    """
    Wiederkehrende Fixkosten eines Fahrzeugs (Versicherung, Finanzierung, Zulassung, ...)
    """
    __tablename__ = "client_car_expenses"

    id = Column(Integer, primary_key=True, index=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False, index=True)
    client_id = Column(String(100), nullable=False, index=True)

    expense_type = Column(String(50), nullable=False)  # z.B. "insurance", "financing"
    amount = Column(Float, nullable=False)
    frequency = Column(String(20), default="monthly", nullable=False)
    provider_name = Column(String(200), nullable=True)
    policy_number = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # NULL = läuft unbefristet
    notes = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    # Beziehungen
    car = relationship("Car", back_populates="fixed_expenses")

    def __repr__(self):
        return f"<ClientCarExpense {self.expense_type}: {self.amount}$ {self.frequency}>"
