"""HostExpense (Ausgabe zu einem Fahrzeug/Trip) Model"""
from datetime import date
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey, Float
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp


class HostExpense(Base):
    """
    Repräsentiert eine Ausgabe des Hosts, optional einer Fahrt zugeordnet.

    Es gibt kein gespeichertes Gesamt-Feld: die Summe wird immer
    aus den fünf Kostenbestandteilen berechnet (siehe total_cost).
    """
    __tablename__ = "host_expenses"

    id = Column(Integer, primary_key=True, index=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False, index=True)
    host_id = Column(String(100), nullable=True, index=True)
    trip_id = Column(String(100), nullable=True, index=True)

    expense_type = Column(String(50), nullable=False)  # z.B. "trip", "cleaning", "maintenance"
    expense_date = Column(Date, default=date.today, nullable=False)
    description = Column(Text, nullable=True)
    guest_name = Column(String(200), nullable=True)

    # Kostenbestandteile
    amount = Column(Float, default=0.0, nullable=False)
    toll_cost = Column(Float, default=0.0, nullable=True)
    delivery_cost = Column(Float, default=0.0, nullable=True)
    carwash_cost = Column(Float, default=0.0, nullable=True)
    ev_charge_cost = Column(Float, default=0.0, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    # Beziehungen
    car = relationship("Car", back_populates="expenses")

    @property
    def total_cost(self) -> float:
        """Summe aller fünf Kostenbestandteile"""
        from app.services.expense_matching import expense_total
        return expense_total(self)

    def __repr__(self):
        return f"<HostExpense {self.expense_type} trip={self.trip_id}: {self.total_cost}$>"
