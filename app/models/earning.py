"""HostEarning (Einnahme aus einer Fahrt) Model"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Float
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp


class HostEarning(Base):
    """
    Repräsentiert die Einnahme aus einer abgeschlossenen Fahrt (Trip).

    client_profit_percentage = NULL bedeutet 70% für den Kunden.
    """
    __tablename__ = "host_earnings"

    id = Column(Integer, primary_key=True, index=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False, index=True)
    host_id = Column(String(100), nullable=True, index=True)
    trip_id = Column(String(100), nullable=True, index=True)  # Join-Key zu den Ausgaben

    earning_period_start = Column(Date, nullable=False, index=True)
    earning_period_end = Column(Date, nullable=False)

    amount = Column(Float, nullable=False)  # Bruttobetrag der Fahrt
    client_profit_percentage = Column(Float, nullable=True)
    host_profit_percentage = Column(Float, nullable=True)

    earning_type = Column(String(50), default="hosting", nullable=False)
    payment_status = Column(String(20), default="pending", nullable=False)
    payment_source = Column(String(50), nullable=True)  # z.B. "Turo", "Direct"
    payment_date = Column(Date, nullable=True)

    # Gast
    guest_name = Column(String(200), nullable=True)
    guest_email = Column(String(200), nullable=True)
    guest_phone = Column(String(50), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    # Beziehungen
    car = relationship("Car", back_populates="earnings")

    def __repr__(self):
        return f"<HostEarning trip={self.trip_id} {self.amount}$ ({self.earning_period_start} - {self.earning_period_end})>"
