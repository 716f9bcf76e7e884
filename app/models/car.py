"""Car (Fahrzeug) Model"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp

# Statuswechsel passieren über Rückgabe-Anfragen oder die Admin-Verwaltung
CAR_STATUSES = ("available", "hosted", "maintenance", "unavailable")


class Car(Base):
    """
    Repräsentiert ein Fahrzeug eines Kunden, das von einem Host betreut wird
    """
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(String(100), nullable=False, index=True)  # Fahrzeughalter (Auth-Provider User-ID)
    host_id = Column(String(100), nullable=True, index=True)

    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    status = Column(String(20), default="available", nullable=False, index=True)

    license_plate = Column(String(20), nullable=True)
    vin_number = Column(String(17), nullable=True)
    color = Column(String(50), nullable=True)
    location = Column(String(200), nullable=True)
    mileage = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    # Beziehungen
    earnings = relationship("HostEarning", back_populates="car", cascade="all, delete-orphan")
    expenses = relationship("HostExpense", back_populates="car", cascade="all, delete-orphan")
    claims = relationship("HostClaim", back_populates="car", cascade="all, delete-orphan")
    fixed_expenses = relationship("ClientCarExpense", back_populates="car", cascade="all, delete-orphan")

    @property
    def display_name(self):
        """z.B. '2023 Tesla Model Y'"""
        return f"{self.year} {self.make} {self.model}"

    def __repr__(self):
        return f"<Car {self.display_name} ({self.status})>"
