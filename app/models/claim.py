"""HostClaim (Versicherungsfall) Model"""
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey, Float, Boolean
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp

CLAIM_STATUSES = ("pending", "approved", "denied", "closed")


class HostClaim(Base):
    """
    Repräsentiert einen Schadensfall, angelegt vom Host und vom Admin geprüft
    """
    __tablename__ = "host_claims"

    id = Column(Integer, primary_key=True, index=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False, index=True)
    host_id = Column(String(100), nullable=True, index=True)
    trip_id = Column(String(100), nullable=True)

    claim_type = Column(String(50), nullable=False)  # z.B. "damage", "theft", "toll"
    claim_status = Column(String(20), default="pending", nullable=True, index=True)
    claim_number = Column(String(100), nullable=True)
    claim_amount = Column(Float, nullable=True)
    approved_amount = Column(Float, nullable=True)
    is_paid = Column(Boolean, default=False, nullable=False)

    incident_date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    # Beziehungen
    car = relationship("Car", back_populates="claims")

    @property
    def effective_status(self) -> str:
        """Status mit Fallback: fehlender Status zählt als 'pending'"""
        return self.claim_status or "pending"

    def __repr__(self):
        return f"<HostClaim {self.claim_type} ({self.effective_status})>"
