"""Pydantic Schemas für HostClaim"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.models.claim import CLAIM_STATUSES


def _validate_claim_status(v: Optional[str]) -> str:
    # Fehlender Status wird als "pending" gespeichert
    status = (v or "pending").strip().lower()
    if status not in CLAIM_STATUSES:
        raise ValueError(f"Status muss einer von {', '.join(CLAIM_STATUSES)} sein")
    return status


class ClaimBase(BaseModel):
    """Basis-Schema für Schadensfälle"""
    car_id: int
    trip_id: Optional[str] = Field(None, max_length=100)
    claim_type: str = Field(..., min_length=1, max_length=50)
    claim_number: Optional[str] = Field(None, max_length=100)
    claim_amount: Optional[float] = Field(None, ge=0)
    incident_date: date
    description: str = Field(..., min_length=1)
    notes: Optional[str] = None

    @field_validator('incident_date')
    @classmethod
    def validate_incident_date(cls, v: date) -> date:
        """Schadensdatum darf nicht in der Zukunft liegen"""
        if v > date.today():
            raise ValueError("Schadensdatum darf nicht in der Zukunft liegen")
        return v


class ClaimCreate(ClaimBase):
    """Schema für das Anlegen eines Schadensfalls (Host)"""
    pass


class ClaimUpdate(BaseModel):
    """Schema für das Aktualisieren eines Schadensfalls"""
    claim_type: Optional[str] = Field(None, min_length=1, max_length=50)
    claim_number: Optional[str] = Field(None, max_length=100)
    claim_amount: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    is_paid: Optional[bool] = None


class ClaimStatusUpdate(BaseModel):
    """Statuswechsel durch die Admin-Prüfung"""
    claim_status: str
    approved_amount: Optional[float] = Field(None, ge=0)

    @field_validator('claim_status')
    @classmethod
    def validate_status(cls, v: Optional[str]) -> str:
        return _validate_claim_status(v)


class ClaimResponse(ClaimBase):
    """Schema für die Antwort"""
    id: int
    host_id: Optional[str]
    claim_status: str
    approved_amount: Optional[float]
    is_paid: bool

    @field_validator('claim_status', mode='before')
    @classmethod
    def default_status(cls, v: Optional[str]) -> str:
        return v or "pending"

    @field_validator('incident_date')
    @classmethod
    def validate_incident_date(cls, v: date) -> date:
        # Gespeicherte Daten werden bei der Ausgabe nicht erneut geprüft
        return v

    class Config:
        from_attributes = True
