"""Pydantic Schemas für Car"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.models.car import CAR_STATUSES


def _validate_status(v: str) -> str:
    status = v.strip().lower()
    if status not in CAR_STATUSES:
        raise ValueError(f"Status muss einer von {', '.join(CAR_STATUSES)} sein")
    return status


def _validate_year(v: int) -> int:
    # Modelljahr darf höchstens ein Jahr in der Zukunft liegen
    if v < 2008 or v > date.today().year + 1:
        raise ValueError("Ungültiges Modelljahr")
    return v


class CarBase(BaseModel):
    """Basis-Schema für Fahrzeuge (ohne client_id, kommt aus der Session)"""
    make: str = Field(default="Tesla", min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int
    license_plate: Optional[str] = Field(None, max_length=20)
    vin_number: Optional[str] = Field(None, max_length=17)
    color: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=200)
    mileage: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None

    @field_validator('make', 'model')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Hersteller/Modell dürfen nicht leer sein"""
        if not v or not v.strip():
            raise ValueError("Hersteller und Modell dürfen nicht leer sein")
        return v.strip()

    @field_validator('year')
    @classmethod
    def validate_year(cls, v: int) -> int:
        return _validate_year(v)

    @field_validator('vin_number')
    @classmethod
    def validate_vin(cls, v: Optional[str]) -> Optional[str]:
        """VIN: 17 Zeichen, Großbuchstaben"""
        if v is None or not v.strip():
            return None
        vin = v.strip().upper()
        if len(vin) != 17:
            raise ValueError("VIN muss 17 Zeichen lang sein")
        return vin


class CarCreate(CarBase):
    """Schema für das Anlegen eines Fahrzeugs"""
    status: str = "available"

    @field_validator('status')
    @classmethod
    def validate_status(cls, v: str) -> str:
        return _validate_status(v)


class CarUpdate(BaseModel):
    """Schema für das Aktualisieren eines Fahrzeugs"""
    make: Optional[str] = Field(None, min_length=1, max_length=100)
    model: Optional[str] = Field(None, min_length=1, max_length=100)
    year: Optional[int] = None
    license_plate: Optional[str] = Field(None, max_length=20)
    color: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=200)
    mileage: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    host_id: Optional[str] = Field(None, max_length=100)

    @field_validator('year')
    @classmethod
    def validate_year(cls, v: Optional[int]) -> Optional[int]:
        return _validate_year(v) if v is not None else None


class CarStatusUpdate(BaseModel):
    """Statuswechsel (Rückgabe-Anfrage, Wartung, Admin)"""
    status: str

    @field_validator('status')
    @classmethod
    def validate_status(cls, v: str) -> str:
        return _validate_status(v)


class CarResponse(CarBase):
    """Schema für die Antwort"""
    id: int
    client_id: str
    host_id: Optional[str]
    status: str

    class Config:
        from_attributes = True
