"""Pydantic Schemas für HostEarning"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class EarningBase(BaseModel):
    """Basis-Schema für Einnahmen"""
    car_id: int
    trip_id: Optional[str] = Field(None, max_length=100)
    earning_period_start: date
    earning_period_end: date
    amount: float = Field(..., gt=0)
    client_profit_percentage: Optional[float] = Field(None, ge=0, le=100)
    host_profit_percentage: Optional[float] = Field(None, ge=0, le=100)
    earning_type: str = Field(default="hosting", max_length=50)
    payment_status: str = Field(default="pending", max_length=20)
    payment_source: Optional[str] = Field(None, max_length=50)
    payment_date: Optional[date] = None
    guest_name: Optional[str] = Field(None, max_length=200)
    guest_email: Optional[str] = Field(None, max_length=200)
    guest_phone: Optional[str] = Field(None, max_length=50)

    @field_validator('trip_id', 'guest_name', 'guest_email', 'guest_phone', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        """Konvertiert leere Strings zu None"""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode='after')
    def validate_period(self):
        """Beginn darf nicht nach dem Ende liegen"""
        if self.earning_period_start > self.earning_period_end:
            raise ValueError("earning_period_start darf nicht nach earning_period_end liegen")
        return self


class EarningCreate(EarningBase):
    """Schema für das Erfassen einer Einnahme"""
    pass


class EarningUpdate(BaseModel):
    """Schema für das Aktualisieren einer Einnahme (nur gesetzte Felder)"""
    trip_id: Optional[str] = Field(None, max_length=100)
    earning_period_start: Optional[date] = None
    earning_period_end: Optional[date] = None
    amount: Optional[float] = Field(None, gt=0)
    client_profit_percentage: Optional[float] = Field(None, ge=0, le=100)
    host_profit_percentage: Optional[float] = Field(None, ge=0, le=100)
    payment_status: Optional[str] = Field(None, max_length=20)
    payment_source: Optional[str] = Field(None, max_length=50)
    payment_date: Optional[date] = None
    guest_name: Optional[str] = Field(None, max_length=200)
    guest_email: Optional[str] = Field(None, max_length=200)
    guest_phone: Optional[str] = Field(None, max_length=50)


class EarningResponse(EarningBase):
    """Schema für die Antwort, inkl. berechneter Beträge"""
    id: int
    host_id: Optional[str] = None
    net_amount: float = 0.0
    client_share: float = 0.0

    class Config:
        from_attributes = True
