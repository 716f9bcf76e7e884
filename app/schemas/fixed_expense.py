"""Pydantic Schemas für ClientCarExpense (Fixkosten)"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.fixed_expense import FREQUENCIES


class FixedExpenseBase(BaseModel):
    """Basis-Schema für Fixkosten"""
    car_id: int
    expense_type: str = Field(..., min_length=1, max_length=50)
    amount: float = Field(..., gt=0)
    frequency: str = "monthly"
    provider_name: Optional[str] = Field(None, max_length=200)
    policy_number: Optional[str] = Field(None, max_length=100)
    start_date: date
    end_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator('frequency')
    @classmethod
    def validate_frequency(cls, v: str) -> str:
        """Nur monthly, quarterly oder yearly"""
        frequency = v.strip().lower()
        if frequency not in FREQUENCIES:
            raise ValueError(f"Intervall muss einer von {', '.join(FREQUENCIES)} sein")
        return frequency

    @model_validator(mode='after')
    def validate_dates(self):
        """Enddatum darf nicht vor dem Startdatum liegen"""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date darf nicht vor start_date liegen")
        return self


class FixedExpenseCreate(FixedExpenseBase):
    """Schema für das Anlegen von Fixkosten"""
    pass


class FixedExpenseUpdate(BaseModel):
    """Schema für das Aktualisieren von Fixkosten"""
    expense_type: Optional[str] = Field(None, min_length=1, max_length=50)
    amount: Optional[float] = Field(None, gt=0)
    frequency: Optional[str] = None
    provider_name: Optional[str] = Field(None, max_length=200)
    policy_number: Optional[str] = Field(None, max_length=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator('frequency')
    @classmethod
    def validate_frequency(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        frequency = v.strip().lower()
        if frequency not in FREQUENCIES:
            raise ValueError(f"Intervall muss einer von {', '.join(FREQUENCIES)} sein")
        return frequency


class FixedExpenseResponse(FixedExpenseBase):
    """Schema für die Antwort, inkl. Monatsbetrag"""
    id: int
    client_id: str
    monthly_amount: float = 0.0

    class Config:
        from_attributes = True
