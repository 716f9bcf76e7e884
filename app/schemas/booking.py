"""Pydantic Schemas für die Buchungskonflikt-Prüfung"""
from datetime import date
from typing import List, Optional, Union
from pydantic import BaseModel


class ConflictingEarning(BaseModel):
    """Bestehende Einnahme, deren Zeitraum sich mit dem angefragten überschneidet"""
    id: int
    trip_id: Optional[str] = None
    earning_period_start: date
    earning_period_end: date
    guest_name: Optional[str] = None
    amount: float

    class Config:
        from_attributes = True


class ValidationResult(BaseModel):
    """Ergebnis der Prüfung; error ist gesetzt, wenn gar nicht geprüft werden konnte"""
    is_valid: bool
    conflicts: List[ConflictingEarning] = []
    error: Optional[str] = None


class DateValidationRequest(BaseModel):
    """Anfrage für POST /earnings/validate-dates (Strings werden im Service geprüft)"""
    car_id: Optional[int] = None
    start_date: Optional[Union[date, str]] = None
    end_date: Optional[Union[date, str]] = None
    exclude_id: Optional[int] = None
