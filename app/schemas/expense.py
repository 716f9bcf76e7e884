"""Pydantic Schemas für HostExpense"""
from datetime import date, datetime
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator


def _parse_expense_date(v: Union[str, date]) -> date:
    # Wenn bereits ein date-Objekt, validiere direkt
    if isinstance(v, date):
        expense_date_obj = v
    else:
        try:
            expense_date_obj = datetime.strptime(v, "%Y-%m-%d").date()
        except ValueError:
            raise ValueError("Ausgabendatum muss im Format YYYY-MM-DD vorliegen")

    if expense_date_obj > date.today():
        raise ValueError("Ausgabendatum darf nicht in der Zukunft liegen")

    return expense_date_obj


class ExpenseBase(BaseModel):
    """Basis-Schema für Ausgaben"""
    car_id: int
    trip_id: Optional[str] = Field(None, max_length=100)
    expense_type: str = Field(..., min_length=1, max_length=50)
    expense_date: Union[str, date]
    description: Optional[str] = None
    guest_name: Optional[str] = Field(None, max_length=200)
    amount: float = Field(default=0.0, ge=0)
    toll_cost: float = Field(default=0.0, ge=0)
    delivery_cost: float = Field(default=0.0, ge=0)
    carwash_cost: float = Field(default=0.0, ge=0)
    ev_charge_cost: float = Field(default=0.0, ge=0)

    @field_validator('trip_id', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        """Konvertiert leere Strings zu None"""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v

    @field_validator('expense_type')
    @classmethod
    def validate_expense_type(cls, v: str) -> str:
        """Validiert die Ausgabenart"""
        if not v or not v.strip():
            raise ValueError("Ausgabenart darf nicht leer sein")
        return v.strip()

    @field_validator('expense_date')
    @classmethod
    def validate_expense_date(cls, v: Union[str, date]) -> date:
        """Validiert das Ausgabendatum"""
        return _parse_expense_date(v)


class ExpenseCreate(ExpenseBase):
    """Schema für das Erstellen einer Ausgabe"""
    pass


class ExpenseUpdate(BaseModel):
    """Schema für das Aktualisieren einer Ausgabe"""
    trip_id: Optional[str] = Field(None, max_length=100)
    expense_type: Optional[str] = Field(None, min_length=1, max_length=50)
    expense_date: Optional[Union[str, date]] = None
    description: Optional[str] = None
    guest_name: Optional[str] = Field(None, max_length=200)
    amount: Optional[float] = Field(None, ge=0)
    toll_cost: Optional[float] = Field(None, ge=0)
    delivery_cost: Optional[float] = Field(None, ge=0)
    carwash_cost: Optional[float] = Field(None, ge=0)
    ev_charge_cost: Optional[float] = Field(None, ge=0)

    @field_validator('expense_date')
    @classmethod
    def validate_expense_date(cls, v: Optional[Union[str, date]]) -> Optional[date]:
        """Validiert das Ausgabendatum"""
        if v is None:
            return None
        return _parse_expense_date(v)


class ExpenseResponse(BaseModel):
    """Schema für die Antwort (total_cost wird immer neu berechnet)"""
    id: int
    car_id: int
    host_id: Optional[str]
    trip_id: Optional[str]
    expense_type: str
    expense_date: date
    description: Optional[str]
    guest_name: Optional[str]
    amount: float
    toll_cost: Optional[float]
    delivery_cost: Optional[float]
    carwash_cost: Optional[float]
    ev_charge_cost: Optional[float]
    total_cost: float

    class Config:
        from_attributes = True
