"""Pydantic Schemas für abgeleitete Kennzahlen (werden nicht gespeichert)"""
from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel

Recommendation = Literal["keep_active", "optimize", "monitor", "return"]
RiskLevel = Literal["low", "medium", "high"]


class CarPerformance(BaseModel):
    """Kennzahlen eines einzelnen Fahrzeugs"""
    car_id: Optional[int] = None
    car_make: Optional[str] = None
    car_model: Optional[str] = None
    car_year: Optional[int] = None
    car_status: Optional[str] = None

    total_earnings: float = 0.0
    total_expenses: float = 0.0
    monthly_fixed_costs: float = 0.0
    true_net_profit: float = 0.0
    net_profit: float = 0.0
    profit_margin: float = 0.0
    roi: float = 0.0

    total_trips: int = 0
    average_per_trip: float = 0.0
    active_days: int = 0
    utilization_rate: float = 0.0
    break_even_trips: int = 0
    last_trip_date: Optional[date] = None

    total_claims: int = 0
    claims_amount: float = 0.0
    pending_claims: int = 0
    denied_claims: int = 0

    risk_score: float = 0.0
    risk_level: RiskLevel = "low"
    recommendation: Recommendation = "keep_active"
    recommendation_reason: str = ""


class PortfolioSummary(BaseModel):
    """Gesamtübersicht über alle Fahrzeuge eines Kunden"""
    total_earnings: float = 0.0
    total_expenses: float = 0.0
    net_profit: float = 0.0
    active_days: int = 0
    total_trips: int = 0
    average_per_trip: float = 0.0
    total_claims: int = 0
    total_claim_amount: float = 0.0
    approved_claims_amount: float = 0.0
    pending_claims: int = 0


class AnalyticsYears(BaseModel):
    """Verfügbare Jahre für den Jahresfilter (absteigend)"""
    years: List[int]
    selected_year: Optional[int] = None
