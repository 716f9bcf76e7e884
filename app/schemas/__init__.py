"""Pydantic Schemas für Validierung"""
from app.schemas.car import CarCreate, CarUpdate, CarStatusUpdate, CarResponse
from app.schemas.earning import EarningCreate, EarningUpdate, EarningResponse
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from app.schemas.claim import ClaimCreate, ClaimUpdate, ClaimStatusUpdate, ClaimResponse
from app.schemas.fixed_expense import FixedExpenseCreate, FixedExpenseUpdate, FixedExpenseResponse
from app.schemas.booking import ConflictingEarning, ValidationResult, DateValidationRequest
from app.schemas.analytics import CarPerformance, PortfolioSummary, AnalyticsYears

__all__ = [
    "CarCreate",
    "CarUpdate",
    "CarStatusUpdate",
    "CarResponse",
    "EarningCreate",
    "EarningUpdate",
    "EarningResponse",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "ClaimCreate",
    "ClaimUpdate",
    "ClaimStatusUpdate",
    "ClaimResponse",
    "FixedExpenseCreate",
    "FixedExpenseUpdate",
    "FixedExpenseResponse",
    "ConflictingEarning",
    "ValidationResult",
    "DateValidationRequest",
    "CarPerformance",
    "PortfolioSummary",
    "AnalyticsYears",
]
