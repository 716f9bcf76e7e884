"""Router für Kennzahlen (pro Fahrzeug und Gesamtübersicht)"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.analytics import AnalyticsYears, CarPerformance, PortfolioSummary
from app.dependencies import get_current_client_id, get_client_car
from app.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/cars", response_model=List[CarPerformance])
async def car_performances(
    year: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Kennzahlen aller Fahrzeuge des Kunden"""
    service = AnalyticsService(db)
    return service.car_performances(service.load_client_data(client_id, year))


@router.get("/cars/{car_id}", response_model=CarPerformance)
async def car_performance(
    car_id: int,
    year: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Kennzahlen eines einzelnen Fahrzeugs"""
    get_client_car(db, car_id, client_id)
    service = AnalyticsService(db)
    data = service.load_client_data(client_id, year).for_car(car_id)
    return service.car_performances(data)[0]


@router.get("/summary", response_model=PortfolioSummary)
async def portfolio_summary(
    year: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Gesamtübersicht über alle Fahrzeuge"""
    service = AnalyticsService(db)
    return service.portfolio_summary(service.load_client_data(client_id, year))


@router.get("/years", response_model=AnalyticsYears)
async def available_years(
    year: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Jahre für den Jahresfilter"""
    years = AnalyticsService(db).available_years(client_id)
    return AnalyticsYears(years=years, selected_year=year)
