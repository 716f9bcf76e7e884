"""Laden der Analysedaten eines Kunden und Berechnung der Kennzahlen"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from sqlalchemy import extract
from sqlalchemy.orm import Session

from app.config import settings
from app.models import Car, HostEarning, HostExpense, HostClaim, ClientCarExpense
from app.schemas.analytics import CarPerformance, PortfolioSummary
from app.services.car_analytics import CarAnalytics
from app.services.fixed_costs import get_monthly_fixed_costs
from app.services.portfolio import summarize_portfolio

logger = logging.getLogger(__name__)


@dataclass
class ClientAnalyticsData:
    """Alle Datensätze, die für die Kennzahlen eines Kunden gebraucht werden"""
    cars: List[Car] = field(default_factory=list)
    earnings: List[HostEarning] = field(default_factory=list)
    expenses: List[HostExpense] = field(default_factory=list)
    claims: List[HostClaim] = field(default_factory=list)
    fixed_expenses: List[ClientCarExpense] = field(default_factory=list)

    def for_car(self, car_id: int) -> "ClientAnalyticsData":
        """Teilmenge für ein einzelnes Fahrzeug"""
        return ClientAnalyticsData(
            cars=[c for c in self.cars if c.id == car_id],
            earnings=[e for e in self.earnings if e.car_id == car_id],
            expenses=[e for e in self.expenses if e.car_id == car_id],
            claims=[c for c in self.claims if c.car_id == car_id],
            fixed_expenses=[f for f in self.fixed_expenses if f.car_id == car_id],
        )


class AnalyticsService:
    """Service für Fahrzeug- und Gesamtkennzahlen eines Kunden"""

    def __init__(self, db: Session):
        self.db = db

    def load_client_data(self, client_id: str, year: Optional[int] = None) -> ClientAnalyticsData:
        """
        Lädt Fahrzeuge, Einnahmen, Ausgaben, Schadensfälle und Fixkosten.

        Args:
            client_id: Fahrzeughalter
            year: Optionaler Jahresfilter (Einnahmen nach Startdatum,
                Ausgaben nach Ausgabendatum, Schadensfälle nach Schadensdatum)
        """
        cars = self.db.query(Car).filter(Car.client_id == client_id).order_by(Car.id).all()
        if not cars:
            return ClientAnalyticsData()

        car_ids = [car.id for car in cars]

        earnings_query = self.db.query(HostEarning).filter(HostEarning.car_id.in_(car_ids))
        expenses_query = self.db.query(HostExpense).filter(HostExpense.car_id.in_(car_ids))
        claims_query = self.db.query(HostClaim).filter(HostClaim.car_id.in_(car_ids))

        if year:
            earnings_query = earnings_query.filter(extract("year", HostEarning.earning_period_start) == year)
            expenses_query = expenses_query.filter(extract("year", HostExpense.expense_date) == year)
            claims_query = claims_query.filter(extract("year", HostClaim.incident_date) == year)

        # Fixkosten sind nicht jahresgebunden, aktiv ist was am Stichtag läuft
        fixed_expenses = self.db.query(ClientCarExpense).filter(
            ClientCarExpense.car_id.in_(car_ids)
        ).all()

        data = ClientAnalyticsData(
            cars=cars,
            earnings=earnings_query.order_by(HostEarning.earning_period_start.desc()).all(),
            expenses=expenses_query.order_by(HostExpense.expense_date.desc()).all(),
            claims=claims_query.order_by(HostClaim.incident_date.desc()).all(),
            fixed_expenses=fixed_expenses,
        )
        logger.debug(
            f"Analytics data for client {client_id} (year={year}): {len(cars)} cars, "
            f"{len(data.earnings)} earnings, {len(data.expenses)} expenses, {len(data.claims)} claims"
        )
        return data

    @staticmethod
    def car_performances(
        data: ClientAnalyticsData,
        as_of: Optional[date] = None
    ) -> List[CarPerformance]:
        """Kennzahlen für jedes Fahrzeug aus bereits geladenen Daten"""
        as_of = as_of or date.today()
        performances = []
        for car in data.cars:
            car_data = data.for_car(car.id)
            performances.append(CarAnalytics.calculate_performance(
                earnings=car_data.earnings,
                expenses=car_data.expenses,
                claims=car_data.claims,
                monthly_fixed_costs=get_monthly_fixed_costs(car_data.fixed_expenses, car.id, as_of),
                car=car,
                as_of=as_of,
                window_days=settings.utilization_window_days
            ))
        return performances

    @staticmethod
    def portfolio_summary(data: ClientAnalyticsData) -> PortfolioSummary:
        """Gesamtübersicht aus bereits geladenen Daten"""
        return summarize_portfolio(data.earnings, data.expenses, data.claims)

    def available_years(self, client_id: str, current_year: Optional[int] = None) -> List[int]:
        """
        Jahre mit Einnahmen, Ausgaben oder Schadensfällen, plus das aktuelle Jahr.

        Returns:
            Absteigend sortierte Jahresliste
        """
        current_year = current_year or date.today().year
        years = {current_year}

        data = self.load_client_data(client_id)
        years.update(e.earning_period_start.year for e in data.earnings if e.earning_period_start)
        years.update(e.expense_date.year for e in data.expenses if e.expense_date)
        years.update(c.incident_date.year for c in data.claims if c.incident_date)

        return sorted(years, reverse=True)
