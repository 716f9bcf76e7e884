"""Kennzahlen pro Fahrzeug (Gewinn, Auslastung, Risiko, Empfehlung)"""
import logging
import math
from datetime import date, timedelta
from typing import Any, Iterable, List, Optional, Tuple

from app.schemas.analytics import CarPerformance
from app.services.expense_matching import earning_client_share, expense_total, field_value
from app.utils.datetime_utils import to_date

logger = logging.getLogger(__name__)

UTILIZATION_WINDOW_DAYS = 30

# Grenzen für die Risiko-Einstufung (Anzeige/Farbe)
RISK_MEDIUM_THRESHOLD = 30
RISK_HIGH_THRESHOLD = 60


def claim_status(claim: Any) -> str:
    """Status eines Schadensfalls, fehlender Status zählt als 'pending'"""
    return field_value(claim, "claim_status") or "pending"


def _car_fields(car: Optional[Any]) -> dict:
    """Stammdaten des Fahrzeugs für das Ergebnis"""
    if car is None:
        return {}
    return {
        "car_id": field_value(car, "id"),
        "car_make": field_value(car, "make"),
        "car_model": field_value(car, "model"),
        "car_year": field_value(car, "year"),
        "car_status": field_value(car, "status"),
    }


def risk_level(score: float) -> str:
    """<30 niedrig, 30-60 mittel, >=60 hoch"""
    if score < RISK_MEDIUM_THRESHOLD:
        return "low"
    if score < RISK_HIGH_THRESHOLD:
        return "medium"
    return "high"


class CarAnalytics:
    """Service für die Kennzahlen eines einzelnen Fahrzeugs"""

    @staticmethod
    def calculate_performance(
        earnings: Iterable[Any],
        expenses: Iterable[Any],
        claims: Iterable[Any],
        monthly_fixed_costs: float = 0.0,
        car: Optional[Any] = None,
        as_of: Optional[date] = None,
        window_days: int = UTILIZATION_WINDOW_DAYS
    ) -> CarPerformance:
        """
        Fasst Einnahmen, Ausgaben und Schadensfälle eines Fahrzeugs zusammen.

        Args:
            earnings: Einnahmen des Fahrzeugs
            expenses: Ausgaben des Fahrzeugs (Trip-Zuordnung nur innerhalb dieser Liste)
            claims: Schadensfälle des Fahrzeugs
            monthly_fixed_costs: Monatliche Fixkosten (siehe fixed_costs)
            car: Optional das Fahrzeug für die Stammdaten im Ergebnis
            as_of: Stichtag für die Auslastung (Standard: heute)
            window_days: Länge des Auslastungsfensters in Tagen

        Returns:
            CarPerformance; leere Eingaben ergeben einen Datensatz mit Nullwerten
        """
        earnings = list(earnings)
        expenses = list(expenses)
        claims = list(claims)
        as_of = as_of or date.today()
        monthly_fixed_costs = float(monthly_fixed_costs or 0)

        if not earnings and not expenses and not claims:
            return CarAnalytics._empty_performance(car, monthly_fixed_costs)

        # Kundenanteil je Fahrt nach Abzug der Trip-Ausgaben
        total_earnings = sum((earning_client_share(e, expenses) for e in earnings), 0.0)
        total_expenses = sum((expense_total(e) for e in expenses), 0.0)

        true_net_profit = total_earnings - monthly_fixed_costs
        profit_margin = (true_net_profit / total_earnings * 100) if total_earnings > 0 else 0.0

        total_trips = len(earnings)
        average_per_trip = total_earnings / total_trips if total_trips > 0 else 0.0

        start_dates = [to_date(field_value(e, "earning_period_start")) for e in earnings]
        active_days = len({d for d in start_dates if d is not None})

        utilization_rate = CarAnalytics.calculate_utilization(start_dates, as_of, window_days)

        gross_total = sum((float(field_value(e, "amount") or 0) for e in earnings), 0.0)
        roi = (true_net_profit / gross_total * 100) if gross_total > 0 else 0.0

        break_even_trips = math.ceil(monthly_fixed_costs / average_per_trip) if average_per_trip > 0 else 0

        end_dates = [to_date(field_value(e, "earning_period_end")) for e in earnings]
        end_dates = [d for d in end_dates if d is not None]
        last_trip_date = max(end_dates) if end_dates else None

        total_claims = len(claims)
        claims_amount = sum((float(field_value(c, "claim_amount") or 0) for c in claims), 0.0)
        pending_claims = sum(1 for c in claims if claim_status(c) == "pending")
        denied_claims = sum(1 for c in claims if claim_status(c) == "denied")

        risk_score = CarAnalytics.calculate_risk_score(
            total_claims, pending_claims + denied_claims, utilization_rate
        )

        recommendation, reason = CarAnalytics.recommend(
            risk_score=risk_score,
            true_net_profit=true_net_profit,
            profit_margin=profit_margin,
            utilization_rate=utilization_rate,
            break_even_trips=break_even_trips,
            total_trips=total_trips
        )
        logger.debug(
            f"Car {field_value(car, 'id') if car is not None else '-'}: "
            f"{total_trips} trips, risk {risk_score:.0f}, recommendation {recommendation}"
        )

        return CarPerformance(
            **_car_fields(car),
            total_earnings=total_earnings,
            total_expenses=total_expenses,
            monthly_fixed_costs=monthly_fixed_costs,
            true_net_profit=true_net_profit,
            net_profit=true_net_profit,
            profit_margin=profit_margin,
            roi=roi,
            total_trips=total_trips,
            average_per_trip=average_per_trip,
            active_days=active_days,
            utilization_rate=utilization_rate,
            break_even_trips=break_even_trips,
            last_trip_date=last_trip_date,
            total_claims=total_claims,
            claims_amount=claims_amount,
            pending_claims=pending_claims,
            denied_claims=denied_claims,
            risk_score=risk_score,
            risk_level=risk_level(risk_score),
            recommendation=recommendation,
            recommendation_reason=reason
        )

    @staticmethod
    def _empty_performance(car: Optional[Any], monthly_fixed_costs: float) -> CarPerformance:
        """
        Leerzustand: keine Fahrten, Ausgaben oder Schadensfälle.

        Kennzahlen bleiben 0, die Empfehlungsregeln gelten trotzdem:
        laufende Fixkosten ohne Fahrten führen zu monitor bzw. return.
        """
        true_net_profit = -monthly_fixed_costs
        recommendation, reason = CarAnalytics.recommend(
            risk_score=0.0,
            true_net_profit=true_net_profit,
            profit_margin=0.0,
            utilization_rate=0.0,
            break_even_trips=0,
            total_trips=0
        )
        return CarPerformance(
            **_car_fields(car),
            monthly_fixed_costs=monthly_fixed_costs,
            true_net_profit=true_net_profit,
            net_profit=true_net_profit,
            recommendation=recommendation,
            recommendation_reason=f"No trips recorded yet. {reason}"
        )

    @staticmethod
    def calculate_utilization(
        start_dates: List[Optional[date]],
        as_of: date,
        window_days: int = UTILIZATION_WINDOW_DAYS
    ) -> float:
        """
        Fahrten im Zeitfenster / window_days × 100.

        Das Fenster umfasst genau window_days Kalendertage einschließlich
        as_of. Es wird NICHT auf 100 begrenzt: mehrere Fahrten am selben Tag
        ergeben Werte über 100%.
        """
        window_start = as_of - timedelta(days=window_days - 1)
        recent_trips = sum(1 for d in start_dates if d is not None and window_start <= d <= as_of)
        return recent_trips / window_days * 100

    @staticmethod
    def calculate_risk_score(
        total_claims: int,
        problem_claims: int,
        utilization_rate: float
    ) -> float:
        """
        Risiko-Heuristik (0-100) aus Schadensfällen und Auslastung.

        - Häufigkeit: 20 Punkte pro Schadensfall, max. 50
        - Anteil offener/abgelehnter Fälle: bis zu 30 Punkte
        - Auslastung: bis zu 20 Punkte, sinkt mit steigender Auslastung
        """
        frequency_risk = min(total_claims * 20, 50)
        ratio_risk = (problem_claims / total_claims * 30) if total_claims > 0 else 0.0
        utilization_risk = max(0.0, 20 - utilization_rate * 0.2)
        return min(100.0, frequency_risk + ratio_risk + utilization_risk)

    @staticmethod
    def recommend(
        risk_score: float,
        true_net_profit: float,
        profit_margin: float,
        utilization_rate: float,
        break_even_trips: int,
        total_trips: int
    ) -> Tuple[str, str]:
        """Empfehlung + Begründung, erste zutreffende Regel gewinnt"""
        if risk_score > 70 or true_net_profit < -500:
            return (
                "return",
                "High risk and significant losses including fixed costs. Consider returning this vehicle."
            )
        if risk_score > 50 or (profit_margin < 10 and utilization_rate < 30):
            return (
                "monitor",
                "Moderate risk or low performance. Monitor closely and consider improvements."
            )
        if utilization_rate < 50 and true_net_profit > 0:
            return (
                "optimize",
                "Good profitability but low utilization. Optimize pricing or availability."
            )
        if true_net_profit < 0 and break_even_trips > total_trips:
            return (
                "monitor",
                f"Not covering fixed costs. Need {break_even_trips} trips/month to break even."
            )
        return "keep_active", "Good performance. Continue current strategy."
