"""Gesamtübersicht über alle Fahrzeuge eines Kunden"""
from collections import defaultdict
from typing import Any, Dict, Iterable, List

from app.schemas.analytics import PortfolioSummary
from app.services.car_analytics import claim_status
from app.services.expense_matching import earning_client_share, expense_total, field_value
from app.utils.datetime_utils import to_date


def _group_by_car(records: Iterable[Any]) -> Dict[Any, List[Any]]:
    grouped: Dict[Any, List[Any]] = defaultdict(list)
    for record in records:
        grouped[field_value(record, "car_id")].append(record)
    return grouped


def summarize_portfolio(
    earnings: Iterable[Any],
    expenses: Iterable[Any],
    claims: Iterable[Any]
) -> PortfolioSummary:
    """
    Summiert Einnahmen, Ausgaben und Schadensfälle über alle Fahrzeuge.

    Ausgaben werden nur innerhalb desselben Fahrzeugs einer Fahrt zugeordnet,
    damit die Summe der Einzelfahrzeuge exakt der Gesamtsumme entspricht.

    Args:
        earnings: Einnahmen aller Fahrzeuge des Kunden
        expenses: Ausgaben aller Fahrzeuge
        claims: Schadensfälle aller Fahrzeuge

    Returns:
        PortfolioSummary (alles 0 bei leeren Eingaben)
    """
    earnings = list(earnings)
    expenses = list(expenses)
    claims = list(claims)

    expenses_by_car = _group_by_car(expenses)

    total_earnings = 0.0
    for car_id, car_earnings in _group_by_car(earnings).items():
        car_expenses = expenses_by_car.get(car_id, [])
        total_earnings += sum((earning_client_share(e, car_expenses) for e in car_earnings), 0.0)

    total_expenses = sum((expense_total(e) for e in expenses), 0.0)
    total_trips = len(earnings)

    # Aktive Tage: eindeutige Starttage über alle Fahrzeuge
    active_days = len({
        d for d in (to_date(field_value(e, "earning_period_start")) for e in earnings)
        if d is not None
    })

    total_claim_amount = sum((float(field_value(c, "claim_amount") or 0) for c in claims), 0.0)
    approved_claims_amount = sum(
        (float(field_value(c, "claim_amount") or 0) for c in claims if claim_status(c) == "approved"),
        0.0
    )
    pending_claims = sum(1 for c in claims if claim_status(c) == "pending")

    return PortfolioSummary(
        total_earnings=total_earnings,
        total_expenses=total_expenses,
        net_profit=total_earnings - total_expenses,
        active_days=active_days,
        total_trips=total_trips,
        average_per_trip=total_earnings / total_trips if total_trips > 0 else 0.0,
        total_claims=len(claims),
        total_claim_amount=total_claim_amount,
        approved_claims_amount=approved_claims_amount,
        pending_claims=pending_claims
    )
