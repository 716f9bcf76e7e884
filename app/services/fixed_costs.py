"""Umrechnung wiederkehrender Fixkosten auf Monatsbeträge"""
import logging
from datetime import date
from typing import Any, Iterable, Optional

from app.services.expense_matching import field_value

logger = logging.getLogger(__name__)

# Teiler je Abrechnungsintervall
FREQUENCY_DIVISORS = {
    "monthly": 1,
    "quarterly": 3,
    "yearly": 12,
}


def monthly_amount(expense: Any) -> float:
    """
    Rechnet eine Fixkosten-Position auf einen Monatsbetrag um.

    Unbekannte Intervalle werden wie "monthly" behandelt.
    """
    amount = float(field_value(expense, "amount") or 0)
    frequency = field_value(expense, "frequency") or "monthly"
    divisor = FREQUENCY_DIVISORS.get(frequency)
    if divisor is None:
        logger.warning(f"Unbekanntes Intervall '{frequency}' - wird als monatlich gerechnet")
        divisor = 1
    return amount / divisor


def is_active(expense: Any, as_of: date) -> bool:
    """Aktiv, wenn start_date <= as_of und (kein end_date oder end_date >= as_of)"""
    start = field_value(expense, "start_date")
    end = field_value(expense, "end_date")
    if start is None or start > as_of:
        return False
    return end is None or end >= as_of


def get_monthly_fixed_costs(
    expenses: Iterable[Any],
    car_id: Optional[int] = None,
    as_of: Optional[date] = None
) -> float:
    """
    Summe der aktuell aktiven Fixkosten eines Fahrzeugs pro Monat.

    Args:
        expenses: Fixkosten-Positionen (ClientCarExpense oder dicts)
        car_id: Nur Positionen dieses Fahrzeugs berücksichtigen (None = alle)
        as_of: Stichtag für die Aktiv-Prüfung (Standard: heute)

    Returns:
        Monatliche Fixkosten
    """
    as_of = as_of or date.today()
    total = 0.0
    for expense in expenses:
        if car_id is not None and field_value(expense, "car_id") != car_id:
            continue
        if not is_active(expense, as_of):
            continue
        total += monthly_amount(expense)
    return total
