"""Zuordnung von Ausgaben zu Einnahmen über die Trip-ID"""
from typing import Any, Iterable, Optional

# Kundenanteil, wenn an der Einnahme kein Prozentsatz hinterlegt ist (NICHT 0!)
DEFAULT_CLIENT_PROFIT_PERCENTAGE = 70.0
DEFAULT_HOST_PROFIT_PERCENTAGE = 30.0

COST_FIELDS = ("amount", "toll_cost", "delivery_cost", "carwash_cost", "ev_charge_cost")


def field_value(record: Any, name: str, default: Any = None) -> Any:
    """Liest ein Feld aus einem ORM-Objekt oder einem dict"""
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


def expense_total(expense: Any) -> float:
    """
    Gesamtbetrag einer Ausgabe = Summe der fünf Kostenbestandteile.

    Fehlende oder NULL-Bestandteile zählen als 0.
    """
    return float(sum(field_value(expense, name) or 0 for name in COST_FIELDS))


def get_trip_expenses_total(trip_id: Optional[str], expenses: Iterable[Any]) -> float:
    """
    Summiert alle Ausgaben, deren trip_id zur übergebenen Trip-ID passt.

    Args:
        trip_id: Trip-ID der Einnahme (None/leer = kein Join-Key)
        expenses: Bereits geladene Ausgaben

    Returns:
        Summe der Kostenbestandteile aller passenden Ausgaben (0.0 ohne Treffer)
    """
    if not trip_id:
        return 0.0
    return sum(
        (expense_total(exp) for exp in expenses if field_value(exp, "trip_id") == trip_id),
        0.0
    )


def get_net_earning_amount(
    gross_amount: Optional[float],
    trip_id: Optional[str],
    expenses: Iterable[Any]
) -> float:
    """Nettobetrag (brutto minus Trip-Ausgaben) für die Anzeige"""
    return (gross_amount or 0) - get_trip_expenses_total(trip_id, expenses)


def get_client_share(
    gross_amount: Optional[float],
    profit_percentage: Optional[float],
    trip_id: Optional[str],
    expenses: Iterable[Any]
) -> float:
    """
    Anteil des Kunden an einer Einnahme nach Abzug der Trip-Ausgaben.

    Formel: (brutto - Trip-Ausgaben) × Prozentsatz / 100

    Ein fehlender Prozentsatz (None) wird als 70% interpretiert. Das entspricht
    der Geschäftsregel bei der Erfassung von Einnahmen und gilt auch für 0.

    Example:
        get_client_share(100, 50, "T1", [{"trip_id": "T1", "amount": 20}])  # → 40.0
    """
    net = get_net_earning_amount(gross_amount, trip_id, expenses)
    return net * (profit_percentage or DEFAULT_CLIENT_PROFIT_PERCENTAGE) / 100


def get_host_share(
    gross_amount: Optional[float],
    profit_percentage: Optional[float],
    trip_id: Optional[str],
    expenses: Iterable[Any]
) -> float:
    """Anteil des Hosts (Standard 30%), gleiche Formel wie get_client_share"""
    net = get_net_earning_amount(gross_amount, trip_id, expenses)
    return net * (profit_percentage or DEFAULT_HOST_PROFIT_PERCENTAGE) / 100


def earning_client_share(earning: Any, expenses: Iterable[Any]) -> float:
    """Kundenanteil direkt aus einem Einnahme-Datensatz"""
    return get_client_share(
        field_value(earning, "amount"),
        field_value(earning, "client_profit_percentage"),
        field_value(earning, "trip_id"),
        expenses
    )
