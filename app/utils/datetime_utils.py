"""
Datetime Utilities für konsistentes Zeit-Handling

Strategie:
- Timestamps (created_at, updated_at): UTC
- Business Dates (earning_period_start, expense_date, incident_date): reine
  Datumswerte ohne Zeitzone, so wie sie im Formular erfasst werden
"""
from datetime import datetime, date, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Gibt die aktuelle UTC-Zeit zurück (timezone-aware).

    Ersetzt datetime.utcnow() (deprecated in Python 3.12)
    mit datetime.now(timezone.utc).
    """
    return datetime.now(timezone.utc)


# Für SQLAlchemy default Funktionen
def get_utc_timestamp() -> datetime:
    """
    Wrapper für utcnow() zur Verwendung in SQLAlchemy Column defaults.

    Verwendung:
        created_at = Column(DateTime, default=get_utc_timestamp)
    """
    return utcnow()


def to_date(value) -> Optional[date]:
    """
    Normalisiert Datumswerte aus DB-Zeilen oder JSON auf ein date-Objekt.

    Akzeptiert date, datetime und ISO-Strings ("2024-01-05" oder
    "2024-01-05T10:00:00"). None und Leerstrings werden zu None.

    Raises:
        ValueError: Wenn ein String nicht als Datum gelesen werden kann
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    return date.fromisoformat(text.split("T")[0])
