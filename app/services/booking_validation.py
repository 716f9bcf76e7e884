"""Prüfung auf überschneidende Buchungszeiträume eines Fahrzeugs"""
import logging
from datetime import date
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.earning import HostEarning
from app.schemas.booking import ConflictingEarning, ValidationResult
from app.services.events import BOOKING_CONFLICT, EventHub
from app.utils.datetime_utils import to_date

logger = logging.getLogger(__name__)

DateInput = Union[date, str, None]


def get_conflicting_earnings(
    db: Session,
    car_id: int,
    start_date: date,
    end_date: date
) -> List[HostEarning]:
    """
    Store-Abfrage: alle Einnahmen des Fahrzeugs, deren Zeitraum [start, end]
    sich mit dem angefragten überschneidet.

    Geschlossene Intervalle: [a, b] und [c, d] überschneiden sich genau dann,
    wenn a <= d und c <= b. Angrenzende Zeiträume (Ende 10., Start 11.) sind frei.
    """
    return db.query(HostEarning).filter(
        HostEarning.car_id == car_id,
        HostEarning.earning_period_start <= end_date,
        HostEarning.earning_period_end >= start_date
    ).order_by(HostEarning.earning_period_start).all()


class BookingValidator:
    """Service für die Konfliktprüfung beim Anlegen/Bearbeiten von Einnahmen"""

    def __init__(self, db: Session, events: Optional[EventHub] = None):
        self.db = db
        self.events = events

    def validate_dates(
        self,
        car_id: Optional[int],
        start: DateInput,
        end: DateInput,
        exclude_id: Optional[int] = None
    ) -> ValidationResult:
        """
        Prüft, ob der Zeitraum für das Fahrzeug frei ist.

        Args:
            car_id: Fahrzeug-ID (Pflicht)
            start: Beginn (date oder "YYYY-MM-DD", Pflicht)
            end: Ende (date oder "YYYY-MM-DD", Pflicht, >= start)
            exclude_id: ID der gerade bearbeiteten Einnahme (zählt nicht als Konflikt)

        Returns:
            ValidationResult. Eingabefehler und Datenbankfehler werden als
            is_valid=False mit error zurückgegeben, nicht geworfen.
        """
        if not car_id:
            return ValidationResult(is_valid=False, error="car_id ist erforderlich")

        try:
            start_date = to_date(start)
        except ValueError:
            return ValidationResult(is_valid=False, error="start_date muss im Format YYYY-MM-DD vorliegen")
        if start_date is None:
            return ValidationResult(is_valid=False, error="start_date ist erforderlich")

        try:
            end_date = to_date(end)
        except ValueError:
            return ValidationResult(is_valid=False, error="end_date muss im Format YYYY-MM-DD vorliegen")
        if end_date is None:
            return ValidationResult(is_valid=False, error="end_date ist erforderlich")

        if start_date > end_date:
            return ValidationResult(is_valid=False, error="start_date darf nicht nach end_date liegen")

        try:
            rows = get_conflicting_earnings(self.db, car_id, start_date, end_date)
        except SQLAlchemyError as e:
            logger.error(f"Conflict check failed for car {car_id}: {e}", exc_info=True)
            return ValidationResult(is_valid=False, error=str(e))

        conflicts = [
            ConflictingEarning.model_validate(row)
            for row in rows
            if exclude_id is None or row.id != exclude_id
        ]

        if conflicts:
            logger.warning(
                f"Booking conflict for car {car_id} ({start_date} - {end_date}): "
                f"{len(conflicts)} overlapping earning(s)"
            )
            if self.events:
                self.events.emit(BOOKING_CONFLICT, {
                    "car_id": car_id,
                    "start_date": start_date,
                    "end_date": end_date,
                    "conflicts": conflicts,
                })
            return ValidationResult(is_valid=False, conflicts=conflicts)

        return ValidationResult(is_valid=True)

    def check_availability(self, car_id: Optional[int], start: DateInput, end: DateInput) -> bool:
        """Kurzform: nur ob der Zeitraum frei ist"""
        return self.validate_dates(car_id, start, end).is_valid


def validate_dates(
    db: Session,
    car_id: Optional[int],
    start: DateInput,
    end: DateInput,
    exclude_id: Optional[int] = None,
    events: Optional[EventHub] = None
) -> ValidationResult:
    """Funktionale Variante von BookingValidator.validate_dates"""
    return BookingValidator(db, events).validate_dates(car_id, start, end, exclude_id)
