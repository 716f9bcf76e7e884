"""Router für Einnahmen (Fahrten) inkl. Buchungskonflikt-Prüfung"""
import logging
from typing import Any, List, Optional
from fastapi import APIRouter, BackgroundTasks, Request, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.car import Car
from app.models.earning import HostEarning
from app.models.expense import HostExpense
from app.schemas.booking import DateValidationRequest, ValidationResult
from app.schemas.earning import EarningCreate, EarningUpdate, EarningResponse
from app.dependencies import get_current_client_id, get_client_car, get_event_hub, get_attribution
from app.services.booking_validation import BookingValidator
from app.services.attribution import TRIP_RECORDED, AttributionContext, track_event
from app.services.events import BOOKING_CONFLICT, EventHub
from app.services.expense_matching import earning_client_share, get_net_earning_amount
from app.utils.error_decorators import handle_route_errors
from app.utils.flash import flash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/earnings", tags=["earnings"])


def _to_response(earning: HostEarning, expenses: List[HostExpense]) -> EarningResponse:
    """Einnahme mit Netto- und Kundenanteil (Ausgaben desselben Fahrzeugs)"""
    response = EarningResponse.model_validate(earning)
    response.net_amount = get_net_earning_amount(earning.amount, earning.trip_id, expenses)
    response.client_share = earning_client_share(earning, expenses)
    return response


def _car_expenses(db: Session, car_id: int) -> List[HostExpense]:
    return db.query(HostExpense).filter(HostExpense.car_id == car_id).all()


def _get_client_earning(db: Session, earning_id: int, client_id: str) -> HostEarning:
    earning = db.query(HostEarning).join(Car).filter(
        HostEarning.id == earning_id,
        Car.client_id == client_id
    ).first()
    if not earning:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Einnahme nicht gefunden")
    return earning


def _validate_or_raise(
    request: Request,
    db: Session,
    events: EventHub,
    car_id: int,
    start: Any,
    end: Any,
    exclude_id: Optional[int] = None
) -> None:
    """
    Führt die Konfliktprüfung aus und wirft 409 bei Überschneidungen.

    Für die Dauer der Prüfung wird ein Handler angemeldet, der den Konflikt
    als Warnung in die Session schreibt.
    """
    def warn(payload):
        flash(
            request,
            f"Der Zeitraum überschneidet sich mit {len(payload['conflicts'])} bestehenden Buchung(en)",
            "warning"
        )

    unsubscribe = events.subscribe(BOOKING_CONFLICT, warn)
    try:
        result = BookingValidator(db, events).validate_dates(car_id, start, end, exclude_id)
    finally:
        unsubscribe()

    if result.error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    if not result.is_valid:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Buchungszeitraum überschneidet sich mit bestehenden Einnahmen",
                "conflicts": [c.model_dump(mode="json") for c in result.conflicts],
            }
        )


@router.get("/", response_model=List[EarningResponse])
async def list_earnings(
    car_id: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Liste aller Einnahmen des Kunden (optional pro Fahrzeug)"""
    query = db.query(HostEarning).join(Car).filter(Car.client_id == client_id)
    if car_id is not None:
        query = query.filter(HostEarning.car_id == car_id)
    earnings = query.order_by(HostEarning.earning_period_start.desc()).all()

    # Ausgaben einmal laden und pro Fahrzeug zuordnen
    car_ids = {e.car_id for e in earnings}
    expenses = db.query(HostExpense).filter(HostExpense.car_id.in_(list(car_ids))).all() if car_ids else []

    return [
        _to_response(e, [x for x in expenses if x.car_id == e.car_id])
        for e in earnings
    ]


@router.get("/{earning_id}", response_model=EarningResponse)
async def get_earning(
    earning_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Einzelne Einnahme"""
    earning = _get_client_earning(db, earning_id, client_id)
    return _to_response(earning, _car_expenses(db, earning.car_id))


@router.post("/validate-dates", response_model=ValidationResult)
async def validate_earning_dates(
    request: Request,
    data: DateValidationRequest,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id),
    events: EventHub = Depends(get_event_hub)
):
    """
    Prüft einen Zeitraum vor dem Speichern.

    Eingabe- und Datenbankfehler kommen als is_valid=False mit error zurück.
    """
    if data.car_id:
        get_client_car(db, data.car_id, client_id)

    def warn(payload):
        flash(request, f"{len(payload['conflicts'])} überschneidende Buchung(en) gefunden", "warning")

    unsubscribe = events.subscribe(BOOKING_CONFLICT, warn)
    try:
        return BookingValidator(db, events).validate_dates(
            data.car_id, data.start_date, data.end_date, data.exclude_id
        )
    finally:
        unsubscribe()


@router.post("/", response_model=EarningResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("earning", "Creating")
async def create_earning(
    request: Request,
    data: EarningCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id),
    events: EventHub = Depends(get_event_hub),
    attribution: AttributionContext = Depends(get_attribution)
):
    """
    Erfasst eine Einnahme, sofern der Zeitraum frei ist.

    Das Attribution-Event wird nach der Antwort gesendet.
    """
    car = get_client_car(db, data.car_id, client_id)
    _validate_or_raise(request, db, events, car.id, data.earning_period_start, data.earning_period_end)

    earning = HostEarning(host_id=car.host_id, **data.model_dump())

    with transaction(db):
        db.add(earning)
    db.refresh(earning)

    logger.info(f"Earning {earning.id} recorded for car {car.id}: {earning.amount}")
    background_tasks.add_task(track_event, attribution, TRIP_RECORDED, {
        "af_revenue": earning.amount,
        "car_id": car.id,
        "trip_id": earning.trip_id,
    })

    return _to_response(earning, _car_expenses(db, car.id))


@router.put("/{earning_id}", response_model=EarningResponse)
@handle_route_errors("earning", "Updating")
async def update_earning(
    request: Request,
    earning_id: int,
    data: EarningUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id),
    events: EventHub = Depends(get_event_hub)
):
    """Aktualisiert eine Einnahme; die Einnahme selbst zählt nicht als Konflikt"""
    earning = _get_client_earning(db, earning_id, client_id)
    changes = data.model_dump(exclude_unset=True)

    start = changes.get("earning_period_start", earning.earning_period_start)
    end = changes.get("earning_period_end", earning.earning_period_end)
    if "earning_period_start" in changes or "earning_period_end" in changes:
        _validate_or_raise(request, db, events, earning.car_id, start, end, exclude_id=earning.id)

    with transaction(db):
        for key, value in changes.items():
            setattr(earning, key, value)
    db.refresh(earning)

    return _to_response(earning, _car_expenses(db, earning.car_id))


@router.delete("/{earning_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("earning", "Deleting")
async def delete_earning(
    earning_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Löscht eine Einnahme"""
    earning = _get_client_earning(db, earning_id, client_id)

    with transaction(db):
        db.delete(earning)

    logger.info(f"Earning {earning_id} deleted")
    return None
