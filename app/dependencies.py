"""Dependencies for FastAPI - Session Management"""
from fastapi import Request, HTTPException, status
from sqlalchemy.orm import Session

from app.models.car import Car
from app.services.attribution import AttributionContext
from app.services.events import EventHub


def get_current_client_id(request: Request) -> str:
    """
    Holt die aktuelle Kunden-ID aus der Session.

    Args:
        request: FastAPI Request-Objekt mit Session

    Returns:
        Kunden-ID (User-ID des Auth-Providers)

    Raises:
        HTTPException (401): Wenn keine Kunden-ID in Session gesetzt ist
    """
    client_id = request.session.get("client_id")
    if not client_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Kein Kunde ausgewählt. Bitte melden Sie sich an."
        )
    return client_id


def get_client_car(db: Session, car_id: int, client_id: str) -> Car:
    """
    Holt ein Fahrzeug des aktuellen Kunden.

    Raises:
        HTTPException (404): Wenn das Fahrzeug nicht existiert oder einem
            anderen Kunden gehört
    """
    car = db.query(Car).filter(Car.id == car_id, Car.client_id == client_id).first()
    if not car:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Fahrzeug nicht gefunden"
        )
    return car


def get_event_hub(request: Request) -> EventHub:
    """Event-Hub der laufenden App (wird im Lifespan angelegt)"""
    return request.app.state.events


def get_attribution(request: Request) -> AttributionContext:
    """Attribution-Kontext der laufenden App (wird im Lifespan angelegt)"""
    return request.app.state.attribution
