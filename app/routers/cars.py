"""Router für Fahrzeuge"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.car import Car
from app.schemas.car import CarCreate, CarUpdate, CarStatusUpdate, CarResponse
from app.dependencies import get_current_client_id, get_client_car
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("/", response_model=List[CarResponse])
async def list_cars(
    status_filter: Optional[str] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Liste aller Fahrzeuge des aktuellen Kunden"""
    query = db.query(Car).filter(Car.client_id == client_id)
    if status_filter:
        query = query.filter(Car.status == status_filter)
    return query.order_by(Car.created_at.desc()).all()


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(
    car_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Einzelnes Fahrzeug"""
    return get_client_car(db, car_id, client_id)


@router.post("/", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("car", "Creating")
async def create_car(
    data: CarCreate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Legt ein neues Fahrzeug an"""
    car = Car(client_id=client_id, **data.model_dump())

    with transaction(db):
        db.add(car)
    db.refresh(car)

    logger.info(f"Car {car.id} created for client {client_id}: {car.display_name}")
    return car


@router.put("/{car_id}", response_model=CarResponse)
@handle_route_errors("car", "Updating")
async def update_car(
    car_id: int,
    data: CarUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Aktualisiert die Stammdaten eines Fahrzeugs"""
    car = get_client_car(db, car_id, client_id)

    with transaction(db):
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(car, key, value)
    db.refresh(car)

    return car


@router.post("/{car_id}/status", response_model=CarResponse)
@handle_route_errors("car", "Changing status of")
async def change_car_status(
    car_id: int,
    data: CarStatusUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Statuswechsel, z.B. nach einer Rückgabe-Anfrage"""
    car = get_client_car(db, car_id, client_id)
    old_status = car.status

    with transaction(db):
        car.status = data.status
    db.refresh(car)

    logger.info(f"Car {car.id} status changed: {old_status} -> {car.status}")
    return car


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("car", "Deleting")
async def delete_car(
    car_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Löscht ein Fahrzeug samt zugehöriger Einnahmen, Ausgaben und Schadensfälle"""
    car = get_client_car(db, car_id, client_id)

    with transaction(db):
        db.delete(car)

    logger.info(f"Car {car_id} deleted")
    return None
