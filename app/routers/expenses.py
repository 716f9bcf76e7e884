"""Router für Ausgaben des Hosts (Trip-bezogen)"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.car import Car
from app.models.expense import HostExpense
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from app.dependencies import get_current_client_id, get_client_car
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _get_client_expense(db: Session, expense_id: int, client_id: str) -> HostExpense:
    expense = db.query(HostExpense).join(Car).filter(
        HostExpense.id == expense_id,
        Car.client_id == client_id
    ).first()
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ausgabe nicht gefunden")
    return expense


@router.get("/", response_model=List[ExpenseResponse])
async def list_expenses(
    car_id: Optional[int] = None,
    trip_id: Optional[str] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Liste aller Ausgaben (optional pro Fahrzeug oder Trip)"""
    query = db.query(HostExpense).join(Car).filter(Car.client_id == client_id)
    if car_id is not None:
        query = query.filter(HostExpense.car_id == car_id)
    if trip_id:
        query = query.filter(HostExpense.trip_id == trip_id)
    return query.order_by(HostExpense.expense_date.desc()).all()


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    return _get_client_expense(db, expense_id, client_id)


@router.post("/", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("expense", "Creating")
async def create_expense(
    data: ExpenseCreate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Erstellt eine neue Ausgabe"""
    car = get_client_car(db, data.car_id, client_id)
    expense = HostExpense(host_id=car.host_id, **data.model_dump())

    with transaction(db):
        db.add(expense)
    db.refresh(expense)

    logger.info(f"Expense {expense.id} created for car {car.id}: {expense.total_cost}")
    return expense


@router.put("/{expense_id}", response_model=ExpenseResponse)
@handle_route_errors("expense", "Updating")
async def update_expense(
    expense_id: int,
    data: ExpenseUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Aktualisiert eine Ausgabe (Summe wird neu berechnet)"""
    expense = _get_client_expense(db, expense_id, client_id)

    with transaction(db):
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(expense, key, value)
    db.refresh(expense)

    return expense


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("expense", "Deleting")
async def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Löscht eine Ausgabe"""
    expense = _get_client_expense(db, expense_id, client_id)

    with transaction(db):
        db.delete(expense)

    return None
