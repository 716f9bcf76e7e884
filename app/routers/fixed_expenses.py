"""Router für Fixkosten des Kunden (Versicherung, Finanzierung, ...)"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.fixed_expense import ClientCarExpense
from app.schemas.fixed_expense import FixedExpenseCreate, FixedExpenseUpdate, FixedExpenseResponse
from app.dependencies import get_current_client_id, get_client_car
from app.services.fixed_costs import monthly_amount
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fixed-expenses", tags=["fixed-expenses"])


def _to_response(expense: ClientCarExpense) -> FixedExpenseResponse:
    response = FixedExpenseResponse.model_validate(expense)
    response.monthly_amount = monthly_amount(expense)
    return response


def _get_client_fixed_expense(db: Session, expense_id: int, client_id: str) -> ClientCarExpense:
    expense = db.query(ClientCarExpense).filter(
        ClientCarExpense.id == expense_id,
        ClientCarExpense.client_id == client_id
    ).first()
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fixkosten nicht gefunden")
    return expense


@router.get("/", response_model=List[FixedExpenseResponse])
async def list_fixed_expenses(
    car_id: Optional[int] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Liste aller Fixkosten des Kunden"""
    query = db.query(ClientCarExpense).filter(ClientCarExpense.client_id == client_id)
    if car_id is not None:
        query = query.filter(ClientCarExpense.car_id == car_id)
    return [_to_response(e) for e in query.order_by(ClientCarExpense.start_date.desc()).all()]


@router.get("/{expense_id}", response_model=FixedExpenseResponse)
async def get_fixed_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    return _to_response(_get_client_fixed_expense(db, expense_id, client_id))


@router.post("/", response_model=FixedExpenseResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("fixed expense", "Creating")
async def create_fixed_expense(
    data: FixedExpenseCreate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Legt eine Fixkosten-Position für ein Fahrzeug an"""
    car = get_client_car(db, data.car_id, client_id)
    expense = ClientCarExpense(client_id=client_id, **data.model_dump())

    with transaction(db):
        db.add(expense)
    db.refresh(expense)

    logger.info(f"Fixed expense {expense.id} created for car {car.id}: {expense.expense_type}")
    return _to_response(expense)


@router.put("/{expense_id}", response_model=FixedExpenseResponse)
@handle_route_errors("fixed expense", "Updating")
async def update_fixed_expense(
    expense_id: int,
    data: FixedExpenseUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    expense = _get_client_fixed_expense(db, expense_id, client_id)
    changes = data.model_dump(exclude_unset=True)

    start = changes.get("start_date", expense.start_date)
    end = changes.get("end_date", expense.end_date)
    if end is not None and end < start:
        raise ValueError("end_date darf nicht vor start_date liegen")

    with transaction(db):
        for key, value in changes.items():
            setattr(expense, key, value)
    db.refresh(expense)

    return _to_response(expense)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("fixed expense", "Deleting")
async def delete_fixed_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    expense = _get_client_fixed_expense(db, expense_id, client_id)

    with transaction(db):
        db.delete(expense)

    return None
