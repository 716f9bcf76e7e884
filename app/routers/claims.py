"""Router für Schadensfälle"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db, transaction
from app.models.car import Car
from app.models.claim import HostClaim
from app.schemas.claim import ClaimCreate, ClaimUpdate, ClaimStatusUpdate, ClaimResponse
from app.dependencies import get_current_client_id, get_client_car
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/claims", tags=["claims"])


def _get_client_claim(db: Session, claim_id: int, client_id: str) -> HostClaim:
    claim = db.query(HostClaim).join(Car).filter(
        HostClaim.id == claim_id,
        Car.client_id == client_id
    ).first()
    if not claim:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schadensfall nicht gefunden")
    return claim


@router.get("/", response_model=List[ClaimResponse])
async def list_claims(
    car_id: Optional[int] = None,
    claim_status: Optional[str] = None,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Liste aller Schadensfälle (optional nach Fahrzeug/Status)"""
    query = db.query(HostClaim).join(Car).filter(Car.client_id == client_id)
    if car_id is not None:
        query = query.filter(HostClaim.car_id == car_id)
    if claim_status == "pending":
        # Fehlender Status zählt als "pending"
        query = query.filter((HostClaim.claim_status == "pending") | (HostClaim.claim_status.is_(None)))
    elif claim_status:
        query = query.filter(HostClaim.claim_status == claim_status)
    return query.order_by(HostClaim.incident_date.desc()).all()


@router.get("/{claim_id}", response_model=ClaimResponse)
async def get_claim(
    claim_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    return _get_client_claim(db, claim_id, client_id)


@router.post("/", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("claim", "Creating")
async def create_claim(
    data: ClaimCreate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Legt einen Schadensfall an (Status pending)"""
    car = get_client_car(db, data.car_id, client_id)
    claim = HostClaim(host_id=car.host_id, claim_status="pending", **data.model_dump())

    with transaction(db):
        db.add(claim)
    db.refresh(claim)

    logger.info(f"Claim {claim.id} filed for car {car.id}: {claim.claim_type}")
    return claim


@router.put("/{claim_id}", response_model=ClaimResponse)
@handle_route_errors("claim", "Updating")
async def update_claim(
    claim_id: int,
    data: ClaimUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    claim = _get_client_claim(db, claim_id, client_id)

    with transaction(db):
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(claim, key, value)
    db.refresh(claim)

    return claim


@router.post("/{claim_id}/status", response_model=ClaimResponse)
@handle_route_errors("claim", "Reviewing")
async def change_claim_status(
    claim_id: int,
    data: ClaimStatusUpdate,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    """Prüfergebnis setzen (approved/denied/closed) inkl. bewilligtem Betrag"""
    claim = _get_client_claim(db, claim_id, client_id)
    old_status = claim.effective_status

    with transaction(db):
        claim.claim_status = data.claim_status
        if data.approved_amount is not None:
            claim.approved_amount = data.approved_amount
    db.refresh(claim)

    logger.info(f"Claim {claim.id} status changed: {old_status} -> {claim.claim_status}")
    return claim


@router.delete("/{claim_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("claim", "Deleting")
async def delete_claim(
    claim_id: int,
    db: Session = Depends(get_db),
    client_id: str = Depends(get_current_client_id)
):
    claim = _get_client_claim(db, claim_id, client_id)

    with transaction(db):
        db.delete(claim)

    return None
