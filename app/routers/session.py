"""Router für die Kunden-Session (Auswahl des Fahrzeughalters)"""
import logging
from fastapi import APIRouter, Request, Depends
from pydantic import BaseModel, Field, field_validator

from app.dependencies import get_attribution
from app.services.attribution import AttributionContext, set_customer_user_id
from app.utils.flash import get_flashed_messages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


class ClientSelection(BaseModel):
    client_id: str = Field(..., min_length=1, max_length=100)

    @field_validator('client_id')
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("client_id darf nicht leer sein")
        return v.strip()


@router.post("/client")
async def select_client(
    request: Request,
    data: ClientSelection,
    attribution: AttributionContext = Depends(get_attribution)
):
    """
    Setzt den aktuellen Kunden in der Session.

    Die Anmeldung selbst übernimmt der Auth-Provider; hier wird nur
    dessen User-ID übernommen.
    """
    request.session["client_id"] = data.client_id
    set_customer_user_id(attribution, data.client_id)
    logger.info(f"Client {data.client_id} selected")
    return {"client_id": data.client_id}


@router.delete("/client")
async def clear_client(request: Request):
    """Entfernt den Kunden aus der Session"""
    request.session.pop("client_id", None)
    return {"client_id": None}


@router.get("/messages")
async def messages(request: Request):
    """Gibt alle Flash-Messages zurück und löscht sie"""
    return {"messages": get_flashed_messages(request)}
