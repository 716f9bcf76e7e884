"""Attribution-Events (AppsFlyer Server-to-Server)"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from app.config import Settings
from app.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)

TRIP_RECORDED = "teslys_trip_recorded"


@dataclass
class AttributionContext:
    """
    Zustand der Attribution-Anbindung.

    Wird einmal beim Start erstellt und an die Aufrufer übergeben.
    """
    endpoint: str
    dev_key: Optional[str] = None
    app_id: Optional[str] = None
    initialized: bool = False
    customer_user_id: Optional[str] = None
    timeout: float = 10.0
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)


def init_attribution(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> AttributionContext:
    """
    Erstellt den Attribution-Kontext.

    Ohne Dev-Key oder App-ID bleibt der Kontext uninitialisiert und
    track_event() verschickt nichts.
    """
    context = AttributionContext(
        endpoint=settings.attribution_endpoint.rstrip("/"),
        dev_key=settings.attribution_dev_key,
        app_id=settings.attribution_app_id,
        transport=transport
    )

    if not settings.attribution_enabled():
        logger.info("Attribution deaktiviert (kein Dev-Key/App-ID gesetzt)")
        return context

    context.initialized = True
    logger.info(f"Attribution initialisiert für App {context.app_id}")
    return context


def set_customer_user_id(context: AttributionContext, user_id: str) -> None:
    """Verknüpft folgende Events mit einer Kunden-ID (nur wenn initialisiert)"""
    if not context.initialized:
        return
    context.customer_user_id = user_id


async def track_event(
    context: AttributionContext,
    event_name: str,
    event_value: Optional[Dict[str, Any]] = None,
    appsflyer_id: Optional[str] = None
) -> bool:
    """
    Sendet ein In-App-Event an die Attribution-Plattform.

    Aus Routes über BackgroundTasks einplanen, damit die Antwort nicht auf
    die Plattform wartet.

    Args:
        context: Kontext aus init_attribution()
        event_name: z.B. "af_purchase" oder TRIP_RECORDED
        event_value: Zusätzliche Event-Werte
        appsflyer_id: Geräte-ID der Plattform (falls bekannt)

    Returns:
        True wenn das Event angenommen wurde. Fehler werden geloggt, nicht
        geworfen: Attribution darf keinen fachlichen Vorgang abbrechen.
    """
    if not context.initialized:
        logger.debug(f"Attribution nicht initialisiert - Event '{event_name}' verworfen")
        return False

    payload = {
        "eventName": event_name,
        "eventValue": event_value or {},
        "eventTime": utcnow().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
    }
    if appsflyer_id:
        payload["appsflyer_id"] = appsflyer_id
    if context.customer_user_id:
        payload["customer_user_id"] = context.customer_user_id

    url = f"{context.endpoint}/{context.app_id}"

    try:
        async with httpx.AsyncClient(timeout=context.timeout, transport=context.transport) as client:
            response = await client.post(
                url,
                json=payload,
                headers={"authentication": context.dev_key or ""}
            )
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(f"Attribution event '{event_name}' failed: {e}")
        return False

    logger.info(f"Attribution event '{event_name}' sent")
    return True
