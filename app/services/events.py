"""Einfacher Event-Hub: Abonnieren mit Abmelde-Handle, Veröffentlichen von Events"""
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# Event-Namen
BOOKING_CONFLICT = "booking_conflict"

Handler = Callable[[Any], None]


class EventHub:
    """
    Registriert Handler pro Event-Name.

    Usage:
        hub = EventHub()
        unsubscribe = hub.subscribe(BOOKING_CONFLICT, lambda payload: ...)
        hub.emit(BOOKING_CONFLICT, {"car_id": 1})
        unsubscribe()
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: Handler) -> Callable[[], None]:
        """
        Meldet einen Handler an.

        Returns:
            Funktion zum Abmelden; mehrfacher Aufruf ist unschädlich
        """
        self._handlers[event_name].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_name, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event_name: str, payload: Any = None) -> int:
        """
        Ruft alle Handler des Events auf.

        Fehler in einem Handler werden geloggt und stoppen die übrigen Handler nicht.

        Returns:
            Anzahl der erfolgreich aufgerufenen Handler
        """
        delivered = 0
        # Kopie, damit sich Handler während emit abmelden können
        for handler in list(self._handlers.get(event_name, [])):
            try:
                handler(payload)
                delivered += 1
            except Exception as e:
                logger.exception(f"Handler for event '{event_name}' failed: {e}")
        return delivered

    def handler_count(self, event_name: str) -> int:
        return len(self._handlers.get(event_name, []))
