"""Flash Message System - Session-basierte Benachrichtigungen"""
from typing import List, Dict
from fastapi import Request


def flash(request: Request, message: str, category: str = "info") -> None:
    """
    Fügt eine Flash-Message zur Session hinzu.

    Flash-Messages sind einmalige Benachrichtigungen, die das Frontend
    über GET /session/messages abholt. Danach sind sie gelöscht.

    Args:
        request: FastAPI Request mit Session
        message: Die anzuzeigende Nachricht
        category: "info", "success", "warning" oder "error"

    Example:
        flash(request, "Fahrzeug erfolgreich angelegt", "success")
        flash(request, "Zeitraum überschneidet sich mit 2 Buchungen", "warning")
    """
    if "_messages" not in request.session:
        request.session["_messages"] = []

    request.session["_messages"].append({
        "message": message,
        "category": category
    })


def get_flashed_messages(request: Request) -> List[Dict[str, str]]:
    """
    Holt und entfernt alle Flash-Messages aus der Session.

    Returns:
        [{"message": "Text hier", "category": "success"}, ...]
    """
    messages = request.session.pop("_messages", [])
    return messages
