"""Decorator für konsistentes Error-Handling in Routern"""
import logging
from functools import wraps
from typing import Callable, Optional
from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.utils.error_handler import handle_db_exception

logger = logging.getLogger(__name__)


def handle_route_errors(entity_name: str, operation: str = "Creating"):
    """
    Decorator für einheitliches Error-Handling in schreibenden Routes.

    - HTTPException: wird unverändert weitergereicht (404, 409, ...)
    - alle anderen Exceptions: Rollback + Mapping über handle_db_exception

    Args:
        entity_name: Name der Entity für Logging (z.B. "car", "earning")
        operation: Operation-Beschreibung für Logging (z.B. "Creating")

    Usage:
        @router.post("/")
        @handle_route_errors("car", "Creating")
        async def create_car(
            data: CarCreate,
            db: Session = Depends(get_db),
            ...
        ):
            # Deine Logik hier - ohne try-catch!
            pass

    Wichtig:
        - Die dekorierte Funktion MUSS 'db' als Keyword-Parameter haben
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            db: Optional[Session] = kwargs.get('db')

            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except Exception as e:
                raise handle_db_exception(e, f"{operation} {entity_name}", db) from e

        return wrapper
    return decorator
