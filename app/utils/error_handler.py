"""Error Handler Utility - Zentralisierte Fehlerbehandlung"""
import logging
from sqlalchemy.exc import IntegrityError, DataError, OperationalError
from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def handle_db_exception(
    e: Exception,
    operation: str,
    db_session=None
) -> HTTPException:
    """
    Zentralisierte Fehlerbehandlung mit Logging und benutzerfreundlichen Meldungen

    Args:
        e: Die aufgetretene Exception
        operation: Beschreibung der Operation (für Logging)
        db_session: Datenbank-Session für Rollback (optional)

    Returns:
        HTTPException mit passendem Status-Code (der Aufrufer wirft sie)
    """
    # Rollback falls Session vorhanden
    if db_session:
        try:
            db_session.rollback()
        except Exception as rollback_error:
            logger.error(f"Rollback failed: {rollback_error}")

    # Spezifische Fehlerbehandlung
    if isinstance(e, ValueError):
        logger.warning(f"{operation}: Invalid input - {str(e)}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ungültige Eingabe: {str(e)}"
        )

    if isinstance(e, IntegrityError):
        logger.error(f"{operation}: Database integrity error - {str(e)}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Datenbankfehler: Diese Daten verletzen eine Integritätsbedingung."
        )

    if isinstance(e, DataError):
        logger.error(f"{operation}: Invalid data - {str(e)}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Ungültige Daten. Bitte überprüfen Sie Ihre Eingaben."
        )

    if isinstance(e, OperationalError):
        logger.error(f"{operation}: Database operational error - {str(e)}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Datenbankverbindungsfehler. Bitte versuchen Sie es später erneut."
        )

    logger.exception(f"{operation}: Unexpected error - {str(e)}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Ein unerwarteter Fehler ist aufgetreten. Bitte kontaktieren Sie den Administrator."
    )
