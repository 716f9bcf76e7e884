"""Hauptanwendung für das TESLYS Hosting-Backend"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
import logging

from app.config import settings
from app.logging_config import setup_logging
from app.database import init_db
from app.routers import session, cars, earnings, expenses, claims, fixed_expenses, analytics
from app.services.attribution import init_attribution
from app.services.events import EventHub

# Logging konfigurieren (strukturiert mit Datei-Rotation)
setup_logging(debug=settings.debug, log_file=settings.log_file)
logger = logging.getLogger(__name__)

# Rate Limiter konfigurieren
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan Context Manager für Startup und Shutdown Events.
    """
    # ===== STARTUP =====
    logger.info(f"Starte {settings.app_name} v{settings.app_version}")

    # Warnung wenn SECRET_KEY nicht gesetzt ist
    if not settings.is_secret_key_from_env():
        logger.warning("=" * 80)
        logger.warning("⚠️  SECRET_KEY ist nicht in .env gesetzt!")
        logger.warning("⚠️  Sessions gehen bei jedem Neustart verloren!")
        logger.warning("⚠️  Generieren: python -c 'import secrets; print(secrets.token_urlsafe(32))'")
        logger.warning("=" * 80)

    logger.info("Initialisiere Datenbank...")
    init_db()
    logger.info("Datenbank erfolgreich initialisiert!")

    # Event-Hub und Attribution einmal pro Prozess
    app.state.events = EventHub()
    app.state.attribution = init_attribution(settings)

    # App läuft...
    yield

    # ===== SHUTDOWN =====
    logger.info(f"Beende {settings.app_name}")


# FastAPI App erstellen
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Rate Limiter zur App hinzufügen
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Session Middleware hinzufügen
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key
)

# Router registrieren
app.include_router(session.router)
app.include_router(cars.router)
app.include_router(earnings.router)
app.include_router(expenses.router)
app.include_router(claims.router)
app.include_router(fixed_expenses.router)
app.include_router(analytics.router)


@app.get("/health")
@limiter.limit("60/minute")
async def health_check(request: Request):
    """Health-Check-Endpunkt für Docker"""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "attribution": app.state.attribution.initialized if hasattr(app.state, "attribution") else False
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
