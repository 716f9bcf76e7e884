"""Datenbank-Setup und Session-Management"""
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from app.config import settings

engine_kwargs = {
    "echo": settings.debug,
}

# SQLite-spezifische Konfiguration
if "sqlite" in settings.database_url:
    engine_kwargs["connect_args"] = {
        "check_same_thread": False,  # Erlaube Thread-Sharing (notwendig für FastAPI)
        "timeout": 30,  # Warte bis zu 30 Sekunden auf DB-Lock
    }
    engine_kwargs["pool_size"] = 5
    engine_kwargs["max_overflow"] = 10
    engine_kwargs["pool_pre_ping"] = True
    engine_kwargs["pool_recycle"] = 3600

# PostgreSQL-spezifische Konfiguration
else:
    engine_kwargs["pool_size"] = 20
    engine_kwargs["max_overflow"] = 40
    engine_kwargs["pool_pre_ping"] = True
    engine_kwargs["pool_recycle"] = 3600

engine = create_engine(settings.database_url, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Basis-Klasse für alle Models
Base = declarative_base()


def get_db():
    """
    Dependency für FastAPI-Routen.
    Stellt eine Datenbank-Session bereit und schließt sie nach der Anfrage.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """
    Context Manager für Datenbank-Transaktionen.

    Verwendung:
        with transaction(db):
            db.add(earning)
            db.flush()  # Für ID-Generierung
        # Auto-commit bei Erfolg, auto-rollback bei Exception
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db():
    """
    Initialisiert die Datenbank und erstellt alle Tabellen.

    Das Schema wird komplett über create_all verwaltet; der gehostete
    Produktions-Store bringt sein eigenes Schema mit.
    """
    from app.models import car, earning, expense, claim, fixed_expense  # noqa: F401
    Base.metadata.create_all(bind=engine)
