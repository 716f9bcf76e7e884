"""Pytest Fixtures und Test-Konfiguration"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from datetime import date

from app.database import Base
from app.models import Car, HostEarning, HostExpense, HostClaim, ClientCarExpense

CLIENT_ID = "client-1"


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Erstellt eine temporäre In-Memory-SQLite-Datenbank für Tests
    Jeder Test bekommt eine frische, isolierte Datenbank
    """
    # In-Memory SQLite für schnelle Tests
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Alle Tabellen erstellen
    Base.metadata.create_all(bind=engine)

    # Session erstellen
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sample_car(db_session: Session) -> Car:
    """Erstellt ein Beispiel-Fahrzeug"""
    car = Car(
        client_id=CLIENT_ID,
        host_id="host-1",
        make="Tesla",
        model="Model Y",
        year=2023,
        status="hosted",
        license_plate="TES-001"
    )
    db_session.add(car)
    db_session.commit()
    db_session.refresh(car)
    return car


@pytest.fixture
def second_car(db_session: Session) -> Car:
    """Zweites Fahrzeug desselben Kunden"""
    car = Car(
        client_id=CLIENT_ID,
        host_id="host-2",
        make="Tesla",
        model="Model 3",
        year=2022,
        status="hosted"
    )
    db_session.add(car)
    db_session.commit()
    db_session.refresh(car)
    return car


@pytest.fixture
def sample_earning(db_session: Session, sample_car: Car) -> HostEarning:
    """Einnahme für den Zeitraum 01.01.2024 - 10.01.2024"""
    earning = HostEarning(
        car_id=sample_car.id,
        host_id=sample_car.host_id,
        trip_id="TRIP-1",
        earning_period_start=date(2024, 1, 1),
        earning_period_end=date(2024, 1, 10),
        amount=500.0,
        client_profit_percentage=None,
        guest_name="Erika Musterfrau"
    )
    db_session.add(earning)
    db_session.commit()
    db_session.refresh(earning)
    return earning


@pytest.fixture
def sample_expenses(db_session: Session, sample_car: Car) -> list[HostExpense]:
    """Zwei Ausgaben zu TRIP-1 und eine ohne Trip"""
    expenses = [
        HostExpense(
            car_id=sample_car.id,
            trip_id="TRIP-1",
            expense_type="trip",
            expense_date=date(2024, 1, 10),
            amount=20.0,
            toll_cost=5.0,
            carwash_cost=15.0
        ),
        HostExpense(
            car_id=sample_car.id,
            trip_id="TRIP-1",
            expense_type="charging",
            expense_date=date(2024, 1, 8),
            amount=0.0,
            ev_charge_cost=10.0
        ),
        HostExpense(
            car_id=sample_car.id,
            trip_id=None,
            expense_type="maintenance",
            expense_date=date(2024, 2, 1),
            amount=100.0
        ),
    ]
    db_session.add_all(expenses)
    db_session.commit()
    return expenses


@pytest.fixture
def sample_claims(db_session: Session, sample_car: Car) -> list[HostClaim]:
    """Ein genehmigter und ein Schadensfall ohne Status"""
    claims = [
        HostClaim(
            car_id=sample_car.id,
            claim_type="damage",
            claim_status="approved",
            claim_amount=300.0,
            incident_date=date(2024, 1, 5),
            description="Kratzer an der Stoßstange"
        ),
        HostClaim(
            car_id=sample_car.id,
            claim_type="toll",
            claim_status=None,
            claim_amount=25.0,
            incident_date=date(2023, 12, 20),
            description="Nachberechnete Maut"
        ),
    ]
    db_session.add_all(claims)
    db_session.commit()
    return claims


@pytest.fixture
def sample_fixed_expense(db_session: Session, sample_car: Car) -> ClientCarExpense:
    """Versicherung, jährlich 1200 (= 100 pro Monat)"""
    expense = ClientCarExpense(
        car_id=sample_car.id,
        client_id=CLIENT_ID,
        expense_type="insurance",
        amount=1200.0,
        frequency="yearly",
        start_date=date(2023, 1, 1)
    )
    db_session.add(expense)
    db_session.commit()
    db_session.refresh(expense)
    return expense


# Marker für schnelle Unit-Tests
pytest.mark.unit = pytest.mark.unit

# Marker für Integration-Tests mit DB
pytest.mark.integration = pytest.mark.integration
