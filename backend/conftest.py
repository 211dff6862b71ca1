"""
Pytest configuration file for backend testing.
"""
import os
import sys
from datetime import date, datetime, time
from pathlib import Path

import pytest

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Tests run against a private in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from fastapi.testclient import TestClient  # noqa: E402

from core.config import Settings  # noqa: E402
from core.database import Base, SessionLocal, engine, get_db  # noqa: E402

# Import all models to register them with SQLAlchemy
import app.models  # noqa: E402,F401
from modules.auth.models.user_models import User  # noqa: E402
from modules.menu.models.menu_models import Category, MenuItem  # noqa: E402
from modules.reservations.models.reservation_models import Reservation  # noqa: E402


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database schema and session for each test."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_app(db_session):
    """FastAPI app with the database dependency bound to the test session."""
    from app.main import create_app

    application = create_app(run_checks=False)

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client with database dependency override."""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def settings():
    """Default restaurant rules, independent of the environment."""
    return Settings(_env_file=None)


def make_clock(moment: datetime):
    """Clock callable frozen at `moment`."""
    return lambda: moment


@pytest.fixture
def frozen_clock():
    return make_clock


@pytest.fixture
def user(db_session):
    account = User(
        email="jane@bistro-mail.com",
        password_hash="not-a-real-hash",
        first_name="Jane",
        last_name="Doe",
        role="customer",
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def category(db_session):
    mains = Category(name="Mains")
    db_session.add(mains)
    db_session.commit()
    db_session.refresh(mains)
    return mains


@pytest.fixture
def menu_items(db_session, category):
    desserts = Category(name="Desserts")
    db_session.add(desserts)
    db_session.flush()

    items = [
        MenuItem(
            name="Margherita Pizza",
            description="Tomato, mozzarella, basil",
            price=12.50,
            category_id=category.id,
            dietary_type="vegetarian",
        ),
        MenuItem(
            name="Grilled Salmon",
            description="With seasonal vegetables",
            price=18.00,
            category_id=category.id,
        ),
        MenuItem(
            name="Tiramisu",
            description="Coffee and mascarpone",
            price=7.25,
            category_id=desserts.id,
        ),
        MenuItem(
            name="Truffle Risotto",
            description="Seasonal special",
            price=22.00,
            category_id=category.id,
            is_available=False,
        ),
    ]
    db_session.add_all(items)
    db_session.commit()
    for item in items:
        db_session.refresh(item)
    return items


@pytest.fixture
def add_reservation(db_session):
    """Insert a reservation directly, bypassing validation."""

    def _add(day: date, at: time, party_size: int, status: str = "Approved", **extra):
        reservation = Reservation(
            customer_name=extra.pop("customer_name", "Test Guest"),
            customer_email=extra.pop("customer_email", "guest@bistro-mail.com"),
            reservation_date=day,
            reservation_time=at,
            party_size=party_size,
            status=status,
            **extra,
        )
        db_session.add(reservation)
        db_session.commit()
        db_session.refresh(reservation)
        return reservation

    return _add
