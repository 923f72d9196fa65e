"""
Shared fixtures: an in-memory SQLite database built from the same metadata
as production, a few users, products and carts, and a TestClient bound to it.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api import create_app
from storefront.data.database import Base, get_db
from storefront.data.models import CartModel, ProductModel, UserModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # enforce foreign keys like PostgreSQL does
    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Users 1 and 2, three products, cart 1 for user 1 and cart 2 for user 2."""
    db.add_all([UserModel(id=1, name="alice"), UserModel(id=2, name="bob")])
    db.add_all([
        ProductModel(id=1, name="Keyboard", price=Decimal("199.99"), description="Mechanical", quantity=5),
        ProductModel(id=2, name="Mouse", price=Decimal("49.50"), description="Wireless", quantity=10),
        ProductModel(id=3, name="Monitor", price=Decimal("899.00"), description="27 inch", quantity=0),
    ])
    db.flush()
    db.add_all([CartModel(id=1, user_id=1), CartModel(id=2, user_id=2)])
    db.commit()
    return db


@pytest.fixture
def client(seeded):
    app = create_app()

    def override_get_db():
        yield seeded

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def make_address(user_id: int = 1, **overrides) -> dict:
    data = {
        "address1": "1 Main St",
        "address2": None,
        "city": "Springfield",
        "state": "IL",
        "zip": "62701",
        "country": "US",
        "first_name": "Alice",
        "last_name": "Smith",
        "user_id": user_id,
    }
    data.update(overrides)
    return data


def make_card(user_id: int = 1, **overrides) -> dict:
    data = {
        "card_type": "credit",
        "provider": "visa",
        "card_no": "4111111111111111",
        "cvv": "123",
        "exp_month": 12,
        "exp_year": 2030,
        "billing_address_id": None,
        "user_id": user_id,
    }
    data.update(overrides)
    return data
