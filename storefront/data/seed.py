# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.data.database import SessionLocal
from storefront.data.models import CartModel, ProductModel, UserModel

PRODUCTS = [
    {"id": 1, "name": "Keyboard", "price": Decimal("199.99"), "description": "Mechanical keyboard", "quantity": 25},
    {"id": 2, "name": "Mouse", "price": Decimal("49.50"), "description": "Wireless mouse", "quantity": 100},
    {"id": 3, "name": "Monitor", "price": Decimal("899.00"), "description": "27 inch monitor", "quantity": 0},
]


def seed(db: Session) -> None:
    # not forcing: only seed if empty
    if db.query(ProductModel).first():
        return

    db.add_all([ProductModel(**p) for p in PRODUCTS])
    db.add(UserModel(id=1, name="demo"))
    db.flush()
    db.add(CartModel(id=1, user_id=1))
    db.commit()


if __name__ == "__main__":
    session = SessionLocal()
    try:
        seed(session)
    finally:
        session.close()
