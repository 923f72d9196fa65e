# storefront/repos/cart_item_repo.py
from decimal import Decimal

from sqlalchemy import insert, update, delete, select, func, and_
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.utils.errors import translate_storage_errors

cart_items = CartItemModel.__table__
products = ProductModel.__table__


def _with_product():
    """
    Cart item columns joined with the product they point at.
    total_price and in_stock come from the current product row on every call.
    """
    return select(
        cart_items,
        products.c.name,
        (products.c.price * cart_items.c.quantity).label("total_price"),
        products.c.description,
        (products.c.quantity > 0).label("in_stock"),
    ).join_from(cart_items, products, cart_items.c.product_id == products.c.id)


def _key(data: dict):
    return and_(
        cart_items.c.cart_id == data.get("cart_id"),
        cart_items.c.product_id == data.get("product_id"),
    )


class CartItemRepo:
    def __init__(self, db: Session):
        self.db = db

    @translate_storage_errors
    def create(self, data: dict) -> dict | None:
        row = self.db.execute(
            insert(cart_items)
            .values(
                cart_id=data.get("cart_id"),
                product_id=data.get("product_id"),
                quantity=data.get("quantity"),
            )
            .returning(cart_items.c.cart_id, cart_items.c.product_id)
        ).first()
        self.db.commit()

        if not row:
            return None
        return self.find_one(data)

    @translate_storage_errors
    def update(self, data: dict) -> dict | None:
        row = self.db.execute(
            update(cart_items)
            .where(_key(data))
            .values(quantity=data.get("quantity"), modified=func.now())
            .returning(cart_items.c.cart_id, cart_items.c.product_id)
        ).first()
        self.db.commit()

        if not row:
            return None
        return self.find_one(data)

    @translate_storage_errors
    def find_in_cart(self, cart_id: int) -> list[dict] | None:
        rows = self.db.execute(
            _with_product()
            .where(cart_items.c.cart_id == cart_id)
            .order_by(cart_items.c.created, cart_items.c.product_id)
        ).mappings().all()

        # empty cart is None here, unlike the other list lookups
        if not rows:
            return None
        return [dict(r) for r in rows]

    @translate_storage_errors
    def find_one(self, data: dict) -> dict | None:
        row = self.db.execute(_with_product().where(_key(data))).mappings().first()
        return dict(row) if row else None

    @translate_storage_errors
    def delete(self, data: dict) -> dict | None:
        current = self.find_one(data)

        deleted = self.db.execute(
            delete(cart_items).where(_key(data)).returning(*cart_items.c)
        ).mappings().first()
        self.db.commit()

        if not deleted or not current:
            return None

        # removed item: product info stays for display, amounts are zeroed
        item = dict(deleted)
        item.update(
            quantity=0,
            name=current["name"],
            total_price=Decimal("0"),
            description=current["description"],
            in_stock=current["in_stock"],
        )
        return item
