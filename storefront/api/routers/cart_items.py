#storefront/api/routers/cart_items.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import (
    CartItemIn,
    CartItemUpdate,
    CartItemEnvelope,
    CartItemsEnvelope,
)
from storefront.services.cart_item_service import CartItemService

router = APIRouter(prefix="/carts/{cart_id}/items", tags=["cart items"])


@router.get("/", response_model=CartItemsEnvelope)
def list_items(cart_id: int, db: Session = Depends(get_db)):
    return CartItemService(db).get_all_cart_items(cart_id)


@router.post("/", response_model=CartItemEnvelope, status_code=201)
def add_item(cart_id: int, payload: CartItemIn, db: Session = Depends(get_db)):
    return CartItemService(db).post_cart_item({**payload.model_dump(), "cart_id": cart_id})


@router.get("/{product_id}", response_model=CartItemEnvelope)
def get_item(cart_id: int, product_id: int, db: Session = Depends(get_db)):
    return CartItemService(db).get_cart_item({"cart_id": cart_id, "product_id": product_id})


@router.put("/{product_id}", response_model=CartItemEnvelope)
def update_item(
    cart_id: int,
    product_id: int,
    payload: CartItemUpdate,
    db: Session = Depends(get_db),
):
    return CartItemService(db).put_cart_item({
        "cart_id": cart_id,
        "product_id": product_id,
        "quantity": payload.quantity,
    })


@router.delete("/{product_id}", response_model=CartItemEnvelope)
def remove_item(cart_id: int, product_id: int, db: Session = Depends(get_db)):
    return CartItemService(db).delete_cart_item({"cart_id": cart_id, "product_id": product_id})
