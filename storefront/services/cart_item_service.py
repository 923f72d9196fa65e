# storefront/services/cart_item_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from storefront.repos.cart_item_repo import CartItemRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.validators import validate_cart_item_inputs
from storefront.utils.errors import NotFoundError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartItemService:
    """
    Products in a cart. Prices and stock are never stored on the item,
    the repo joins them from the catalog on every call.
    """

    def __init__(self, db: Session):
        self.repo = CartItemRepo(db)
        self.products = ProductRepo(db)

    #commands
    def post_cart_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validate_cart_item_inputs(data)

        # checked before the insert so no row is written for an unknown product
        if not self.products.find_by_id(data["product_id"]):
            raise NotFoundError("Product not found")

        cart_item = self.repo.create(data)
        if not cart_item:
            raise NotFoundError("Product not found")

        logger.info(f"Added product {data['product_id']} to cart {data['cart_id']}")
        return {"cart_item": cart_item}

    def put_cart_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validate_cart_item_inputs(data)

        cart_item = self.repo.update(data)
        if not cart_item:
            raise NotFoundError("Cart item not found")

        logger.info(
            f"Cart {data['cart_id']}: product {data['product_id']} "
            f"quantity set to {data['quantity']}"
        )
        return {"cart_item": cart_item}

    def delete_cart_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        cart_item = self.repo.delete(data)
        if not cart_item:
            raise NotFoundError("Cart item not found")

        logger.info(f"Removed product {data['product_id']} from cart {data['cart_id']}")
        return {"cart_item": cart_item}

    #queries
    def get_cart_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        cart_item = self.repo.find_one(data)
        if not cart_item:
            raise NotFoundError("Cart item not found")
        return {"cart_item": cart_item}

    def get_all_cart_items(self, cart_id: int) -> Dict[str, Any]:
        # the repo reports an empty cart as None
        return {"cart_items": self.repo.find_in_cart(cart_id) or []}
