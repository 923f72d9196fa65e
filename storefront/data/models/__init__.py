#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.user import UserModel
from storefront.data.models.address import AddressModel
from storefront.data.models.card import CardModel
from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel

__all__ = [
    "UserModel",
    "AddressModel",
    "CardModel",
    "ProductModel",
    "CartModel",
    "CartItemModel",
]
