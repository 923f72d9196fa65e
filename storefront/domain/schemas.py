# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, field_serializer
from typing import List
from decimal import Decimal
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for creating a user."""

    id: int = Field(..., gt=0, description="User id (> 0)")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")


class UserRead(BaseModel):
    """Schema for a user (response)."""

    id: int
    name: str
    primary_payment_id: int | None = None

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# ADDRESSES
# =====================================================
class AddressIn(BaseModel):
    """Address payload; also used to validate merged records before update."""

    address1: str = Field(..., min_length=1, max_length=200)
    address2: str | None = Field(None, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip: str = Field(..., min_length=3, max_length=10)
    country: str = Field(..., min_length=2, max_length=100)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class AddressUpdate(BaseModel):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class AddressOut(AddressIn):
    id: int
    user_id: int
    created: datetime
    modified: datetime


class AddressEnvelope(BaseModel):
    address: AddressOut


class AddressesOut(BaseModel):
    addresses: List[AddressOut]


# =====================================================
# PAYMENTS
# =====================================================
class PaymentIn(BaseModel):
    """Card fields shared by requests and the input validator."""

    card_type: str = Field(..., min_length=1, max_length=50)
    provider: str = Field(..., min_length=1, max_length=50)
    card_no: str = Field(..., pattern=r"^\d{12,19}$", description="12-19 digits")
    cvv: str = Field(..., pattern=r"^\d{3,4}$", description="3 or 4 digits")
    exp_month: int = Field(..., ge=1, le=12)
    exp_year: int = Field(..., ge=1000, le=9999)
    billing_address_id: int | None = Field(None, gt=0)


class PaymentCreate(PaymentIn):
    is_primary_payment: bool = False


class PaymentUpdate(BaseModel):
    """Only fields present in the body are applied."""

    card_type: str | None = None
    provider: str | None = None
    card_no: str | None = None
    cvv: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    billing_address_id: int | None = None
    is_primary_payment: bool = False


class PaymentOut(BaseModel):
    """Card as returned to clients; cvv is never echoed back, card_no is masked."""

    id: int
    card_type: str
    provider: str
    card_no: str
    exp_month: int
    exp_year: int
    billing_address_id: int | None = None
    user_id: int
    created: datetime
    modified: datetime
    is_primary_payment: bool

    @field_serializer("card_no")
    def mask_card_no(self, card_no: str) -> str:
        return "*" * (len(card_no) - 4) + card_no[-4:]


class PaymentEnvelope(BaseModel):
    payment: PaymentOut


class PaymentsEnvelope(BaseModel):
    payments: List[PaymentOut]


# =====================================================
# CART ITEMS
# =====================================================
class CartItemIn(BaseModel):
    """Schema for adding a product to a cart."""

    product_id: int = Field(..., gt=0, description="Product id (> 0)")
    quantity: int = Field(..., gt=0, description="Quantity (> 0)")


class CartItemUpdate(BaseModel):
    quantity: int = Field(..., gt=0, description="Quantity (> 0)")


class CartItemOut(BaseModel):
    """Cart item with product data joined at read time."""

    cart_id: int
    product_id: int
    quantity: int
    name: str
    description: str | None = None
    total_price: Decimal
    in_stock: bool
    created: datetime
    modified: datetime


class CartItemEnvelope(BaseModel):
    cart_item: CartItemOut


class CartItemsEnvelope(BaseModel):
    cart_items: List[CartItemOut]
