# storefront/services/validators.py
"""
Input and ownership checks shared by the services.
Every failure is raised as one of the kinds in storefront.utils.errors.
"""
import pydantic
from pydantic import Field

from storefront.domain.schemas import AddressIn, CartItemIn, PaymentIn
from storefront.repos.address_repo import AddressRepo
from storefront.repos.card_repo import CardRepo
from storefront.utils.errors import NotFoundError, ValidationError


class _PaymentRecord(PaymentIn):
    user_id: int = Field(..., gt=0)


class _AddressRecord(AddressIn):
    user_id: int = Field(..., gt=0)


class _CartItemRecord(CartItemIn):
    cart_id: int = Field(..., gt=0)


def _describe(err: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in err.errors()
    )


def validate_payment_inputs(data: dict) -> None:
    try:
        _PaymentRecord.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid payment: {_describe(e)}") from e


def validate_address_inputs(data: dict) -> None:
    try:
        _AddressRecord.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid address: {_describe(e)}") from e


def validate_cart_item_inputs(data: dict) -> None:
    try:
        _CartItemRecord.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid cart item: {_describe(e)}") from e


def validate_payment(card_repo: CardRepo, data: dict) -> dict:
    """
    Returns the card identified by data["payment_id"].
    Missing cards and cards of other users look the same to the caller.
    """
    payment = card_repo.find_by_id(data.get("payment_id"))
    if not payment or payment["user_id"] != data.get("user_id"):
        raise NotFoundError("Payment method not found")
    return payment


def validate_address(address_repo: AddressRepo, data: dict) -> dict:
    address = address_repo.find_by_id(data.get("address_id"))
    if not address or address["user_id"] != data.get("user_id"):
        raise NotFoundError("Address not found")
    return address


def validate_billing_address(address_repo: AddressRepo, data: dict) -> None:
    """A card may only bill to an address of its own user."""
    address_id = data.get("billing_address_id")
    if address_id is None:
        return

    address = address_repo.find_by_id(address_id)
    if not address or address["user_id"] != data.get("user_id"):
        raise ValidationError("Billing address does not belong to user")
