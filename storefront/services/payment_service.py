# storefront/services/payment_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from storefront.repos.address_repo import AddressRepo
from storefront.repos.card_repo import CardRepo, CARD_FIELDS
from storefront.repos.user_repo import UserRepo
from storefront.services.validators import (
    validate_billing_address,
    validate_payment,
    validate_payment_inputs,
)
from storefront.utils.errors import NotFoundError
from storefront.utils.format import attach_is_primary_payment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentService:
    """
    Payment methods of a user.
    The primary payment is stored once on the user (users.primary_payment_id),
    so two cards can never both claim to be primary.
    """

    def __init__(self, db: Session):
        self.cards = CardRepo(db)
        self.users = UserRepo(db)
        self.addresses = AddressRepo(db)

    def _primary_payment_id(self, user_id: int) -> int | None:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user["primary_payment_id"]

    def _set_primary_payment_id(self, user_id: int, payment_id: int | None) -> None:
        self.users.update_primary_payment_id({
            "id": user_id,
            "primary_payment_id": payment_id,
        })
        logger.info(f"User {user_id} primary payment set to {payment_id}")

    #commands
    def post_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validate_payment_inputs(data)
        validate_billing_address(self.addresses, data)

        payment = self.cards.create(data)

        # two round trips; a failure here leaves the card without the pointer
        if data.get("is_primary_payment"):
            self._set_primary_payment_id(data["user_id"], payment["id"])

        payment["is_primary_payment"] = bool(data.get("is_primary_payment"))

        logger.info(f"Created payment {payment['id']} for user {data['user_id']}")
        return {"payment": payment}

    def put_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payment = validate_payment(self.cards, data)

        # only whitelisted fields present in the request are applied
        for field in CARD_FIELDS:
            if field in data:
                payment[field] = data[field]

        validate_payment_inputs(payment)
        validate_billing_address(self.addresses, payment)

        updated = self.cards.update(payment)
        if not updated:
            raise NotFoundError("Payment method not found")

        # a falsy flag does not clear an existing pointer to this card
        if data.get("is_primary_payment"):
            self._set_primary_payment_id(data["user_id"], updated["id"])
            updated["is_primary_payment"] = True
        else:
            updated["is_primary_payment"] = False

        logger.info(f"Updated payment {updated['id']} for user {data['user_id']}")
        return {"payment": updated}

    def delete_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payment = validate_payment(self.cards, data)

        primary_payment_id = self._primary_payment_id(data["user_id"])
        attach_is_primary_payment(payment, primary_payment_id)

        # clear the pointer first so it never references a deleted card
        if payment["is_primary_payment"]:
            self._set_primary_payment_id(data["user_id"], None)

        deleted = self.cards.delete(payment["id"])
        if not deleted:
            raise NotFoundError("Payment method not found")

        attach_is_primary_payment(deleted, primary_payment_id)

        logger.info(f"Deleted payment {deleted['id']} for user {data['user_id']}")
        return {"payment": deleted}

    #queries
    def get_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payment = validate_payment(self.cards, data)

        primary_payment_id = self._primary_payment_id(data["user_id"])
        attach_is_primary_payment(payment, primary_payment_id)

        return {"payment": payment}

    def get_all_payments(self, user_id: int) -> Dict[str, Any]:
        payments = self.cards.find_by_user_id(user_id)

        primary_payment_id = self._primary_payment_id(user_id)
        for payment in payments:
            attach_is_primary_payment(payment, primary_payment_id)

        return {"payments": payments}
