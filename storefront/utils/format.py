# storefront/utils/format.py


def attach_is_primary_payment(payment: dict, primary_payment_id: int | None) -> None:
    """Sets payment["is_primary_payment"] in place from the user's pointer."""
    payment["is_primary_payment"] = (
        primary_payment_id is not None and payment["id"] == primary_payment_id
    )
