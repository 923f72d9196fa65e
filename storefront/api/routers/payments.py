# storefront/api/routers/payments.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import (
    PaymentCreate,
    PaymentUpdate,
    PaymentEnvelope,
    PaymentsEnvelope,
)
from storefront.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/", response_model=PaymentsEnvelope)
def list_payments(user_id: int = Query(...), db: Session = Depends(get_db)):
    return PaymentService(db).get_all_payments(user_id)


@router.post("/", response_model=PaymentEnvelope, status_code=201)
def create_payment(
    payload: PaymentCreate,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return PaymentService(db).post_payment({**payload.model_dump(), "user_id": user_id})


@router.get("/{payment_id}", response_model=PaymentEnvelope)
def get_payment(
    payment_id: int,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return PaymentService(db).get_payment({"payment_id": payment_id, "user_id": user_id})


@router.put("/{payment_id}", response_model=PaymentEnvelope)
def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return PaymentService(db).put_payment({
        **payload.model_dump(exclude_unset=True),
        "payment_id": payment_id,
        "user_id": user_id,
    })


@router.delete("/{payment_id}", response_model=PaymentEnvelope)
def delete_payment(
    payment_id: int,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return PaymentService(db).delete_payment({"payment_id": payment_id, "user_id": user_id})
