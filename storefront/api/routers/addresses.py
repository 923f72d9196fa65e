# storefront/api/routers/addresses.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import AddressIn, AddressUpdate, AddressEnvelope, AddressesOut
from storefront.services.address_service import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("/", response_model=AddressesOut)
def list_addresses(user_id: int = Query(...), db: Session = Depends(get_db)):
    return AddressService(db).get_all_addresses(user_id)


@router.post("/", response_model=AddressEnvelope, status_code=201)
def create_address(
    payload: AddressIn,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return AddressService(db).post_address({**payload.model_dump(), "user_id": user_id})


@router.get("/{address_id}", response_model=AddressEnvelope)
def get_address(
    address_id: int,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return AddressService(db).get_address({"address_id": address_id, "user_id": user_id})


@router.put("/{address_id}", response_model=AddressEnvelope)
def update_address(
    address_id: int,
    payload: AddressUpdate,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return AddressService(db).put_address({
        **payload.model_dump(exclude_unset=True),
        "address_id": address_id,
        "user_id": user_id,
    })


@router.delete("/{address_id}", response_model=AddressEnvelope)
def delete_address(
    address_id: int,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    return AddressService(db).delete_address({"address_id": address_id, "user_id": user_id})
