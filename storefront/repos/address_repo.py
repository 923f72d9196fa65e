# storefront/repos/address_repo.py
from sqlalchemy import insert, update, delete, select, func
from sqlalchemy.orm import Session

from storefront.data.models.address import AddressModel
from storefront.utils.errors import translate_storage_errors

addresses = AddressModel.__table__

_MUTABLE = (
    "address1",
    "address2",
    "city",
    "state",
    "zip",
    "country",
    "first_name",
    "last_name",
)


class AddressRepo:
    def __init__(self, db: Session):
        self.db = db

    @translate_storage_errors
    def create(self, data: dict) -> dict | None:
        values = {key: data.get(key) for key in _MUTABLE}
        values["user_id"] = data.get("user_id")

        row = self.db.execute(
            insert(addresses).values(**values).returning(*addresses.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None

    @translate_storage_errors
    def update(self, data: dict) -> dict | None:
        values = {key: data.get(key) for key in _MUTABLE}

        row = self.db.execute(
            update(addresses)
            .where(addresses.c.id == data.get("id"))
            .values(**values, modified=func.now())
            .returning(*addresses.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None

    @translate_storage_errors
    def find_by_id(self, address_id: int) -> dict | None:
        row = self.db.execute(
            select(addresses).where(addresses.c.id == address_id)
        ).mappings().first()
        return dict(row) if row else None

    @translate_storage_errors
    def find_by_user_id(self, user_id: int) -> list[dict]:
        rows = self.db.execute(
            select(addresses)
            .where(addresses.c.user_id == user_id)
            .order_by(addresses.c.id)
        ).mappings().all()
        return [dict(r) for r in rows]

    @translate_storage_errors
    def delete(self, address_id: int) -> dict | None:
        row = self.db.execute(
            delete(addresses).where(addresses.c.id == address_id).returning(*addresses.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None
