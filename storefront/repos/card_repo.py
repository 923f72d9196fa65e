# storefront/repos/card_repo.py
from sqlalchemy import insert, update, delete, select, func
from sqlalchemy.orm import Session

from storefront.data.models.card import CardModel
from storefront.utils.errors import translate_storage_errors

cards = CardModel.__table__

# columns a caller may rewrite; user_id is fixed at creation
CARD_FIELDS = (
    "card_type",
    "provider",
    "card_no",
    "cvv",
    "exp_month",
    "exp_year",
    "billing_address_id",
)


class CardRepo:
    def __init__(self, db: Session):
        self.db = db

    @translate_storage_errors
    def create(self, data: dict) -> dict | None:
        values = {key: data.get(key) for key in CARD_FIELDS}
        values["user_id"] = data.get("user_id")

        row = self.db.execute(
            insert(cards).values(**values).returning(*cards.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None

    @translate_storage_errors
    def update(self, data: dict) -> dict | None:
        values = {key: data.get(key) for key in CARD_FIELDS}

        row = self.db.execute(
            update(cards)
            .where(cards.c.id == data.get("id"))
            .values(**values, modified=func.now())
            .returning(*cards.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None

    @translate_storage_errors
    def find_by_id(self, card_id: int) -> dict | None:
        row = self.db.execute(
            select(cards).where(cards.c.id == card_id)
        ).mappings().first()
        return dict(row) if row else None

    @translate_storage_errors
    def find_by_user_id(self, user_id: int) -> list[dict]:
        rows = self.db.execute(
            select(cards).where(cards.c.user_id == user_id).order_by(cards.c.id)
        ).mappings().all()
        return [dict(r) for r in rows]

    @translate_storage_errors
    def delete(self, card_id: int) -> dict | None:
        row = self.db.execute(
            delete(cards).where(cards.c.id == card_id).returning(*cards.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None
