from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.utils.errors import translate_storage_errors

users = UserModel.__table__


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    @translate_storage_errors
    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    @translate_storage_errors
    def find_by_id(self, user_id: int) -> dict | None:
        row = self.db.execute(
            select(users).where(users.c.id == user_id)
        ).mappings().first()
        return dict(row) if row else None

    @translate_storage_errors
    def update_primary_payment_id(self, data: dict) -> dict | None:
        row = self.db.execute(
            update(users)
            .where(users.c.id == data.get("id"))
            .values(primary_payment_id=data.get("primary_payment_id"))
            .returning(*users.c)
        ).mappings().first()
        self.db.commit()

        return dict(row) if row else None
