from sqlalchemy.orm import Session
from storefront.data.models.user import UserModel
from storefront.repos.user_repo import UserRepo
from storefront.domain.schemas import UserCreate, UserRead
from storefront.utils.errors import NotFoundError


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        existing = self.repo.find_by_id(payload.id)
        if existing:
            return UserRead(**existing)

        user = UserModel(id=payload.id, name=payload.name)
        created = self.repo.create_user(user)
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead(**user)
