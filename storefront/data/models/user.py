from sqlalchemy import Column, Integer, String, ForeignKey
from storefront.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)

    # primary payment lives on the user, never as a flag on cards
    primary_payment_id = Column(
        Integer,
        ForeignKey("cards.id", use_alter=True, name="fk_users_primary_payment_id", ondelete="SET NULL"),
        nullable=True,
    )
