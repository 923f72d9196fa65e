from sqlalchemy import Column, Integer, String, Numeric, Text

from storefront.data.database import Base


class ProductModel(Base):
    """Catalog row; read-only from the cart's point of view."""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False, default=0)
