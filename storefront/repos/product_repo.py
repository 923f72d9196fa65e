# storefront/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.utils.errors import translate_storage_errors

products = ProductModel.__table__


class ProductRepo:
    """Read-only access to the catalog."""

    def __init__(self, db: Session):
        self.db = db

    @translate_storage_errors
    def find_by_id(self, product_id: int) -> dict | None:
        row = self.db.execute(
            select(products).where(products.c.id == product_id)
        ).mappings().first()
        return dict(row) if row else None
