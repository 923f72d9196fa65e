from storefront.data.models import CartModel, ProductModel, UserModel
from storefront.data.seed import PRODUCTS, seed


def test_seed_fills_empty_database(db):
    seed(db)

    assert db.query(ProductModel).count() == len(PRODUCTS)
    assert db.get(UserModel, 1).name == "demo"
    assert db.get(CartModel, 1).user_id == 1


def test_seed_is_skipped_when_catalog_exists(db):
    seed(db)
    seed(db)

    assert db.query(ProductModel).count() == len(PRODUCTS)
