import pytest
from sqlalchemy import select

from storefront.data.models import CartItemModel
from storefront.domain.schemas import UserCreate
from storefront.services.address_service import AddressService
from storefront.services.cart_item_service import CartItemService
from storefront.services.user_service import UserService
from storefront.services.validators import validate_cart_item_inputs
from storefront.utils.errors import NotFoundError, ValidationError
from storefront.utils.format import attach_is_primary_payment

from conftest import make_address


class TestAddressService:

    def test_post_and_get(self, seeded):
        svc = AddressService(seeded)
        address = svc.post_address(make_address())["address"]

        found = svc.get_address({"address_id": address["id"], "user_id": 1})["address"]

        assert found == address

    def test_post_invalid(self, seeded):
        with pytest.raises(ValidationError, match="city"):
            AddressService(seeded).post_address(make_address(city=""))

    def test_put_merges_fields(self, seeded):
        svc = AddressService(seeded)
        address = svc.post_address(make_address(address2="Apt 1"))["address"]

        updated = svc.put_address({
            "address_id": address["id"],
            "user_id": 1,
            "zip": "62704",
        })["address"]

        assert updated["zip"] == "62704"
        assert updated["address2"] == "Apt 1"
        assert updated["city"] == address["city"]

    def test_other_users_address(self, seeded):
        svc = AddressService(seeded)
        address = svc.post_address(make_address(user_id=2))["address"]

        with pytest.raises(NotFoundError):
            svc.get_address({"address_id": address["id"], "user_id": 1})
        with pytest.raises(NotFoundError):
            svc.delete_address({"address_id": address["id"], "user_id": 1})

    def test_delete_and_list(self, seeded):
        svc = AddressService(seeded)
        address = svc.post_address(make_address())["address"]

        assert svc.get_all_addresses(1)["addresses"] == [address]
        assert svc.delete_address({"address_id": address["id"], "user_id": 1})["address"]["id"] == address["id"]
        assert svc.get_all_addresses(1) == {"addresses": []}


class TestCartItemService:

    def test_post_and_list(self, seeded):
        svc = CartItemService(seeded)
        svc.post_cart_item({"cart_id": 1, "product_id": 1, "quantity": 1})

        items = svc.get_all_cart_items(1)["cart_items"]

        assert [i["name"] for i in items] == ["Keyboard"]

    def test_empty_cart_lists_as_empty(self, seeded):
        assert CartItemService(seeded).get_all_cart_items(1) == {"cart_items": []}

    def test_non_positive_quantity(self, seeded):
        with pytest.raises(ValidationError):
            CartItemService(seeded).post_cart_item({"cart_id": 1, "product_id": 1, "quantity": 0})

    def test_unknown_product_writes_nothing(self, seeded):
        svc = CartItemService(seeded)

        with pytest.raises(NotFoundError, match="Product"):
            svc.post_cart_item({"cart_id": 1, "product_id": 999, "quantity": 1})

        assert seeded.execute(select(CartItemModel.__table__)).all() == []

    def test_missing_cart_id(self, seeded):
        with pytest.raises(ValidationError, match="cart_id"):
            CartItemService(seeded).post_cart_item({"product_id": 1, "quantity": 1})

    def test_put_missing_item(self, seeded):
        with pytest.raises(NotFoundError):
            CartItemService(seeded).put_cart_item({"cart_id": 1, "product_id": 1, "quantity": 2})

    def test_get_and_delete_missing_item(self, seeded):
        svc = CartItemService(seeded)
        with pytest.raises(NotFoundError):
            svc.get_cart_item({"cart_id": 1, "product_id": 1})
        with pytest.raises(NotFoundError):
            svc.delete_cart_item({"cart_id": 1, "product_id": 1})

    def test_delete(self, seeded):
        svc = CartItemService(seeded)
        svc.post_cart_item({"cart_id": 1, "product_id": 2, "quantity": 3})

        item = svc.delete_cart_item({"cart_id": 1, "product_id": 2})["cart_item"]

        assert item["quantity"] == 0
        assert item["name"] == "Mouse"


class TestUserService:

    def test_create_is_idempotent(self, seeded):
        svc = UserService(seeded)
        created = svc.create_user(UserCreate(id=7, name="carol"))
        again = svc.create_user(UserCreate(id=7, name="someone else"))

        assert created.name == "carol"
        assert again.name == "carol"
        assert again.primary_payment_id is None

    def test_get_missing(self, seeded):
        with pytest.raises(NotFoundError):
            UserService(seeded).get_user(99)


class TestHelpers:

    @pytest.mark.parametrize("quantity", [None, -1, 0, "two"])
    def test_bad_quantities(self, quantity):
        with pytest.raises(ValidationError):
            validate_cart_item_inputs({"cart_id": 1, "product_id": 1, "quantity": quantity})

    def test_attach_is_primary_payment(self):
        payment = {"id": 3}

        attach_is_primary_payment(payment, 3)
        assert payment["is_primary_payment"] is True

        attach_is_primary_payment(payment, None)
        assert payment["is_primary_payment"] is False
