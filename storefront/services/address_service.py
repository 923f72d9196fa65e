# storefront/services/address_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from storefront.repos.address_repo import AddressRepo
from storefront.services.validators import validate_address, validate_address_inputs
from storefront.utils.errors import NotFoundError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ADDRESS_FIELDS = (
    "address1",
    "address2",
    "city",
    "state",
    "zip",
    "country",
    "first_name",
    "last_name",
)


class AddressService:
    def __init__(self, db: Session):
        self.repo = AddressRepo(db)

    def post_address(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validate_address_inputs(data)

        address = self.repo.create(data)

        logger.info(f"Created address {address['id']} for user {data['user_id']}")
        return {"address": address}

    def get_address(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"address": validate_address(self.repo, data)}

    def put_address(self, data: Dict[str, Any]) -> Dict[str, Any]:
        address = validate_address(self.repo, data)

        for field in ADDRESS_FIELDS:
            if field in data:
                address[field] = data[field]

        validate_address_inputs(address)

        updated = self.repo.update(address)
        if not updated:
            raise NotFoundError("Address not found")

        logger.info(f"Updated address {updated['id']} for user {data['user_id']}")
        return {"address": updated}

    def delete_address(self, data: Dict[str, Any]) -> Dict[str, Any]:
        address = validate_address(self.repo, data)

        deleted = self.repo.delete(address["id"])
        if not deleted:
            raise NotFoundError("Address not found")

        logger.info(f"Deleted address {deleted['id']} for user {data['user_id']}")
        return {"address": deleted}

    def get_all_addresses(self, user_id: int) -> Dict[str, Any]:
        return {"addresses": self.repo.find_by_user_id(user_id)}
