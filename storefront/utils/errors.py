# storefront/utils/errors.py
"""
Business-level errors raised by stores, validators and services.
The HTTP layer maps each kind to a status code.
"""
from functools import wraps

from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StorefrontError(Exception):
    """Base exception for all business logic errors."""
    def __init__(self, message: str = "Unexpected error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """Raised when input is missing or malformed."""
    pass


class NotFoundError(StorefrontError):
    """Raised when a resource doesn't exist or belongs to another user."""
    pass


class ConflictError(StorefrontError):
    """Raised for constraint violations (unique, foreign key, not null)."""
    pass


class StorageError(StorefrontError):
    """Raised when a statement fails for any other reason."""
    pass


class StorageUnavailableError(StorageError):
    """Raised when the database cannot be reached."""
    pass


def translate_storage_errors(method):
    """
    Wraps a repo method: rolls back the session and re-raises SQLAlchemy
    errors as one of the kinds above, chained to the driver error.
    """
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{type(self).__name__}.{method.__name__} failed: {e}")

            if isinstance(e, IntegrityError):
                raise ConflictError("Conflicting record") from e
            if isinstance(e, (OperationalError, InterfaceError, DisconnectionError)):
                raise StorageUnavailableError("Database unavailable") from e
            raise StorageError("Storage error") from e

    return wrapper
