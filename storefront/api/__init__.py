# storefront/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.routers import addresses, cart_items, payments, users
from storefront.api.routers.health import router as health_router
from storefront.utils.errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    StorageUnavailableError,
    StorefrontError,
    ValidationError,
)

# most specific kinds first, StorageUnavailableError subclasses StorageError
_STATUS_CODES = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StorageUnavailableError, 503),
    (StorageError, 500),
)


async def storefront_error_handler(request: Request, exc: StorefrontError):
    status_code = next(
        (code for kind, code in _STATUS_CODES if isinstance(exc, kind)), 500
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(title="Storefront Service", version="1.0.0", lifespan=lifespan)

    app.add_exception_handler(StorefrontError, storefront_error_handler)

    app.include_router(health_router)
    app.include_router(users.router)
    app.include_router(addresses.router)
    app.include_router(payments.router)
    app.include_router(cart_items.router)
    return app
