# storefront/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.api import create_app
from storefront.data.database import Base, engine
from storefront.utils.settings import DB_CONNECT_ATTEMPTS
from storefront.utils.logging import get_logger

# import all models before create_all
import storefront.data.models  # noqa: F401

logger = get_logger(__name__)


def db_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_CONNECT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )


@db_retry()
def init_db():
    """Creates missing tables; waits for the database to accept connections."""
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = create_app(lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
