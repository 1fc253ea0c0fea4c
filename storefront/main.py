# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from storefront.api import include_routers
from storefront.data.database import Base, engine
from storefront.domain.errors import StorefrontError
from storefront.utils.logging import RequestLoggingMiddleware, get_logger

# import modeli zeby zarejestrowac tabele w Base.metadata przed create_all
import storefront.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    engine.dispose()


async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}", exc_info=exc)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # szczegoly tylko w logach, klient dostaje ogolny komunikat
    logger.error(f"Database error on {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    include_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
