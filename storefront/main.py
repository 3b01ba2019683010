# storefront/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .database import create_tables
from .envelope import Failure
from .products import router as products_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed or missing JSON body; field rules are checked by the controller
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return Failure(status.HTTP_400_BAD_REQUEST, "Invalid request body").to_response()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        if settings.create_tables:
            await create_tables()
        logger.info("Storefront API started")
        yield
        logger.info("Storefront API shutting down")

    app = FastAPI(
        title="Storefront",
        description="Product catalogue API for the storefront demo",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(products_router, prefix="/api/products")

    @app.get("/")
    async def root():
        return {"message": "Storefront API is running"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run("storefront.main:app", host=settings.host, port=settings.port)
