"""
FastAPI Application - Product Store
In-memory product catalogue with API-key protected CRUD endpoints
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import health, home, products
from app.core.config import config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    request_validation_handler,
)
from app.core.logger import logger
from app.middleware import (
    ApiKeyMiddleware,
    CorrelationIdMiddleware,
    ErrorBoundaryMiddleware,
    RequestLoggingMiddleware,
)
from app.repositories.product import ProductRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(
        "Product Store started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    yield

    logger.info(
        "Shutting down Product Store...",
        metadata={"products_discarded": await app.state.product_repository.count()}
    )


def create_app(repository: Optional[ProductRepository] = None) -> FastAPI:
    """Build a fully wired application that owns its own product store"""
    app = FastAPI(
        title="Product Store",
        description="In-memory product catalogue service",
        version=config.service_version,
        lifespan=lifespan
    )
    app.state.product_repository = repository or ProductRepository()

    # Errors raised inside routes
    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Middleware runs outermost-first in the reverse order of registration:
    # correlation id -> logging -> error boundary -> api key -> routes
    app.add_middleware(ApiKeyMiddleware)
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(home.router, tags=["home"])
    app.include_router(health.router, tags=["health"])
    app.include_router(products.router, prefix=f"{config.api_prefix}/products", tags=["products"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Server is running on http://localhost:{config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.is_development
    )
