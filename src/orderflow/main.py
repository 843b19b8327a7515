"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.dependencies import close_classification_client
from .api.middleware import setup_error_handlers
from .api.routes import health_router, orders_router
from .config import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Orderflow API starting up...")
    yield
    close_classification_client()
    logger.info("Orderflow API shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Orderflow API",
        description=(
            "Order post-processing pipeline. Classifies a user's orders by type, "
            "derives status and priority, and saves the results."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup error handlers
    setup_error_handlers(app)

    # Include routers
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(orders_router, prefix="/api/v1")

    logger.info(f"Orderflow API configured (debug={settings.debug}, storage={settings.storage_dir})")
    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "orderflow.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
