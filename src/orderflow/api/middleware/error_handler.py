"""Error handling for the API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.exceptions import ClassificationError, OrderFlowError, PersistenceError

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI) -> None:
    """Setup exception handlers for the FastAPI app."""

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "detail": str(exc)},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(f"Order store failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=503,
            content={"error": "Order store unavailable", "detail": str(exc)},
        )

    @app.exception_handler(ClassificationError)
    async def classification_error_handler(request: Request, exc: ClassificationError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"error": "Classification service failure", "detail": str(exc)},
        )

    @app.exception_handler(OrderFlowError)
    async def orderflow_error_handler(request: Request, exc: OrderFlowError) -> JSONResponse:
        logger.exception(f"Unhandled pipeline error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Order processing failed", "detail": str(exc)},
        )
