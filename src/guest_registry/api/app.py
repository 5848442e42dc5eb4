"""FastAPI application factory."""

import locale
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guest_registry.api.guests import router as guests_router
from guest_registry.api.models import ErrorResponse
from guest_registry.app_logging import configure_logging
from guest_registry.containers import AppContainer
from guest_registry.domain.errors import (
    DuplicateEmail,
    GuestError,
    NotFound,
    ValidationFailed,
)

ERROR_STATUS: dict[type[GuestError], HTTPStatus] = {
    ValidationFailed: HTTPStatus.UNPROCESSABLE_ENTITY,
    DuplicateEmail: HTTPStatus.CONFLICT,
    NotFound: HTTPStatus.NOT_FOUND,
}


def status_for_error(exc: GuestError) -> HTTPStatus:
    """Map a guest error to an HTTP status; store failures become 502."""
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return HTTPStatus.BAD_GATEWAY


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("Environment collation locale unavailable; using the default")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Guest registry started with %s store",
            app.state.container.settings.record_store,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Guest Registry", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(GuestError)
    async def guest_error_handler(request: Request, exc: GuestError) -> JSONResponse:
        body = ErrorResponse(error=exc.kind, detail=exc.message)
        return JSONResponse(status_code=status_for_error(exc), content=body.model_dump())

    app.include_router(guests_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
