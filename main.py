'''
FastAPI application for a Ticketing System.

The app exposes endpoints to manage users, events, and orders.

Available endpoints:
- /users: Create, list, read, update, delete users.
- /events: Create, list, read events.
- /orders: Create, list, read, update, delete orders.

Records are kept in process memory and are lost on restart.
'''

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from Database.db import TicketingDB
from errors import AppError, InvalidPayloadError
from logging_config import setup_logging
from settings import Settings

# routers
from api.event_routes import event_router
from api.middleware import RequestLoggingMiddleware
from api.models import HealthResponse
from api.order_routes import order_router
from api.user_routes import user_router
from api.utils import _respond

logger = logging.getLogger(__name__)

INVALID_METHOD = "Invalid request method"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    setup_logging(app.state.settings.log_level)
    logger.info("Ticketing System API starting", extra={"legacy_status_codes": app.state.settings.legacy_status_codes})
    yield
    logger.info("Ticketing System API stopped")


async def app_error_handler(request: Request, exc: AppError):
    """Turn an AppError into its response: an envelope for validation failures, plain text otherwise."""
    if isinstance(exc, InvalidPayloadError):
        logger.warning(
            "Payload validation failed",
            extra={"http.status.code": exc.status_code, "fields": [error.field for error in exc.errors]},
        )
        return _respond(exc.status_code, exc.message, data=exc.data, errors=exc.errors)
    if exc.is_client_error:
        logger.warning(exc.message, extra={"http.status.code": exc.status_code})
    else:
        logger.error(exc.message, extra={"http.status.code": exc.status_code})
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(INVALID_METHOD, status_code=exc.status_code, headers=exc.headers)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Optional[Settings] = None, db: Optional[TicketingDB] = None) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings: Runtime configuration, read from the environment when omitted.
        db: Storage to serve from, a fresh empty one when omitted.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title=settings.title, version=settings.version, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db or TicketingDB()   # create ONCE

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(user_router, prefix="/users", tags=["Users"])
    app.include_router(event_router, prefix="/events", tags=["Events"])
    app.include_router(order_router, prefix="/orders", tags=["Orders"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Ticketing System API"}

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(status="ok")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=app.state.settings.host, port=app.state.settings.port, reload=True)
