from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api.core.config import Settings, get_settings
from inventory_api.core.errors import InventoryError
from inventory_api.core.logging_config import configure_logging
from inventory_api.repositories import JSONStateStore, StateStore
from inventory_api.routers import health as health_router
from inventory_api.routers import products as products_router
from inventory_api.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


async def _inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message)
    return _error_response(exc.message, exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
    return _error_response("Invalid request body", 400)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
    return _error_response("Internal server error", 500)


def create_app(settings: Optional[Settings] = None, store: Optional[StateStore] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``) and with tests that inject a store."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = store if store is not None else JSONStateStore(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.initialize()
        logger.info("Inventory Management Server (%s)", settings.app_env)
        if isinstance(store, JSONStateStore):
            logger.info("Database: %s", store.path.resolve())
        yield

    app = FastAPI(title="Inventory API", lifespan=lifespan)
    app.state.settings = settings
    app.state.inventory_service = InventoryService(store)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InventoryError, _inventory_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router.router)
    app.include_router(products_router.router)
    return app
