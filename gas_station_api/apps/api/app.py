"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import config
from gas_station_api.adapters.store.base import Store
from gas_station_api.adapters.store.memory_store import MemoryStore
from gas_station_api.apps.api.routes.gas_stations import register_gas_station_routes
from gas_station_api.apps.api.routes.health import register_health_routes
from gas_station_api.apps.api.routes.users import register_user_routes
from gas_station_api.core.errors import ApiError
from gas_station_api.core.models import ErrorResponse
from gas_station_api.services.price_simulator import PriceSimulator
from gas_station_api.services.station_service import GasStationService
from gas_station_api.services.user_service import UserService
from logger import logger


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    services = _build_services()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        simulator: PriceSimulator | None = app.state.services.get("price_simulator")
        if simulator is not None:
            simulator.start()
        try:
            yield
        finally:
            if simulator is not None:
                await simulator.stop()

    app = FastAPI(
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        title="gas-station-api",
        lifespan=lifespan,
    )

    app.state.services = services
    app.state.logger = logger

    register_error_handlers(app)
    register_user_routes(app)
    register_gas_station_routes(app)
    register_health_routes(app)

    return app


def register_error_handlers(app: FastAPI) -> None:
    """Serialize every failure as `{"Err": ..., "Status": ...}`."""

    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _error_response(message: str, status: int) -> JSONResponse:
    body = ErrorResponse(Err=message, Status=status)
    return JSONResponse(status_code=status, content=body.model_dump())


async def _handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.message, exc.status_code)


async def _handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    logger.info("rejected malformed request to %s: %s", request.url.path, exc)
    return _error_response("Invalid JSON", 400)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled error on %s", request.url.path, exc_info=exc)
    return _error_response("Error", 500)


def _build_services() -> dict[str, Any]:
    store: Store = MemoryStore(logger=logger)

    user_service = UserService(store=store, logger=logger)
    station_service = GasStationService(
        store=store,
        nearby_limit=config.NEARBY_LIMIT,
        logger=logger,
    )

    services: dict[str, Any] = {
        "store": store,
        "user_service": user_service,
        "station_service": station_service,
    }

    if config.SIMULATOR_ENABLED:
        services["price_simulator"] = PriceSimulator(
            store=store,
            interval=config.PRICE_UPDATE_INTERVAL,
            max_delta=config.PRICE_MAX_DELTA,
            logger=logger,
        )

    return services
