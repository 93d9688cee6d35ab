"""Basic health and readiness endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from gas_station_api.services.price_simulator import PriceSimulator

router: APIRouter = APIRouter()


def health() -> dict[str, str]:
    """Return liveness status."""

    return {"status": "ok"}


def ready(http_request: Request) -> Any:
    """Report ready once the price simulator is running, or when it is disabled."""

    simulator = cast(
        "PriceSimulator | None",
        http_request.app.state.services.get("price_simulator"),
    )
    if simulator is not None and not simulator.running:
        return JSONResponse(status_code=503, content={"status": "starting"})
    return {"status": "ready"}


def register_health_routes(app: FastAPI) -> None:
    """Attach health routes to the provided application."""

    router.add_api_route("/healthz", health, methods=["GET"])
    router.add_api_route("/ready", ready, methods=["GET"], response_model=None)
    app.include_router(router)
