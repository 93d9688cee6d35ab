"""Gas station endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from fastapi import APIRouter, FastAPI, Request

from gas_station_api.core.errors import BadRequestError
from gas_station_api.core.models import GasStation, GasStationWithHistory

if TYPE_CHECKING:
    from gas_station_api.services.station_service import GasStationService

router: APIRouter = APIRouter()


def _station_service(http_request: Request) -> GasStationService:
    return cast("GasStationService", http_request.app.state.services["station_service"])


def _parse_coordinate(name: str, raw: str | None) -> float:
    # float() also accepts padding and "_" separators, which are not valid coordinates
    if raw is None or raw != raw.strip() or "_" in raw:
        raise BadRequestError(f"Invalid {name}")
    try:
        return float(raw)
    except ValueError:
        raise BadRequestError(f"Invalid {name}") from None


def create_gas_station(station: GasStation, http_request: Request) -> GasStation:
    """Store the station and echo it back."""

    return _station_service(http_request).create(station)


def nearby_gas_stations(
    http_request: Request,
    lat: str | None = None,
    lon: str | None = None,
) -> list[GasStation]:
    """Return the stations closest to the query point."""

    lat_value = _parse_coordinate("lat", lat)
    lon_value = _parse_coordinate("lon", lon)
    return _station_service(http_request).nearby(lat_value, lon_value)


def get_gas_station(name: str, http_request: Request) -> GasStationWithHistory:
    """Return one station together with its price history."""

    return _station_service(http_request).get_with_history(name)


def register_gas_station_routes(app: FastAPI) -> None:
    """Attach gas station routes to the provided application."""

    router.add_api_route(
        "/gas-stations",
        create_gas_station,
        methods=["POST"],
        status_code=201,
        response_model=GasStation,
    )
    # must precede the {name} route so "nearby" is not captured as a name
    router.add_api_route(
        "/gas-stations/nearby",
        nearby_gas_stations,
        methods=["GET"],
        response_model=list[GasStation],
    )
    router.add_api_route(
        "/gas-stations/{name}",
        get_gas_station,
        methods=["GET"],
        response_model=GasStationWithHistory,
    )
    app.include_router(router)
