"""Gas station operations used by the HTTP layer."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from gas_station_api.adapters.store.base import Store
from gas_station_api.core.models import GasStation, GasStationWithHistory

DEFAULT_NEARBY_LIMIT = 3


def find_nearby(
    stations: Iterable[GasStation],
    lat: float,
    lon: float,
    limit: int = DEFAULT_NEARBY_LIMIT,
) -> list[GasStation]:
    """Return up to `limit` stations ordered by distance to (lat, lon).

    Distance is Euclidean in degree space, not geodesic. Every station is
    scanned; ties keep iteration order.
    """

    def distance(station: GasStation) -> float:
        return math.hypot(station.location.lat - lat, station.location.lon - lon)

    return sorted(stations, key=distance)[: max(limit, 0)]


class GasStationService:
    """Create and query gas stations through the store."""

    def __init__(
        self,
        *,
        store: Store,
        nearby_limit: int = DEFAULT_NEARBY_LIMIT,
        logger: Any | None = None,
    ) -> None:
        self._store = store
        self._nearby_limit = nearby_limit
        self._logger = logger

    def create(self, station: GasStation) -> GasStation:
        self._store.create_gas_station(station)
        if self._logger is not None:
            self._logger.info("created gas station %s", station.name)
        return station

    def get_with_history(self, name: str) -> GasStationWithHistory:
        """Return the station and its price history, oldest record first."""

        return self._store.get_gas_station_with_history(name)

    def nearby(self, lat: float, lon: float) -> list[GasStation]:
        stations = self._store.get_all_gas_stations().values()
        return find_nearby(stations, lat, lon, self._nearby_limit)
