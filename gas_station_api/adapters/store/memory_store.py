"""In-memory store implementation."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Mapping
from typing import Any

from gas_station_api.adapters.store.base import Store
from gas_station_api.core.errors import GasStationNotFoundError
from gas_station_api.core.models import GasStation, GasStationWithHistory, HistoryRecord, User


class MemoryStore(Store):
    """Keep users, stations and histories in process memory.

    A single lock guards all three mappings. Every read hands out deep copies
    taken while the lock is held, so callers never observe a half-applied
    price update and can mutate what they get back freely.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.time,
        logger: Any | None = None,
    ) -> None:
        self._users: dict[str, User] = {}
        self._gas_stations: dict[str, GasStation] = {}
        self._histories: dict[str, list[HistoryRecord]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._logger = logger

    def create_user(self, user: User) -> None:
        with self._lock:
            self._users[user.email] = user.model_copy(deep=True)

    def create_gas_station(self, station: GasStation) -> None:
        with self._lock:
            if station.name in self._gas_stations and self._logger is not None:
                self._logger.info("overwriting gas station %s", station.name)
            self._gas_stations[station.name] = station.model_copy(deep=True)
            self._histories.setdefault(station.name, [])

    def get_gas_station(self, name: str) -> GasStation:
        with self._lock:
            station = self._gas_stations.get(name)
            if station is None:
                raise GasStationNotFoundError(name)
            return station.model_copy(deep=True)

    def get_gas_station_with_history(self, name: str) -> GasStationWithHistory:
        with self._lock:
            station = self._gas_stations.get(name)
            if station is None:
                raise GasStationNotFoundError(name)
            history = [record.model_copy(deep=True) for record in self._histories.get(name, [])]
            return GasStationWithHistory(**station.model_dump(), history=history)

    def add_price_to_gas_station(self, name: str, fuel_prices: Mapping[str, float]) -> None:
        prices = dict(fuel_prices)
        with self._lock:
            station = self._gas_stations.get(name)
            if station is None:
                raise GasStationNotFoundError(name)

            station.prices.update(prices)
            record = HistoryRecord(timestamp=int(self._clock()), prices=prices)
            self._histories.setdefault(name, []).append(record)

    def get_all_users(self) -> dict[str, User]:
        with self._lock:
            return {email: user.model_copy(deep=True) for email, user in self._users.items()}

    def get_all_gas_stations(self) -> dict[str, GasStation]:
        with self._lock:
            return {
                name: station.model_copy(deep=True)
                for name, station in self._gas_stations.items()
            }

    def get_all_histories(self) -> dict[str, list[HistoryRecord]]:
        with self._lock:
            return {
                name: [record.model_copy(deep=True) for record in history]
                for name, history in self._histories.items()
            }
