"""Protocol definition for the gas station data store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from gas_station_api.core.models import GasStation, GasStationWithHistory, HistoryRecord, User


class Store(Protocol):
    """Storage abstraction for users, gas stations and their price histories."""

    def create_user(self, user: User) -> None:
        """Insert the user, overwriting any existing user with the same email."""

    def create_gas_station(self, station: GasStation) -> None:
        """Insert the station, overwriting any existing station with the same name."""

    def get_gas_station(self, name: str) -> GasStation:
        """Return the named station or raise `GasStationNotFoundError`."""

    def get_gas_station_with_history(self, name: str) -> GasStationWithHistory:
        """Return the named station and its history read in one consistent step."""

    def add_price_to_gas_station(self, name: str, fuel_prices: Mapping[str, float]) -> None:
        """Merge prices into the station and append one history record."""

    def get_all_users(self) -> dict[str, User]:
        """Return a snapshot of users keyed by email."""

    def get_all_gas_stations(self) -> dict[str, GasStation]:
        """Return a snapshot of gas stations keyed by name."""

    def get_all_histories(self) -> dict[str, list[HistoryRecord]]:
        """Return a snapshot of price histories keyed by station name."""
