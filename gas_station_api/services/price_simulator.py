"""Background task that randomly perturbs every station's fuel prices."""

from __future__ import annotations

import asyncio
import random
from typing import Any

from gas_station_api.adapters.store.base import Store
from gas_station_api.core.errors import GasStationNotFoundError

DEFAULT_MAX_DELTA = 0.05


class PriceSimulator:
    """Periodically push perturbed prices for every station through the store."""

    def __init__(
        self,
        *,
        store: Store,
        interval: float,
        max_delta: float = DEFAULT_MAX_DELTA,
        rng: random.Random | None = None,
        logger: Any | None = None,
    ) -> None:
        self._store = store
        self._interval = interval
        self._max_delta = max_delta
        self._rng = rng or random.Random()
        self._logger = logger
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> int:
        """Run one update pass and return how many stations were updated."""

        updated = 0
        for station in self._store.get_all_gas_stations().values():
            fuel_prices = {
                fuel: price + self._rng.uniform(-self._max_delta, self._max_delta)
                for fuel, price in station.prices.items()
            }

            try:
                self._store.add_price_to_gas_station(station.name, fuel_prices)
            except GasStationNotFoundError:
                if self._logger is not None:
                    self._logger.warning(
                        "gas station %s disappeared before its price update; skipping",
                        station.name,
                    )
                continue

            updated += 1
            if self._logger is not None:
                self._logger.info("Added price to gas station %s: %s", station.name, fuel_prices)

        return updated

    async def run(self) -> None:
        """Tick forever, sleeping `interval` seconds between passes."""

        while True:
            try:
                # store calls take a thread lock; keep them off the event loop
                await asyncio.to_thread(self.tick)
            except Exception:
                if self._logger is not None:
                    self._logger.error("price simulation tick failed", exc_info=True)
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        """Schedule the loop on the running event loop."""

        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self.run())
        if self._logger is not None:
            self._logger.info("price simulator started (interval=%ss)", self._interval)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to unwind."""

        task = self._task
        self._task = None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

        if self._logger is not None:
            self._logger.info("price simulator stopped")
