from __future__ import annotations

import asyncio
import random
import threading
import time
from collections.abc import Mapping

from gas_station_api.adapters.store.memory_store import MemoryStore
from gas_station_api.core.errors import GasStationNotFoundError
from gas_station_api.core.models import GasStation, Location
from gas_station_api.services.price_simulator import PriceSimulator


def seeded_store() -> MemoryStore:
    store = MemoryStore()
    store.create_gas_station(
        GasStation(name="A", location=Location(lat=0, lon=0), prices={"gas": 1.0, "diesel": 0.9})
    )
    store.create_gas_station(GasStation(name="B", location=Location(lat=5, lon=5), prices={"gas": 2.0}))
    return store


class VanishingStore(MemoryStore):
    """Drops one station between the snapshot and its update."""

    def __init__(self, vanishing: str) -> None:
        super().__init__()
        self._vanishing = vanishing

    def add_price_to_gas_station(self, name: str, fuel_prices: Mapping[str, float]) -> None:
        if name == self._vanishing:
            raise GasStationNotFoundError(name)
        super().add_price_to_gas_station(name, fuel_prices)


class FlakyStore(MemoryStore):
    """Fails the first snapshot, then behaves."""

    def __init__(self) -> None:
        super().__init__()
        self.snapshots = 0

    def get_all_gas_stations(self) -> dict[str, GasStation]:
        self.snapshots += 1
        if self.snapshots == 1:
            raise RuntimeError("boom")
        return super().get_all_gas_stations()


def test_tick_perturbs_every_fuel_within_range(dummy_logger) -> None:
    store = seeded_store()
    simulator = PriceSimulator(
        store=store, interval=1.0, rng=random.Random(7), logger=dummy_logger
    )

    updated = simulator.tick()

    assert updated == 2  # noqa: S101
    histories = store.get_all_histories()
    assert len(histories["A"]) == 1  # noqa: S101
    assert len(histories["B"]) == 1  # noqa: S101
    assert set(histories["A"][0].prices) == {"gas", "diesel"}  # noqa: S101
    a = store.get_gas_station("A").prices
    assert abs(a["gas"] - 1.0) <= 0.05  # noqa: S101
    assert abs(a["diesel"] - 0.9) <= 0.05  # noqa: S101
    assert a == histories["A"][0].prices  # noqa: S101
    assert abs(store.get_gas_station("B").prices["gas"] - 2.0) <= 0.05  # noqa: S101
    assert len(dummy_logger.infos) == 2  # noqa: S101


def test_tick_honours_configured_delta() -> None:
    store = seeded_store()
    simulator = PriceSimulator(store=store, interval=1.0, max_delta=0.0, rng=random.Random(1))

    simulator.tick()

    assert store.get_gas_station("A").prices == {"gas": 1.0, "diesel": 0.9}  # noqa: S101


def test_station_without_prices_still_gets_empty_record() -> None:
    store = MemoryStore()
    store.create_gas_station(GasStation(name="Empty"))
    simulator = PriceSimulator(store=store, interval=1.0)

    simulator.tick()

    assert [r.prices for r in store.get_all_histories()["Empty"]] == [{}]  # noqa: S101


def test_tick_skips_vanished_station_with_warning(dummy_logger) -> None:
    store = VanishingStore("A")
    store.create_gas_station(GasStation(name="A", prices={"gas": 1.0}))
    store.create_gas_station(GasStation(name="B", prices={"gas": 2.0}))
    simulator = PriceSimulator(store=store, interval=1.0, logger=dummy_logger)

    updated = simulator.tick()

    assert updated == 1  # noqa: S101
    assert store.get_all_histories()["A"] == []  # noqa: S101
    assert len(store.get_all_histories()["B"]) == 1  # noqa: S101
    assert any("A" in message for message in dummy_logger.warnings)  # noqa: S101


def test_run_loop_ticks_until_stopped(dummy_logger) -> None:
    store = seeded_store()
    simulator = PriceSimulator(store=store, interval=0.01, logger=dummy_logger)

    async def scenario() -> None:
        simulator.start()
        assert simulator.running  # noqa: S101
        await asyncio.sleep(0.1)
        await simulator.stop()

    asyncio.run(scenario())

    assert not simulator.running  # noqa: S101
    records = len(store.get_all_histories()["A"])
    assert records >= 2  # noqa: S101
    assert "price simulator stopped" in dummy_logger.infos  # noqa: S101


def test_run_loop_survives_failed_tick(dummy_logger) -> None:
    store = FlakyStore()
    store.create_gas_station(GasStation(name="A", prices={"gas": 1.0}))
    simulator = PriceSimulator(store=store, interval=0.01, logger=dummy_logger)

    async def scenario() -> None:
        simulator.start()
        await asyncio.sleep(0.1)
        await simulator.stop()

    asyncio.run(scenario())

    assert dummy_logger.errors == ["price simulation tick failed"]  # noqa: S101
    assert store.get_all_histories()["A"]  # noqa: S101


def test_stop_without_start_is_noop() -> None:
    simulator = PriceSimulator(store=MemoryStore(), interval=1.0)

    asyncio.run(simulator.stop())

    assert not simulator.running  # noqa: S101


def test_event_loop_stays_responsive_while_store_lock_is_held() -> None:
    store = seeded_store()
    simulator = PriceSimulator(store=store, interval=0.01)
    lock_taken = threading.Event()

    def hold_lock() -> None:
        with store._lock:
            lock_taken.set()
            time.sleep(0.5)

    async def scenario() -> float:
        simulator.start()
        holder = threading.Thread(target=hold_lock)
        holder.start()
        lock_taken.wait()

        max_gap = 0.0
        last = time.monotonic()
        while holder.is_alive():
            await asyncio.sleep(0.01)
            now = time.monotonic()
            max_gap = max(max_gap, now - last)
            last = now

        await simulator.stop()
        holder.join()
        return max_gap

    max_gap = asyncio.run(scenario())

    assert max_gap < 0.2  # noqa: S101
