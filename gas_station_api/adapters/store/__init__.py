"""Gas station store abstractions."""

from gas_station_api.adapters.store.base import Store
from gas_station_api.adapters.store.memory_store import MemoryStore

__all__ = ["MemoryStore", "Store"]
