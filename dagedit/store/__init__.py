"""Node store implementations."""

from __future__ import annotations

from dagedit.config.loader import load_config
from dagedit.config.models import StoreConfig
from dagedit.interfaces.store import NodeStore
from dagedit.store.chain import StoreChain
from dagedit.store.memory import MemoryNodeStore, new_memory_store
from dagedit.store.sqlite import SQLiteNodeStore


def open_store(config: StoreConfig | None = None) -> NodeStore:
    """Build the store described by *config*, or by the project config when omitted."""
    if config is None:
        config = load_config().store
    if config.backend == "sqlite":
        return SQLiteNodeStore(db_path=config.path)
    return MemoryNodeStore()


__all__ = [
    "MemoryNodeStore",
    "SQLiteNodeStore",
    "StoreChain",
    "new_memory_store",
    "open_store",
]
