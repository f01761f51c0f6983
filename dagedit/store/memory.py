"""In-memory NodeStore, used for staging overlays and tests."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from dagedit.dag.errors import ContentNotFoundError
from dagedit.dag.models import Node


class MemoryNodeStore:
    """Dict-backed node store guarded by a lock."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self._nodes: dict[str, Node] = {}
        self._lock = threading.Lock()

    def add(self, node: Node) -> str:
        cid = node.cid
        with self._lock:
            self._nodes.setdefault(cid, node)
        return cid

    def get(self, cid: str) -> Node:
        with self._lock:
            try:
                return self._nodes[cid]
            except KeyError:
                raise ContentNotFoundError(cid, self.name) from None

    def remove(self, cid: str) -> None:
        with self._lock:
            if self._nodes.pop(cid, None) is None:
                raise ContentNotFoundError(cid, self.name)

    def has(self, cid: str) -> bool:
        with self._lock:
            return cid in self._nodes

    # -- extras ----------------------------------------------------------------

    def __contains__(self, cid: object) -> bool:
        return isinstance(cid, str) and self.has(cid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._nodes))

    def __repr__(self) -> str:
        return f"MemoryNodeStore(name={self.name!r}, nodes={len(self)})"


def new_memory_store(name: str = "staging") -> MemoryNodeStore:
    """Fresh empty store for an editor's intermediate node versions."""
    return MemoryNodeStore(name=name)
