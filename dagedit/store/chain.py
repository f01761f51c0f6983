"""Ordered fallback lookup across several node stores."""

from __future__ import annotations

import logging

from dagedit.dag.errors import ContentNotFoundError
from dagedit.dag.models import Node
from dagedit.interfaces.store import NodeStore

logger = logging.getLogger(__name__)


class StoreChain:
    """Chain-of-responsibility over read access to node stores.

    Stores are consulted in order. Only ``ContentNotFoundError`` moves the
    lookup on to the next tier; every other error propagates at once.
    """

    def __init__(self, *stores: NodeStore | None) -> None:
        self.stores: tuple[NodeStore, ...] = tuple(s for s in stores if s is not None)

    def get(self, cid: str) -> Node:
        for store in self.stores:
            try:
                return store.get(cid)
            except ContentNotFoundError:
                logger.debug("%s missed %s, trying next tier", _store_name(store), cid)
        raise ContentNotFoundError(cid, "any store")

    def has(self, cid: str) -> bool:
        return any(store.has(cid) for store in self.stores)

    def __len__(self) -> int:
        return len(self.stores)


def _store_name(store: NodeStore) -> str:
    return getattr(store, "name", type(store).__name__)
