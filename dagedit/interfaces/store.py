"""Node store interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dagedit.dag.models import Node


@runtime_checkable
class NodeStore(Protocol):
    """Content-addressed key/value store of DAG nodes.

    ``get`` and ``remove`` raise ``ContentNotFoundError`` when the identity
    is absent; any other failure is reported as ``StoreFailureError``.
    ``add`` is idempotent.
    """

    def add(self, node: Node) -> str: ...

    def get(self, cid: str) -> Node: ...

    def remove(self, cid: str) -> None: ...

    def has(self, cid: str) -> bool: ...
