"""Copy-on-write path editing over an immutable Merkle DAG."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from dagedit.config import DagEditConfig, load_config
from dagedit.dag.errors import ContentNotFoundError, DagEditError, LinkNotFoundError
from dagedit.dag.models import Node
from dagedit.dag.path import join_path, split_path
from dagedit.editor.policy import FAIL, CreateWith, CreationPolicy, Fail
from dagedit.interfaces.store import NodeStore
from dagedit.store.chain import StoreChain
from dagedit.store.memory import new_memory_store

logger = logging.getLogger(__name__)


@dataclass
class _EditLog:
    """Node versions replaced while rebuilding one path."""

    superseded: list[str] = field(default_factory=list)


class Editor:
    """Edits a DAG rooted at *root* without touching any stored node.

    Every node version produced by an edit goes into a private staging
    store. Lookups check staging first and fall back to the read-only
    *source* store. :meth:`finalize` copies the new versions into a
    durable store.

    An editor is not safe for concurrent use; serialize edits externally.
    """

    def __init__(
        self,
        root: Node,
        source: NodeStore | None = None,
        *,
        staging: NodeStore | None = None,
        evict_superseded: bool = True,
    ) -> None:
        self._root = root
        self._source = source
        self._staging = staging if staging is not None else new_memory_store()
        self._lookup = StoreChain(self._staging, self._source)
        self._refs: Counter[str] = Counter()
        self.evict_superseded = evict_superseded

    @classmethod
    def from_config(
        cls,
        root: Node,
        config: DagEditConfig | None = None,
        source: NodeStore | None = None,
    ) -> Editor:
        """Build an editor from *config*, loading the project config when omitted."""
        if config is None:
            config = load_config()
        return cls(root, source, evict_superseded=config.editor.evict_superseded)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def root(self) -> Node:
        return self.current_root()

    def current_root(self) -> Node:
        """Snapshot of the current root, independent of the editor's state."""
        return self._root.model_copy()

    @property
    def staging(self) -> NodeStore:
        return self._staging

    @property
    def source(self) -> NodeStore | None:
        return self._source

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve_child(self, node: Node, name: str) -> Node:
        """Fetch the child linked as *name*, from staging first, then source.

        Raises ``LinkNotFoundError`` when *node* has no such link and
        ``ContentNotFoundError`` when neither store holds the target.
        """
        link = node.get_link(name)
        return self._lookup.get(link.cid)

    def get_node(self, path: str | Sequence[str]) -> Node:
        """Resolve *path* against the current root."""
        node = self._root
        for name in split_path(path):
            node = self.resolve_child(node, name)
        return node

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def insert_at_path(
        self,
        path: str | Sequence[str],
        node: Node,
        create: CreationPolicy = FAIL,
    ) -> None:
        """Link *node* at *path*, rebuilding every ancestor up to the root.

        An existing link at the final name is replaced. With
        ``CreateWith(factory)`` missing intermediate links are filled with
        fresh nodes from *factory*; with ``FAIL`` they raise.
        """
        if not isinstance(create, (Fail, CreateWith)):
            raise TypeError(f"create must be FAIL or CreateWith, got {create!r}")
        parts = split_path(path)
        log = _EditLog()
        new_root = self._insert(self._root, parts, node, create, log)
        self._commit(new_root, log)
        logger.debug("inserted %s at %s, root is now %s", node.cid, join_path(parts), new_root.cid)

    def remove_at_path(self, path: str | Sequence[str]) -> None:
        """Unlink the entry at *path*; a missing entry raises ``LinkNotFoundError``."""
        parts = split_path(path)
        log = _EditLog()
        new_root = self._remove(self._root, parts, log)
        self._commit(new_root, log)
        logger.debug("removed %s, root is now %s", join_path(parts), new_root.cid)

    def _insert(
        self,
        node: Node,
        path: tuple[str, ...],
        child: Node,
        create: CreationPolicy,
        log: _EditLog,
    ) -> Node:
        name = path[0]
        if len(path) == 1:
            updated = node.add_link(name, child)
            self._stage(child)
            log.superseded.append(node.cid)
            self._stage(updated)
            return updated

        try:
            current = self.resolve_child(node, name)
        except LinkNotFoundError:
            if not isinstance(create, CreateWith):
                raise
            current = create.factory()

        rebuilt = self._insert(current, path[1:], child, create, log)
        return self._relink(node, name, rebuilt, log)

    def _remove(self, node: Node, path: tuple[str, ...], log: _EditLog) -> Node:
        name = path[0]
        if len(path) == 1:
            updated = node.remove_link(name)
            log.superseded.append(node.cid)
            self._stage(updated)
            return updated

        current = self.resolve_child(node, name)
        rebuilt = self._remove(current, path[1:], log)
        return self._relink(node, name, rebuilt, log)

    def _relink(self, node: Node, name: str, rebuilt: Node, log: _EditLog) -> Node:
        updated = node.add_link(name, rebuilt)
        log.superseded.append(node.cid)
        self._stage(updated)
        return updated

    def _commit(self, new_root: Node, log: _EditLog) -> None:
        self._root = new_root
        if self.evict_superseded:
            self._evict(log.superseded, new_root.cid)

    # ------------------------------------------------------------------
    # Staging cleanup
    # ------------------------------------------------------------------

    def _stage(self, node: Node) -> None:
        """Add *node* to staging, counting the links it holds on first add."""
        if not self._staging.has(node.cid):
            for link in node.links:
                self._refs[link.cid] += 1
        self._staging.add(node)

    def _release(self, node: Node) -> None:
        for link in node.links:
            self._refs[link.cid] -= 1
            if self._refs[link.cid] <= 0:
                del self._refs[link.cid]

    def _evict(self, cids: list[str], root_cid: str) -> None:
        """Drop superseded versions that no staged node links to any more.

        Versions are visited top-down, so evicting a parent releases its
        links before its superseded child is considered.
        """
        for cid in reversed(dict.fromkeys(cids)):
            if cid == root_cid or self._refs[cid] > 0:
                continue
            try:
                node = self._staging.get(cid)
                self._staging.remove(cid)
            except ContentNotFoundError:
                continue
            except DagEditError as e:
                logger.warning("could not evict superseded node %s: %s", cid, e)
                continue
            self._release(node)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def finalize(self, target: NodeStore) -> Node:
        """Copy every node created in this session into *target*.

        Children missing from staging were never modified here and are
        assumed to be in *target* already, so they are not descended into.
        """
        root = self.current_root()
        copied = self._copy_dag(root, target, set())
        logger.debug("finalized root %s, exported %d node(s)", root.cid, copied)
        return root

    def _copy_dag(self, node: Node, target: NodeStore, seen: set[str]) -> int:
        target.add(node)
        seen.add(node.cid)
        copied = 1
        for link in node.links:
            if link.cid in seen:
                continue
            try:
                child = self._staging.get(link.cid)
            except ContentNotFoundError:
                continue
            copied += self._copy_dag(child, target, seen)
        return copied
