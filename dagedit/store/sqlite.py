"""NodeStore implementation backed by a local SQLite database."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path

from dagedit.dag.errors import ContentNotFoundError, StoreFailureError
from dagedit.dag.models import Node

_SCHEMA = """\
CREATE TABLE IF NOT EXISTS nodes (
    cid TEXT PRIMARY KEY,
    body BLOB NOT NULL
);
"""


class SQLiteNodeStore:
    """Durable node store using SQLite with WAL mode.

    Each node is stored once under its content identity, so repeated adds
    of the same node are no-ops.
    """

    def __init__(self, db_path: str = ".dagedit/nodes.db") -> None:
        path = Path(db_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        self.db_path = str(path)
        self.name = f"sqlite:{self.db_path}"
        try:
            self._conn = sqlite3.connect(self.db_path, isolation_level=None, timeout=5)
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "open", e) from e

    # -- NodeStore protocol ----------------------------------------------------

    def add(self, node: Node) -> str:
        cid = node.cid
        try:
            self._conn.execute(
                "INSERT OR IGNORE INTO nodes (cid, body) VALUES (?, ?)",
                (cid, node.encode()),
            )
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "add", e) from e
        return cid

    def get(self, cid: str) -> Node:
        try:
            row = self._conn.execute(
                "SELECT body FROM nodes WHERE cid = ?", (cid,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "get", e) from e
        if row is None:
            raise ContentNotFoundError(cid, self.name)

        try:
            node = Node.decode(row[0])
        except ValueError as e:
            raise StoreFailureError(self.name, "get", e) from e
        if node.cid != cid:
            raise StoreFailureError(
                self.name, "get", ValueError(f"content of {cid} hashes to {node.cid}")
            )
        return node

    def remove(self, cid: str) -> None:
        try:
            cursor = self._conn.execute("DELETE FROM nodes WHERE cid = ?", (cid,))
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "remove", e) from e
        if cursor.rowcount == 0:
            raise ContentNotFoundError(cid, self.name)

    def has(self, cid: str) -> bool:
        try:
            row = self._conn.execute(
                "SELECT 1 FROM nodes WHERE cid = ?", (cid,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "has", e) from e
        return row is not None

    # -- extras ----------------------------------------------------------------

    def __len__(self) -> int:
        try:
            return self._conn.execute("SELECT COUNT(*) FROM nodes").fetchone()[0]
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "len", e) from e

    def __iter__(self) -> Iterator[str]:
        try:
            rows = self._conn.execute("SELECT cid FROM nodes ORDER BY cid").fetchall()
        except sqlite3.Error as e:
            raise StoreFailureError(self.name, "iter", e) from e
        return iter([r[0] for r in rows])

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> SQLiteNodeStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
