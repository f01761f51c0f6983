"""dagedit - copy-on-write path editing for content-addressed Merkle DAGs."""

from dagedit.config import DagEditConfig, load_config
from dagedit.dag import (
    ContentNotFoundError,
    DagEditError,
    InvalidPathError,
    Link,
    LinkNotFoundError,
    Node,
    StoreFailureError,
    split_path,
)
from dagedit.editor import FAIL, CreateWith, Editor, Fail
from dagedit.interfaces import NodeStore
from dagedit.store import MemoryNodeStore, SQLiteNodeStore, StoreChain, open_store

__version__ = "0.1.0"

__all__ = [
    "FAIL",
    "ContentNotFoundError",
    "CreateWith",
    "DagEditConfig",
    "DagEditError",
    "Editor",
    "Fail",
    "InvalidPathError",
    "Link",
    "LinkNotFoundError",
    "MemoryNodeStore",
    "Node",
    "NodeStore",
    "SQLiteNodeStore",
    "StoreChain",
    "StoreFailureError",
    "load_config",
    "open_store",
    "split_path",
]
