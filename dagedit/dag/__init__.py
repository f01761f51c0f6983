"""Merkle DAG node model, paths, and errors."""

from dagedit.dag.errors import (
    ContentNotFoundError,
    DagEditError,
    InvalidPathError,
    LinkNotFoundError,
    StoreFailureError,
)
from dagedit.dag.models import Link, Node, compute_cid
from dagedit.dag.path import join_path, split_path

__all__ = [
    "ContentNotFoundError",
    "DagEditError",
    "InvalidPathError",
    "Link",
    "LinkNotFoundError",
    "Node",
    "StoreFailureError",
    "compute_cid",
    "join_path",
    "split_path",
]
