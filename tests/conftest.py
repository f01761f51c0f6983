"""Shared test fixtures for dagedit."""

import pytest

from dagedit.config.models import DagEditConfig
from dagedit.dag.models import Node
from dagedit.store.memory import MemoryNodeStore


def leaf(text: str) -> Node:
    return Node(data=text.encode())


@pytest.fixture
def source_tree():
    """A small committed tree living only in a read-only source store.

    root
    ├── a
    │   └── x  (leaf "x-data")
    └── z      (leaf "z-data")
    """
    store = MemoryNodeStore(name="source")
    x = leaf("x-data")
    z = leaf("z-data")
    a = Node().add_link("x", x)
    root = Node().add_link("a", a).add_link("z", z)
    for node in (x, z, a, root):
        store.add(node)
    return {"store": store, "root": root, "a": a, "x": x, "z": z}


@pytest.fixture
def source_store(source_tree) -> MemoryNodeStore:
    return source_tree["store"]


@pytest.fixture
def sample_config():
    return DagEditConfig()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the developer's env, cwd, and home."""
    monkeypatch.delenv("DAGEDIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
