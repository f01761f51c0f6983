"""Interfaces implemented outside the editor core."""

from dagedit.interfaces.store import NodeStore

__all__ = ["NodeStore"]
