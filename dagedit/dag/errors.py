"""Error types raised by the DAG editor and its node stores."""

from __future__ import annotations


class DagEditError(Exception):
    """Base class for every error raised by dagedit."""


class InvalidPathError(DagEditError):
    """A path (or a single link name) is empty or malformed."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")


class LinkNotFoundError(DagEditError):
    """A resolved node has no link with the requested name."""

    def __init__(self, name: str, cid: str | None = None) -> None:
        self.name = name
        self.cid = cid
        msg = f"no link named {name!r}"
        if cid:
            msg += f" on node {cid}"
        super().__init__(msg)


class ContentNotFoundError(DagEditError):
    """A content identity is absent from the store that was asked for it."""

    def __init__(self, cid: str, store: str | None = None) -> None:
        self.cid = cid
        self.store = store
        msg = f"content {cid} not found"
        if store:
            msg += f" in {store}"
        super().__init__(msg)


class StoreFailureError(DagEditError):
    """Wraps a store failure that is not simple absence (I/O, corruption, ...)."""

    def __init__(self, store: str, operation: str, cause: Exception) -> None:
        self.store = store
        self.operation = operation
        super().__init__(f"{store} {operation} failed: {cause}")
        self.__cause__ = cause
