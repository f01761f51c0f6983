"""Immutable Merkle DAG nodes and their named links."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dagedit.dag.errors import InvalidPathError, LinkNotFoundError


def compute_cid(content: bytes) -> str:
    """Full SHA-256 hex digest used as a node's content identity."""
    return hashlib.sha256(content).hexdigest()


class Link(BaseModel):
    """A named, sized reference from a node to a child's content identity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    cid: str = Field(min_length=1)
    size: int = Field(default=0, ge=0)


class Node(BaseModel):
    """One vertex of the DAG: ordered named links plus opaque payload bytes.

    Nodes never change after construction. ``add_link`` and ``remove_link``
    return new nodes, leaving the receiver untouched.
    """

    model_config = ConfigDict(frozen=True)

    links: tuple[Link, ...] = ()
    data: bytes = b""

    @field_validator("links")
    @classmethod
    def validate_unique_names(cls, v: tuple[Link, ...]) -> tuple[Link, ...]:
        seen: set[str] = set()
        for link in v:
            if link.name in seen:
                raise ValueError(f"duplicate link name {link.name!r}")
            seen.add(link.name)
        return v

    @classmethod
    def empty(cls) -> Node:
        return cls()

    # ------------------------------------------------------------------
    # Identity & encoding
    # ------------------------------------------------------------------

    def encode(self) -> bytes:
        """Canonical serialized form; the content identity is derived from it."""
        payload = {
            "links": [[link.name, link.cid, link.size] for link in self.links],
            "data": base64.b64encode(self.data).decode("ascii"),
        }
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")

    @classmethod
    def decode(cls, raw: bytes) -> Node:
        """Inverse of :meth:`encode`. Raises ``ValueError`` on malformed input."""
        try:
            obj = json.loads(raw)
            links = tuple(
                Link(name=name, cid=cid, size=size) for name, cid, size in obj["links"]
            )
            data = base64.b64decode(obj["data"], validate=True)
        except (KeyError, TypeError, json.JSONDecodeError, binascii.Error) as e:
            raise ValueError(f"malformed node encoding: {e}") from e
        return cls(links=links, data=data)

    @cached_property
    def cid(self) -> str:
        return compute_cid(self.encode())

    @property
    def size(self) -> int:
        """Cumulative size: own encoding plus everything reachable via links."""
        return len(self.encode()) + sum(link.size for link in self.links)

    # ------------------------------------------------------------------
    # Link lookup
    # ------------------------------------------------------------------

    @property
    def links_by_name(self) -> dict[str, Link]:
        return {link.name: link for link in self.links}

    def has_link(self, name: str) -> bool:
        return any(link.name == name for link in self.links)

    def get_link(self, name: str) -> Link:
        for link in self.links:
            if link.name == name:
                return link
        raise LinkNotFoundError(name, self.cid)

    # ------------------------------------------------------------------
    # Pure edits
    # ------------------------------------------------------------------

    def add_link(self, name: str, child: Node) -> Node:
        """Return a copy linking *name* to *child*.

        An existing link with the same name is replaced in place so that
        sibling order is stable; otherwise the new link is appended.
        """
        if not name:
            raise InvalidPathError(name, "cannot create link with no name")
        new_link = Link(name=name, cid=child.cid, size=child.size)
        links = list(self.links)
        for i, link in enumerate(links):
            if link.name == name:
                links[i] = new_link
                break
        else:
            links.append(new_link)
        return Node(links=tuple(links), data=self.data)

    def remove_link(self, name: str) -> Node:
        """Return a copy without the link *name*; raises if it does not exist."""
        if not self.has_link(name):
            raise LinkNotFoundError(name, self.cid)
        links = tuple(link for link in self.links if link.name != name)
        return Node(links=links, data=self.data)
