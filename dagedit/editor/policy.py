"""What to do when an insert path crosses a missing intermediate link."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dagedit.dag.models import Node


@dataclass(frozen=True)
class Fail:
    """A missing intermediate link aborts the insert with ``LinkNotFoundError``."""


@dataclass(frozen=True)
class CreateWith:
    """Missing intermediates are synthesized by calling *factory*."""

    factory: Callable[[], Node]

    @classmethod
    def empty(cls) -> CreateWith:
        return cls(factory=Node.empty)


CreationPolicy = Fail | CreateWith

FAIL = Fail()
