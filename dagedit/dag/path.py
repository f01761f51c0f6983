"""Slash-delimited path handling."""

from __future__ import annotations

from collections.abc import Sequence

from dagedit.dag.errors import InvalidPathError

SEPARATOR = "/"


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Split *path* into its name components.

    Accepts either a ``/``-separated string or an already split sequence.
    A leading or trailing separator, an empty component, or an empty path
    raises :class:`InvalidPathError`.
    """
    if isinstance(path, str):
        if not path:
            raise InvalidPathError(path, "path is empty")
        if path.startswith(SEPARATOR) or path.endswith(SEPARATOR):
            raise InvalidPathError(path, "leading or trailing separator")
        parts = tuple(path.split(SEPARATOR))
    else:
        parts = tuple(path)
        if not parts:
            raise InvalidPathError(path, "path is empty")
        for part in parts:
            if not isinstance(part, str):
                raise InvalidPathError(path, f"component {part!r} is not a string")
            if SEPARATOR in part:
                raise InvalidPathError(path, f"component {part!r} contains a separator")

    if any(part == "" for part in parts):
        raise InvalidPathError(path, "empty component")
    return parts


def join_path(parts: Sequence[str]) -> str:
    return SEPARATOR.join(parts)
