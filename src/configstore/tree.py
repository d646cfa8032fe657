"""Nested value tree addressed by delimited paths."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigBranch",
    "split_path",
    "find_parent",
    "ensure_parent",
    "lookup",
]


class ConfigBranch(dict):
    """A sub-mapping created by the store.

    Anything stored in a branch that is not itself a ConfigBranch is a leaf.
    Leaves are opaque: a dict written as a value is never descended into.
    """

    def child(self, segment: str) -> ConfigBranch | None:
        """Return the sub-branch at *segment*, or None if missing or a leaf."""
        node = self.get(segment)
        return node if isinstance(node, ConfigBranch) else None

    def ensure_child(self, segment: str) -> ConfigBranch:
        """Return the sub-branch at *segment*, replacing a missing entry or leaf with an empty branch."""
        node = self.get(segment)
        if not isinstance(node, ConfigBranch):
            node = ConfigBranch()
            self[segment] = node
        return node


def split_path(path: str, separator: str = ".") -> list[str]:
    """Split *path* into segments. A path without *separator* is one segment."""
    return path.split(separator)


def find_parent(root: ConfigBranch, segments: list[str]) -> ConfigBranch | None:
    """Walk all but the last segment without creating anything.

    Returns None as soon as an intermediate segment is missing or holds a leaf.
    """
    node: ConfigBranch | None = root
    for segment in segments[:-1]:
        node = node.child(segment)
        if node is None:
            return None
    return node


def ensure_parent(root: ConfigBranch, segments: list[str]) -> ConfigBranch:
    """Walk all but the last segment, creating empty branches where needed."""
    node = root
    for segment in segments[:-1]:
        node = node.ensure_child(segment)
    return node


def lookup(root: ConfigBranch, segments: list[str], default: Any = None) -> Any:
    """Return the value at *segments* under *root*, or *default* if absent."""
    parent = find_parent(root, segments)
    if parent is None:
        return default
    return parent.get(segments[-1], default)
