"""
Helpers for nested record trees.

A record is a dict whose values are either strings (leaves) or nested
dicts (nodes). Lookups return one of three explicit variants so callers
never have to probe value types themselves.
"""

from dataclasses import dataclass, field
from typing import Any, Union

PATH_SEPARATOR = "."
EXTRAS_KEY = "__extras"
EXTRA_KEY_PREFIX = "_extra_"

Record = dict[str, Any]


@dataclass(frozen=True)
class Empty:
    """Nothing stored at the path."""


@dataclass(frozen=True)
class Leaf:
    """A scalar field value."""

    value: str


@dataclass(frozen=True)
class Node:
    """A nested mapping."""

    children: Record = field(default_factory=dict)


TreeValue = Union[Empty, Leaf, Node]


def split_path(key: str) -> list[str]:
    """Split a dot-path header key into its segments."""
    return key.split(PATH_SEPARATOR)


def upsert_path(tree: Record, path: list[str], value: str) -> None:
    """
    Assign ``value`` at ``path``, creating intermediate nodes.

    An intermediate segment that is missing or holds a leaf is replaced by
    an empty node. The final segment is always overwritten.

    Args:
        tree: Record to mutate
        path: Non-empty list of path segments
        value: Leaf value to store
    """
    head, rest = path[0], path[1:]
    if not rest:
        tree[head] = value
        return

    child = tree.get(head)
    if not isinstance(child, dict):
        child = {}
        tree[head] = child
    upsert_path(child, rest, value)


def lookup(tree: Record, path: str | list[str]) -> TreeValue:
    """
    Resolve a path inside a record.

    Args:
        tree: Record to search
        path: Dot-path string or list of segments

    Returns:
        Empty, Leaf or Node
    """
    segments = split_path(path) if isinstance(path, str) else path
    current: Any = tree
    for segment in segments:
        if not isinstance(current, dict) or segment not in current:
            return Empty()
        current = current[segment]

    if isinstance(current, dict):
        return Node(current)
    if current is None:
        return Empty()
    return Leaf(str(current))


def has_content(tree: Record) -> bool:
    """True if any leaf, at any depth, holds non-whitespace text."""
    for value in tree.values():
        if isinstance(value, dict):
            if has_content(value):
                return True
        elif value is not None and str(value).strip():
            return True
    return False


def flatten_record(header: list[str], record: Record) -> list[str]:
    """
    Rebuild the flat field list of a record from its header.

    Header fields come first, in header order, followed by any overflow
    values kept under ``__extras``.

    Args:
        header: Dot-path keys used to build the record
        record: Record built from that header

    Returns:
        List of field strings
    """
    fields = []
    for key in header:
        resolved = lookup(record, split_path(key))
        fields.append(resolved.value if isinstance(resolved, Leaf) else "")

    extras = record.get(EXTRAS_KEY)
    if isinstance(extras, dict):
        position = 1
        while f"{EXTRA_KEY_PREFIX}{position}" in extras:
            fields.append(extras[f"{EXTRA_KEY_PREFIX}{position}"])
            position += 1
    return fields
