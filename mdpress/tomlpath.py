"""Dotted-key access into nested TOML tables."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


def read_key(table: Any, key: str) -> Any | None:
    """Return the value at dotted ``key``, or ``None`` if any part is missing."""
    if not isinstance(table, Mapping):
        return None
    head, dot, tail = key.partition(".")
    if not dot:
        return table.get(key)
    return read_key(table.get(head), tail)


def insert_key(table: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Set ``value`` at dotted ``key``, replacing non-table values along the way."""
    if not isinstance(table, MutableMapping):
        raise TypeError("can only insert into a table")
    head, dot, tail = key.partition(".")
    if not dot:
        table[key] = value
        return
    child = table.get(head)
    if not isinstance(child, MutableMapping):
        child = table[head] = {}
    insert_key(child, tail, value)


def delete_key(table: Any, key: str) -> Any | None:
    """Remove and return the value at dotted ``key``, or ``None`` if it is absent."""
    if not isinstance(table, MutableMapping):
        return None
    head, dot, tail = key.partition(".")
    if not dot:
        return table.pop(key, None)
    return delete_key(table.get(head), tail)