"""Assemble a taxonomy's item mapping from parsed (identifier, value) entries."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any


def assemble_taxonomy(entries: Iterable[tuple[str, Any]]) -> tuple[Mapping[str, Any], list[str]]:
    """
    Build the read-only item mapping of one taxonomy.

    This is a pure function - it does NOT perform file I/O.
    Reading and parsing item files happens in infrastructure.items.

    Args:
        entries: (identifier, value) pairs in scan order

    Returns:
        Tuple of (mapping keyed in sorted identifier order, identifiers seen more than once).
        On a collision the last entry wins.
    """
    items: dict[str, Any] = {}
    collisions: list[str] = []
    for identifier, value in entries:
        if identifier in items and identifier not in collisions:
            collisions.append(identifier)
        items[identifier] = value

    ordered = {k: items[k] for k in sorted(items)}
    return MappingProxyType(ordered), collisions
