"""Dispatch-name inflection: raw taxonomy names to canonical directory keys."""

import re
from collections.abc import Callable
from enum import Enum

Inflector = Callable[[str], str]

_UPPER_BOUNDARY = re.compile(r"(?=[A-Z])")


class InflectorMode(str, Enum):
    """Inflection modes selectable from configuration."""

    CAMEL_TO_SNAKE = "camel_to_snake"
    NONE = "none"


def camel_to_snake(raw: str) -> str:
    """
    Convert a CamelCase name into the snake_case key used on disk.

    Examples:
        >>> camel_to_snake("MagicPlace")
        'magic_place'
        >>> camel_to_snake("magicPlace")
        'magic_place'
        >>> camel_to_snake("magic_place")
        'magic_place'

    Args:
        raw: Name as written by the caller (without the "get" prefix)

    Returns:
        Lowercased segments joined with underscores
    """
    parts = [p for p in _UPPER_BOUNDARY.split(raw) if p]
    return "_".join(parts).lower()


def resolve_inflector(mode: InflectorMode) -> Inflector | None:
    """Return the inflector for a configured mode (None disables inflection)."""
    if mode is InflectorMode.CAMEL_TO_SNAKE:
        return camel_to_snake
    if mode is InflectorMode.NONE:
        return None
    raise ValueError(f"Unsupported inflector mode: {mode}")
