"""
Item loaders.

Implements the adapter pattern for item file formats:
- YAML (default, safe_load)
- JSON

All loaders implement the ItemLoader interface. Content is parsed, never executed.
"""

from infrastructure.items.base import ItemLoader
from infrastructure.items.factory import make_item_loader
from infrastructure.items.json import JsonItemLoader
from infrastructure.items.yaml import YamlItemLoader

__all__ = [
    # Abstract base
    "ItemLoader",
    # Concrete implementations
    "YamlItemLoader",
    "JsonItemLoader",
    # Factory (most commonly used)
    "make_item_loader",
]
