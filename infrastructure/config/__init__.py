"""
Configuration management: models, loading, and validation.

Handles:
- StorageConfig: storage root, inflection mode, item format
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_storage_config
from infrastructure.config.models import ItemFormat, StorageConfig

__all__ = [
    "StorageConfig",
    "ItemFormat",
    "load_storage_config",
]
