"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Item file formats (YAML, JSON)
- Taxonomy directory scanning and caching
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ItemFormat, StorageConfig, load_storage_config
from infrastructure.items import ItemLoader, make_item_loader
from infrastructure.storage import TaxonomyCache, TaxonomyLoader

__all__ = [
    # Configuration
    "load_storage_config",
    "StorageConfig",
    "ItemFormat",
    # Item loaders
    "make_item_loader",
    "ItemLoader",
    # Storage
    "TaxonomyLoader",
    "TaxonomyCache",
]
