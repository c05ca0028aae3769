"""Taxonomy storage: directory scanning and the in-process cache."""

from infrastructure.storage.cache import TaxonomyCache, TaxonomyItems
from infrastructure.storage.loader import TaxonomyLoader

__all__ = [
    "TaxonomyCache",
    "TaxonomyItems",
    "TaxonomyLoader",
]
