"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- errors: storage exception hierarchy
- schemas: Pydantic models describing the storage tree
- taxonomy: name inflection and taxonomy assembly
"""

from domain.errors import (
    DirectoryNotFoundError,
    InvalidTaxonomyNameError,
    ItemLoadError,
    ItemNotFoundError,
    LoadError,
    StorageError,
)
from domain.schemas import TaxonomyInfo

__all__ = [
    "StorageError",
    "DirectoryNotFoundError",
    "ItemLoadError",
    "LoadError",
    "ItemNotFoundError",
    "InvalidTaxonomyNameError",
    "TaxonomyInfo",
]
