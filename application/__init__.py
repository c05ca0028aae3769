"""
Application layer: the public accessor and its wiring.

This layer coordinates between domain logic and infrastructure.
"""

from application.accessor import FilesAsStorage, TaxonomyGetter
from application.factory import make_storage

__all__ = [
    "FilesAsStorage",
    "TaxonomyGetter",
    "make_storage",
]
