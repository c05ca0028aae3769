"""
Taxonomy naming and assembly.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.inflector import Inflector, InflectorMode, camel_to_snake, resolve_inflector
from domain.taxonomy.loader import assemble_taxonomy
from domain.taxonomy.naming import item_identifier, resolve_taxonomy_key, strip_get_prefix

__all__ = [
    "Inflector",
    "InflectorMode",
    "camel_to_snake",
    "resolve_inflector",
    "assemble_taxonomy",
    "item_identifier",
    "resolve_taxonomy_key",
    "strip_get_prefix",
]
