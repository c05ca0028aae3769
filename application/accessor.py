"""
Lazy, read-only access to taxonomies stored as directories of item files.

Example:
    Filename: <storage>/magic_place/cueva_del_majanicho.yml
    Query:    storage.lookup("getMagicPlace", "cueva_del_majanicho")
    Same as:  storage.lookup("MagicPlace", "cueva_del_majanicho")
              storage.lookup("magic_place")["cueva_del_majanicho"]
"""

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from domain.errors import ItemNotFoundError
from domain.schemas import TaxonomyInfo
from domain.taxonomy import Inflector, camel_to_snake, resolve_taxonomy_key
from infrastructure.io import ensure_directory, list_subdirectories
from infrastructure.items import ItemLoader
from infrastructure.storage import TaxonomyCache, TaxonomyItems, TaxonomyLoader

logger = logging.getLogger(__name__)

TaxonomyGetter = Callable[..., Any]


class FilesAsStorage:
    """
    Accessor over a storage directory.

    Each immediate subdirectory of the storage root is a taxonomy; each file in it
    is an item whose identifier is the filename without its extension. A taxonomy
    is scanned on first access and then served from memory for the lifetime of the
    accessor. Safe to share between threads.
    """

    def __init__(
        self,
        storage_root: Path | str,
        inflector: Inflector | None = camel_to_snake,
        *,
        item_loader: ItemLoader | None = None,
        taxonomy_loader: TaxonomyLoader | None = None,
    ) -> None:
        """
        Args:
            storage_root: Existing directory holding the taxonomy directories
            inflector: Maps raw dispatch names to directory names; None disables inflection
            item_loader: Parser for item files (default: YAML)
            taxonomy_loader: Directory scanner; built from storage_root/item_loader if omitted

        Raises:
            NotADirectoryError: If storage_root is not an existing directory
            TypeError: If inflector is neither callable nor None
        """
        root = Path(storage_root).resolve()
        ensure_directory(root, "storage root")
        if inflector is not None and not callable(inflector):
            raise TypeError(f"inflector must be callable or None, got {type(inflector).__name__}")

        self._storage_root = root
        self._inflector = inflector
        self._loader = taxonomy_loader or TaxonomyLoader(root, item_loader)
        self._cache = TaxonomyCache()

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    @property
    def inflector(self) -> Inflector | None:
        return self._inflector

    def taxonomy_key(self, dispatch_name: str) -> str:
        """Resolve a dispatch name ("getMagicPlace", "MagicPlace", ...) to its taxonomy key."""
        return resolve_taxonomy_key(dispatch_name, self._inflector)

    def is_loaded(self, dispatch_name: str) -> bool:
        return self._cache.has(self.taxonomy_key(dispatch_name))

    def lookup(self, dispatch_name: str, identifier: str | None = None) -> TaxonomyItems | Any:
        """
        Load and return a taxonomy, or a single item of it.

        Args:
            dispatch_name: Taxonomy name, optionally prefixed with "get"
            identifier: Item identifier; None returns the whole taxonomy

        Returns:
            The taxonomy's read-only item mapping (shared, not copied), or one item's data

        Raises:
            InvalidTaxonomyNameError: If the name cannot resolve to a directory under the root
            DirectoryNotFoundError: If the taxonomy directory does not exist
            ItemLoadError: If an item file of the taxonomy fails to load
            ItemNotFoundError: If `identifier` is absent from the taxonomy
        """
        return self._lookup_key(self.taxonomy_key(dispatch_name), identifier)

    def discover(self) -> list[TaxonomyInfo]:
        """List the taxonomy directories under the storage root (does not load them)."""
        return [
            TaxonomyInfo(name=d.name, path=d, loaded=self._cache.has(d.name))
            for d in list_subdirectories(self._storage_root)
        ]

    def build_getters(self) -> dict[str, TaxonomyGetter]:
        """
        Build one accessor per discovered taxonomy: {taxonomy_key: getter(identifier=None)}.

        Getters bypass inflection, so every directory is reachable by its exact name.
        """
        getters: dict[str, TaxonomyGetter] = {}
        for info in self.discover():
            getters[info.name] = functools.partial(self._lookup_key, info.name)
        logger.debug("Built %d taxonomy getters", len(getters))
        return getters

    def _lookup_key(self, key: str, identifier: str | None = None) -> TaxonomyItems | Any:
        items = self._cache.get_or_load(key, self._loader.load)
        if identifier is None:
            return items
        if identifier not in items:
            raise ItemNotFoundError(identifier, key)
        return items[identifier]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(storage_root={str(self._storage_root)!r}, loaded={self._cache.keys()})"

