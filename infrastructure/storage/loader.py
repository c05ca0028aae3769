"""Scan one taxonomy directory into its item mapping."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from domain.errors import DirectoryNotFoundError, ItemLoadError
from domain.taxonomy import assemble_taxonomy, item_identifier
from infrastructure.io import list_files
from infrastructure.items import ItemLoader, make_item_loader
from infrastructure.observability import taxonomy_log_context

logger = logging.getLogger(__name__)


class TaxonomyLoader:
    """
    Loads every item of a taxonomy directory, all-or-nothing.

    Layout:
        <storage_root>/
        ├─ <taxonomy_key>/
        │  ├─ <identifier>.yml
        │  └─ ...
        └─ ...
    """

    def __init__(self, storage_root: Path, item_loader: ItemLoader | None = None) -> None:
        self.storage_root = storage_root
        self.item_loader = item_loader or make_item_loader()

    def taxonomy_dir(self, key: str) -> Path:
        return self.storage_root / key

    def load(self, key: str) -> Mapping[str, Any]:
        """
        Scan `<storage_root>/<key>` and parse each item file.

        Args:
            key: Canonical taxonomy key (directory name)

        Returns:
            Read-only mapping identifier -> data value, in sorted identifier order.
            An empty directory yields an empty mapping.

        Raises:
            DirectoryNotFoundError: If the taxonomy directory is missing or not a directory
            ItemLoadError: If any item file cannot be read or parsed (nothing is returned)
        """
        directory = self.taxonomy_dir(key)
        try:
            is_dir = directory.is_dir()
        except OSError as e:
            # e.g. ENAMETOOLONG: no such directory can exist
            raise DirectoryNotFoundError(key, directory) from e
        if not is_dir:
            raise DirectoryNotFoundError(key, directory)

        with taxonomy_log_context(key):
            logger.debug("Scanning taxonomy directory %s", directory)
            entries: list[tuple[str, Any]] = []
            for path in list_files(directory):
                identifier = item_identifier(path.name)
                if identifier is None:
                    logger.warning("Skipping %s: filename has no identifier before the extension", path)
                    continue
                entries.append((identifier, self._load_item(key, path)))

            items, collisions = assemble_taxonomy(entries)
            for identifier in collisions:
                logger.warning(
                    "Identifier '%s' is provided by more than one file in %s; the last file wins.",
                    identifier,
                    directory,
                )
            logger.info("Loaded taxonomy '%s': %d items", key, len(items))
            return items

    def _load_item(self, key: str, path: Path) -> Any:
        try:
            return self.item_loader.load(path)
        except (OSError, ValueError) as e:
            raise ItemLoadError(key, path, str(e)) from e
