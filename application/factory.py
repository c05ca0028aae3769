"""Build the storage accessor from configuration."""

import logging

from application.accessor import FilesAsStorage
from domain.taxonomy import resolve_inflector
from infrastructure.config.models import StorageConfig
from infrastructure.items import make_item_loader

logger = logging.getLogger(__name__)


def make_storage(cfg: StorageConfig) -> FilesAsStorage:
    """
    Factory function wiring a FilesAsStorage accessor from a StorageConfig.
    Args:
        cfg: Validated storage configuration
    Returns:
        Accessor over cfg.storage_dir using the configured inflector and item format.
    """
    storage = FilesAsStorage(
        cfg.storage_dir,
        inflector=resolve_inflector(cfg.inflector),
        item_loader=make_item_loader(cfg.item_format),
    )
    logger.info(
        "Storage ready (root=%s, inflector=%s, item_format=%s)",
        cfg.storage_dir,
        cfg.inflector.value,
        cfg.item_format.value,
    )
    return storage
