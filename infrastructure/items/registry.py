import logging

from infrastructure.config.models import ItemFormat

from .base import ItemLoader

logger = logging.getLogger(__name__)

# ItemFormat -> Loader class
_LOADER_REGISTRY: dict[ItemFormat, type[ItemLoader]] = {}


def register_item_loader(item_format: ItemFormat, loader_cls: type[ItemLoader], *, override: bool = False) -> None:
    """Register a loader class for an item format.

    This is the plugin hook: format modules call this at import time.
    """
    if (item_format in _LOADER_REGISTRY) and not override:
        existing = _LOADER_REGISTRY[item_format]
        raise RuntimeError(
            f"Item loader already registered for format={item_format.value}: {existing.__name__}. "
            f"Use override=True to replace."
        )
    _LOADER_REGISTRY[item_format] = loader_cls
    logger.debug("Registered item loader for format=%s: %s", item_format.value, loader_cls.__name__)


def get_item_loader_class(item_format: ItemFormat) -> type[ItemLoader] | None:
    """Return the registered loader class (or None if not registered yet)."""
    return _LOADER_REGISTRY.get(item_format)
