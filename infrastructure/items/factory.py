"""Factory for creating item loaders."""

from infrastructure.config.models import ItemFormat

from .base import ItemLoader
from .registry import get_item_loader_class


def make_item_loader(item_format: ItemFormat = ItemFormat.YAML) -> ItemLoader:
    """
    Factory function to create the item loader for a format.
    Args:
        item_format: Declarative format of the item files
    Returns:
        An instance of ItemLoader for the specified format.
    Raises:
        RuntimeError: If no loader is registered for the format.
    """
    loader_cls = get_item_loader_class(item_format)
    if loader_cls is None:
        raise RuntimeError(
            f"No item loader registered for format='{item_format.value}'. "
            f"Format modules register themselves via register_item_loader(...)."
        )
    return loader_cls()
