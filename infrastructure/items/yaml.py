"""YAML item loader (default format)."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import ItemFormat

from .base import ItemLoader
from .registry import register_item_loader


class YamlItemLoader(ItemLoader):
    """Parse item files with `yaml.safe_load` (no arbitrary object construction)."""

    item_format = ItemFormat.YAML

    def parse(self, text: str, *, source: Path | None = None) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {source or '<text>'}: {e}") from e


register_item_loader(ItemFormat.YAML, YamlItemLoader)
