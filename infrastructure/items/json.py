"""JSON item loader."""

import json
from pathlib import Path
from typing import Any

from infrastructure.config.models import ItemFormat

from .base import ItemLoader
from .registry import register_item_loader


class JsonItemLoader(ItemLoader):
    """Parse item files as JSON documents."""

    item_format = ItemFormat.JSON

    def parse(self, text: str, *, source: Path | None = None) -> Any:
        # json.JSONDecodeError is a ValueError subclass
        return json.loads(text)


register_item_loader(ItemFormat.JSON, JsonItemLoader)
