"""Base interface for item file loaders."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from infrastructure.config.models import ItemFormat
from infrastructure.io import read_text


class ItemLoader(ABC):
    """
    Abstract base class for item loaders.
    Turns the content of one item file into its data value.

    All concrete loaders must implement:
    - parse(): deserialize declarative text (never evaluate it as code)
    """

    item_format: ItemFormat

    def load(self, path: Path) -> Any:
        """Read an item file and return its parsed data value.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not valid for this format (incl. decoding errors)
        """
        text = read_text(path)
        return self.parse(text, source=path)

    @abstractmethod
    def parse(self, text: str, *, source: Path | None = None) -> Any:
        """Deserialize item text.

        Args:
            text: Raw file content
            source: Originating file, for error messages

        Returns:
            Structured data value (dict, list, scalar or None)
        """
        raise NotImplementedError
