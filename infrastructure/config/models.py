"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.inflector import InflectorMode
from infrastructure.constants import DEFAULT_STORAGE_DIR


class ItemFormat(str, Enum):
    """Supported item file formats."""

    YAML = "yaml"
    JSON = "json"


class StorageConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from storage.yaml (plus environment override)
    - Validated by configuration loader
    - Consumed by the accessor factory
    """

    storage_dir: Path = Field(
        default_factory=lambda: DEFAULT_STORAGE_DIR,
        description="Root directory; each immediate subdirectory is one taxonomy.",
    )
    inflector: InflectorMode = Field(
        default=InflectorMode.CAMEL_TO_SNAKE,
        description="How dispatch names map to directory names. 'none' uses names verbatim.",
    )
    item_format: ItemFormat = Field(
        default=ItemFormat.YAML,
        description="Declarative format of item files. Item content is parsed, never executed.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "StorageConfig":
        if not self.storage_dir.exists():
            raise ValueError(f"storage_dir does not exist: {self.storage_dir}")
        if not self.storage_dir.is_dir():
            raise ValueError(f"storage_dir is not a directory: {self.storage_dir}")
        self.storage_dir = self.storage_dir.resolve()
        return self
