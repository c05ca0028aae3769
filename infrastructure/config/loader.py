"""Configuration loading from YAML files."""

import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import StorageConfig
from infrastructure.constants import STORAGE_DIR_ENV, STORAGE_DIR_KEY


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is a valid "all defaults" config
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_storage_config(path: Path | None = None, *, storage_dir: Path | None = None) -> StorageConfig:
    """
    Load storage.yaml and construct a validated StorageConfig.

    Resolution order for the storage root (first wins):
    - `storage_dir` argument (e.g. a CLI flag)
    - FILES_AS_STORAGE_DIR environment variable
    - `array_storage_dir` key in the YAML file
    - the model default (./storage)

    Args:
        path: Path to storage.yaml; None skips the file entirely
        storage_dir: Explicit storage root override

    Returns:
        StorageConfig with an absolute, existing storage_dir

    Raises:
        FileNotFoundError: If `path` is given but does not exist
        ValueError: If the YAML is not a mapping or values are invalid
    """
    data = _load_yaml(path) if path is not None else {}

    kwargs: dict[str, Any] = {}
    raw_dir = storage_dir or os.environ.get(STORAGE_DIR_ENV) or data.get(STORAGE_DIR_KEY)
    if raw_dir:
        kwargs["storage_dir"] = Path(raw_dir)
    if data.get("inflector") is not None:
        kwargs["inflector"] = str(data["inflector"]).strip().lower()
    if data.get("item_format") is not None:
        kwargs["item_format"] = str(data["item_format"]).strip().lower()

    return StorageConfig(**kwargs)
