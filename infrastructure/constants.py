from pathlib import Path

# Repo-root conventional directories/files (overrideable via CLI flags)
CONFIG_DIR = Path("configs")
STORAGE_CONFIG_FILE = CONFIG_DIR / "storage.yaml"

DEFAULT_STORAGE_DIR = Path("storage")

# Config key naming the storage root, and its environment override
STORAGE_DIR_KEY = "array_storage_dir"
STORAGE_DIR_ENV = "FILES_AS_STORAGE_DIR"
