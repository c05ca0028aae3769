"""Storage exceptions raised by the taxonomy accessor and its loaders."""

from pathlib import Path


class StorageError(Exception):
    """Base class for all files-as-storage failures."""


class InvalidTaxonomyNameError(StorageError, ValueError):
    """The resolved taxonomy key cannot name a directory under the storage root."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid taxonomy name {name!r}: {reason}")
        self.name = name


class DirectoryNotFoundError(StorageError, FileNotFoundError):
    """The taxonomy directory does not exist (or is not a directory)."""

    def __init__(self, taxonomy: str, path: Path) -> None:
        super().__init__(f"Taxonomy '{taxonomy}' has no directory at: {path}")
        self.taxonomy = taxonomy
        self.path = path


class ItemLoadError(StorageError):
    """An item file could not be read or parsed; the whole taxonomy load was aborted."""

    def __init__(self, taxonomy: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load item file {path} of taxonomy '{taxonomy}': {reason}")
        self.taxonomy = taxonomy
        self.path = path


LoadError = ItemLoadError


class ItemNotFoundError(StorageError, LookupError):
    """The identifier is absent from an otherwise loaded taxonomy."""

    def __init__(self, identifier: str, taxonomy: str | None = None) -> None:
        where = f" in taxonomy '{taxonomy}'" if taxonomy is not None else ""
        super().__init__(f"Item does not exist{where}: {identifier}")
        self.identifier = identifier
        self.taxonomy = taxonomy
