"""I/O utilities: filesystem operations."""

from infrastructure.io.fs import ensure_directory, list_files, list_subdirectories, read_text

__all__ = [
    "ensure_directory",
    "read_text",
    "list_files",
    "list_subdirectories",
]
