"""Filesystem utility functions."""

from pathlib import Path


def ensure_directory(path: Path, what: str) -> None:
    """
    Check that a path is an existing directory.

    Raises:
        NotADirectoryError: If path is missing or not a directory
    """
    if not path.is_dir():
        raise NotADirectoryError(f"Expected {what} directory at: {path}")


def read_text(path: Path) -> str:
    """
    Read text file with UTF-8 encoding and strip whitespace.

    Args:
        path: Path to text file

    Returns:
        File contents with leading/trailing whitespace removed
    """
    return path.read_text(encoding="utf-8").strip()


def list_files(directory: Path) -> list[Path]:
    """
    Return the regular files directly inside a directory, sorted by name.

    Subdirectories and symlinks that do not resolve to a file are skipped.
    """
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


def list_subdirectories(directory: Path) -> list[Path]:
    """Return the immediate subdirectories of a directory, sorted by name."""
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)
