from collections.abc import Callable
from pathlib import Path

import pytest

WriteItem = Callable[[Path, str, str], Path]


def _write_item(directory: Path, filename: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_item() -> WriteItem:
    return _write_item


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """
    Small storage tree:
        magic_place/  cueva_del_majanicho.yml, roque_nublo.yml, el_teide.yml
        Magic_Place/  other.yml
        creature/     guirre.yml
        empty/
    """
    root = tmp_path / "storage"
    _write_item(root / "magic_place", "cueva_del_majanicho.yml", "island: Fuerteventura\nkind: lava tube\n")
    _write_item(root / "magic_place", "roque_nublo.yml", "island: Gran Canaria\nelevation_m: 1813\n")
    _write_item(root / "magic_place", "el_teide.yml", "island: Tenerife\nelevation_m: 3715\n")
    _write_item(root / "Magic_Place", "other.yml", "case: sensitive\n")
    _write_item(root / "creature", "guirre.yml", "habitat: [Fuerteventura, Lanzarote]\n")
    (root / "empty").mkdir()
    return root
