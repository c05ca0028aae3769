from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.taxonomy import InflectorMode
from infrastructure.config import ItemFormat, StorageConfig, load_storage_config
from infrastructure.constants import STORAGE_DIR_ENV


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch) -> None:
    monkeypatch.delenv(STORAGE_DIR_ENV, raising=False)


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "storage.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_from_yaml(tmp_path: Path, storage_root: Path) -> None:
    path = _write_config(
        tmp_path,
        f"array_storage_dir: {storage_root}\ninflector: none\nitem_format: JSON\n",
    )

    cfg = load_storage_config(path)

    assert cfg.storage_dir == storage_root.resolve()
    assert cfg.inflector is InflectorMode.NONE
    assert cfg.item_format is ItemFormat.JSON


def test_defaults_when_keys_absent(tmp_path: Path, storage_root: Path) -> None:
    path = _write_config(tmp_path, f"array_storage_dir: {storage_root}\n")

    cfg = load_storage_config(path)

    assert cfg.inflector is InflectorMode.CAMEL_TO_SNAKE
    assert cfg.item_format is ItemFormat.YAML


def test_env_overrides_yaml(tmp_path: Path, storage_root: Path, monkeypatch) -> None:
    other = tmp_path / "other"
    other.mkdir()
    path = _write_config(tmp_path, f"array_storage_dir: {storage_root}\n")
    monkeypatch.setenv(STORAGE_DIR_ENV, str(other))

    assert load_storage_config(path).storage_dir == other.resolve()


def test_explicit_storage_dir_wins(tmp_path: Path, storage_root: Path, monkeypatch) -> None:
    monkeypatch.setenv(STORAGE_DIR_ENV, str(tmp_path / "ignored"))

    cfg = load_storage_config(None, storage_dir=storage_root)

    assert cfg.storage_dir == storage_root.resolve()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_storage_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "- just\n- a list\n")
    with pytest.raises(ValueError):
        load_storage_config(path)


def test_storage_dir_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        StorageConfig(storage_dir=tmp_path / "missing")


def test_unknown_inflector_mode(tmp_path: Path, storage_root: Path) -> None:
    path = _write_config(tmp_path, f"array_storage_dir: {storage_root}\ninflector: kebab\n")
    with pytest.raises(ValidationError):
        load_storage_config(path)
