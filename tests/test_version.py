"""
Tests for the version module of the Starknet RPC client.
"""
import importlib
import re
from importlib import metadata as importlib_metadata
from unittest.mock import mock_open, patch

import pytest
import tomli

from starknet_rpc import __version__
from starknet_rpc.version import DEFAULT_VERSION, resolve_version, version_from_pyproject


def _reload_version():
    import starknet_rpc.version as vmod
    importlib.reload(vmod)
    return vmod


def _metadata_missing(name):
    raise importlib_metadata.PackageNotFoundError(name)


def test_version_format():
    """Test that the version string follows semantic versioning"""
    assert re.match(r'^\d+\.\d+\.\d+$', __version__), "Version should follow semantic versioning"


@patch('importlib.metadata.version')
@patch('pathlib.Path.open', new_callable=mock_open, read_data=b'[project]\nversion = "1.2.3"\n')
def test_version_from_file(mock_open_file, mock_metadata_version):
    """When metadata lookup fails, pyproject.toml is read"""
    mock_metadata_version.side_effect = importlib_metadata.PackageNotFoundError
    assert _reload_version().__version__ == "1.2.3"


@patch('importlib.metadata.version')
def test_version_from_metadata(mock_metadata_version):
    """When metadata lookup succeeds, version comes from metadata"""
    mock_metadata_version.return_value = "2.3.4"
    assert _reload_version().__version__ == "2.3.4"
    mock_metadata_version.assert_called_with("starknet-rpc")


def test_version_file_not_found(monkeypatch):
    """If pyproject.toml is missing, fallback to default"""
    monkeypatch.setattr(importlib_metadata, 'version', _metadata_missing)

    def _missing(*args, **kwargs):
        raise FileNotFoundError()

    monkeypatch.setattr('pathlib.Path.open', _missing)
    assert _reload_version().__version__ == "0.1.0"


def test_version_key_error(monkeypatch):
    """If TOML exists but missing version key, fallback to default"""
    monkeypatch.setattr(importlib_metadata, 'version', _metadata_missing)
    monkeypatch.setattr('pathlib.Path.open', mock_open(read_data=b'[project]\nname = "starknet-rpc"\n'))
    assert _reload_version().__version__ == "0.1.0"


def test_version_toml_decode_error(monkeypatch):
    """If TOML parse fails, fallback to default"""
    monkeypatch.setattr(importlib_metadata, 'version', _metadata_missing)
    monkeypatch.setattr('pathlib.Path.open', mock_open(read_data=b'invalid toml content'))
    assert _reload_version().__version__ == "0.1.0"


def test_version_from_pyproject_reads_project_table(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "starknet-rpc"\nversion = "4.5.6"\n')

    assert version_from_pyproject(path) == "4.5.6"


def test_version_from_pyproject_without_project_table(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.pytest.ini_options]\ntestpaths = ["tests"]\n')

    with pytest.raises(KeyError):
        version_from_pyproject(path)


def test_version_from_pyproject_invalid_toml(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text("not = [valid")

    with pytest.raises(tomli.TOMLDecodeError):
        version_from_pyproject(path)


def test_resolve_version_uses_pyproject_path(monkeypatch, tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nversion = "7.8.9"\n')
    monkeypatch.setattr(importlib_metadata, 'version', _metadata_missing)
    monkeypatch.setattr('starknet_rpc.version.PYPROJECT_PATH', path)

    assert resolve_version() == "7.8.9"


def test_resolve_version_missing_everything(monkeypatch, tmp_path):
    monkeypatch.setattr(importlib_metadata, 'version', _metadata_missing)
    monkeypatch.setattr('starknet_rpc.version.PYPROJECT_PATH', tmp_path / "absent.toml")

    assert resolve_version() == DEFAULT_VERSION
