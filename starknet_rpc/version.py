"""
Version of the Starknet RPC client, resolved once at import time.

An installed distribution reports the version from its metadata. A source
checkout that was never installed reads it from ``pyproject.toml``.
"""
import importlib.metadata
import pathlib

import tomli

DIST_NAME = "starknet-rpc"
DEFAULT_VERSION = "0.1.0"
PYPROJECT_PATH = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def version_from_pyproject(path: pathlib.Path) -> str:
    """
    Read ``[project].version`` from a pyproject file.

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the file has no project version
        tomli.TOMLDecodeError: If the file is not valid TOML
    """
    with path.open("rb") as f:
        project = tomli.load(f).get("project", {})
    return project["version"]


def resolve_version() -> str:
    try:
        return importlib.metadata.version(DIST_NAME)
    except importlib.metadata.PackageNotFoundError:
        pass

    try:
        return version_from_pyproject(PYPROJECT_PATH)
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        return DEFAULT_VERSION


__version__ = resolve_version()
