# config_store.py
"""Persisted configuration: the single command-file path shrt runs from."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from .errors import ConfigStoreError, InvalidPath


APP_NAME = "shrt"
STORE_FILENAME = "config.json"
STORE_ENVVAR = "SHRT_CONFIG_STORE"


def default_store_path() -> Path:
    """Location of the store inside the per-user app directory."""
    return Path(click.get_app_dir(APP_NAME)) / STORE_FILENAME


def is_json_file(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def validate_catalog_path(path: Path) -> None:
    """
    Check that `path` can serve as a command file.

    Raises:
        InvalidPath: if the path is missing, not a regular file or not `.json`
    """
    if not path.exists():
        raise InvalidPath(path=path, reason="Path doesn't exist")
    if not path.is_file():
        raise InvalidPath(path=path, reason="Path is not a file")
    if not is_json_file(path):
        raise InvalidPath(path=path, reason="File must have .json extension")


class ConfigStore:
    """
    Key-value store holding one entry, `path`, in a small JSON document.

    A missing or corrupt store reads as "not configured"; only writes raise.
    """

    def __init__(self, store_path: str | Path | None = None):
        self.store_path = Path(store_path) if store_path else default_store_path()

    def _read(self) -> dict:
        try:
            data = json.loads(self.store_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def get_configured_path(self) -> Optional[Path]:
        value = self._read().get("path")
        if not isinstance(value, str) or not value:
            return None
        return Path(value)

    def is_configured(self) -> bool:
        return self.get_configured_path() is not None

    def set_configured_path(self, path: str | Path) -> Path:
        """Validate and persist `path`. Returns the absolute path stored."""
        catalog_path = Path(path).expanduser()
        validate_catalog_path(catalog_path)
        catalog_path = catalog_path.resolve()

        data = self._read()
        data["path"] = str(catalog_path)
        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            self.store_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigStoreError(path=self.store_path, cause=e) from e
        return catalog_path
