# catalog.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .errors import (
    CatalogNotFound,
    CatalogUnreadable,
    InvalidFormat,
    NotConfigured,
)
from .model import Catalog, Step


# Accepted spellings for the two step fields; the first one is written by dumps().
EXECUTABLE_KEYS = ("command", "executable")
ARGUMENTS_KEYS = ("args", "arguments")


class _DuplicateKey(ValueError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            raise _DuplicateKey(key)
        out[key] = value
    return out


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------

def load(path: str | Path | None) -> Catalog:
    """
    Load a command catalog from a JSON file.

    Raises:
      NotConfigured      no path on record (path is None)
      CatalogNotFound    the file does not exist
      CatalogUnreadable  the file cannot be read or is not UTF-8
      InvalidFormat      the content is not a valid catalog
    """
    if path is None:
        raise NotConfigured()

    catalog_path = Path(path)
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CatalogNotFound(path=catalog_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogUnreadable(path=catalog_path, cause=e) from e

    return loads(text, source=str(catalog_path))


def loads(text: str, source: str = "<string>") -> Catalog:
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates)
    except _DuplicateKey as e:
        raise InvalidFormat(source=source, location="", message=f"duplicate key '{e.key}'") from e
    except json.JSONDecodeError as e:
        raise InvalidFormat(
            source=source,
            location="",
            message=f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
        ) from e
    return parse(data, source=source)


def parse(data: Any, source: str = "<string>") -> Catalog:
    """Validate an already decoded JSON document and build a Catalog."""
    if not isinstance(data, dict):
        raise InvalidFormat(source, "", f"expected an object of groups, got {_json_type(data)}")

    groups: Dict[str, Dict[str, Step]] = {}
    for group_name, group in data.items():
        if not isinstance(group, dict):
            raise InvalidFormat(source, group_name, f"expected an object of steps, got {_json_type(group)}")
        groups[group_name] = {
            step_name: _parse_step(step, source, f"{group_name}.{step_name}")
            for step_name, step in group.items()
        }
    return Catalog(groups=groups)


def _parse_step(raw: Any, source: str, location: str) -> Step:
    if not isinstance(raw, dict):
        raise InvalidFormat(source, location, f"expected a step object, got {_json_type(raw)}")

    executable = _pick_field(raw, EXECUTABLE_KEYS, source, location)
    if not isinstance(executable, str):
        raise InvalidFormat(
            source, location, f"field '{EXECUTABLE_KEYS[0]}' must be a string, got {_json_type(executable)}"
        )

    arguments = _pick_field(raw, ARGUMENTS_KEYS, source, location)
    if not isinstance(arguments, list):
        raise InvalidFormat(
            source, location, f"field '{ARGUMENTS_KEYS[0]}' must be a list of strings, got {_json_type(arguments)}"
        )
    for i, arg in enumerate(arguments):
        if not isinstance(arg, str):
            raise InvalidFormat(
                source, f"{location}.{ARGUMENTS_KEYS[0]}[{i}]", f"expected a string, got {_json_type(arg)}"
            )

    return Step(executable=executable, arguments=tuple(arguments))


def _pick_field(raw: Dict[str, Any], keys: Tuple[str, ...], source: str, location: str) -> Any:
    present = [k for k in keys if k in raw]
    if not present:
        raise InvalidFormat(source, location, f"missing field '{keys[0]}'")
    if len(present) > 1:
        raise InvalidFormat(source, location, f"fields {' and '.join(repr(k) for k in present)} are aliases, use one")
    return raw[present[0]]


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


# ----------------------------------------------------------------------
# Serialization
# ----------------------------------------------------------------------

def dumps(catalog: Catalog) -> str:
    return json.dumps(catalog.to_dict(), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def dump(catalog: Catalog, path: str | Path) -> Path:
    out = Path(path)
    out.write_text(dumps(catalog), encoding="utf-8")
    return out
