"""
Shared pytest fixtures for shrt tests.

- write_catalog: writes a catalog dict to a .json file
- store: a ConfigStore backed by a temporary file
- recorder: a fake invoker that records calls instead of spawning
"""

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from shorter.config_store import ConfigStore
from shorter.invoker import Invoker
from shorter.ui.console import Console, set_console


class RecordingInvoker(Invoker):
    """Records (executable, arguments, cwd) and returns scripted exit codes."""

    name = "recording"

    def __init__(self, exit_codes: Optional[Dict[str, int]] = None, errors: Optional[Dict[str, OSError]] = None):
        self.calls: List[tuple] = []
        self.exit_codes = exit_codes or {}
        self.errors = errors or {}

    def argv_for(self, executable: str, arguments: Sequence[str]) -> List[str]:
        return [executable, *arguments]

    def invoke(self, executable, arguments, cwd, *, timeout=None) -> int:
        self.calls.append((executable, tuple(arguments), Path(cwd)))
        if executable in self.errors:
            raise self.errors[executable]
        return self.exit_codes.get(executable, 0)

    @property
    def executables(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture(autouse=True)
def quiet_console():
    """Fresh non-debug console per test so global state does not leak."""
    set_console(Console(debug=False, color=False))


@pytest.fixture
def recorder() -> RecordingInvoker:
    return RecordingInvoker()


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    def _write(data, name: str = "commands.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / "store" / "config.json")
