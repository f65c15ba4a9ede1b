# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


class ShorterError(Exception):
    """
    Base for every error shrt reports to the user.

    Subclasses are dataclasses carrying enough context for:
      - a one-line CLI message
      - optional detail lines (see `details`)
      - an optional suggestion (see `suggestion`)
    """

    @property
    def details(self) -> Optional[List[str]]:
        return None

    @property
    def suggestion(self) -> Optional[str]:
        return None


# ----------------------------------------------------------------------
# Configuration / catalog file
# ----------------------------------------------------------------------

@dataclass
class NotConfigured(ShorterError):
    message: str = "Command file path not configured"

    def __str__(self) -> str:
        return self.message

    @property
    def suggestion(self) -> Optional[str]:
        return "Usage: shrt config <path/to/file.json>"


@dataclass
class InvalidPath(ShorterError):
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.reason}: {self.path}"


@dataclass
class ConfigStoreError(ShorterError):
    path: Path
    cause: OSError

    def __str__(self) -> str:
        return f"Failed to store config at {self.path}: {self.cause}"


@dataclass
class CatalogNotFound(ShorterError):
    path: Path

    def __str__(self) -> str:
        return f"Cannot open command file at {self.path}: file not found"


@dataclass
class CatalogUnreadable(ShorterError):
    path: Path
    cause: Exception

    def __str__(self) -> str:
        return f"Cannot read command file at {self.path}: {self.cause}"


@dataclass
class InvalidFormat(ShorterError):
    source: str
    location: str
    message: str

    def __str__(self) -> str:
        where = f" at '{self.location}'" if self.location else ""
        return f"Invalid command file {self.source}{where}: {self.message}"


# ----------------------------------------------------------------------
# Execution
# ----------------------------------------------------------------------

@dataclass
class GroupNotFound(ShorterError):
    group: str
    available: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Command '{self.group}' not found"

    @property
    def details(self) -> Optional[List[str]]:
        if not self.available:
            return None
        return [f"Available commands: {', '.join(self.available)}"]


@dataclass
class StepError(ShorterError):
    """A failure attributed to one step of a group."""
    step_name: str


@dataclass
class SpawnFailed(StepError):
    cause: OSError

    def __str__(self) -> str:
        return f"Failed to spawn command '{self.step_name}': {self.cause}"


@dataclass
class StepFailed(StepError):
    exit_code: int

    def __str__(self) -> str:
        return f"Command '{self.step_name}' failed with exit code: {self.exit_code}"


@dataclass
class DirectoryChangeFailed(StepError):
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Failed to change directory to {self.path} in '{self.step_name}': {self.reason}"


@dataclass
class StepTimedOut(StepError):
    timeout: float

    def __str__(self) -> str:
        return f"Command '{self.step_name}' timed out after {self.timeout:g}s"


# ----------------------------------------------------------------------
# CLI
# ----------------------------------------------------------------------

@dataclass
class TooManyArguments(ShorterError):
    count: int

    def __str__(self) -> str:
        return f"Too many arguments (got {self.count}, expected at most 2)"

    @property
    def suggestion(self) -> Optional[str]:
        return "Usage: shrt <command> | shrt config [path/to/file.json]"


@dataclass
class ConfiguredPathInvalid(ShorterError):
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"The configured path is no longer valid: {self.reason}: {self.path}"

    @property
    def suggestion(self) -> Optional[str]:
        return "Please re-configure using: shrt config <path/to/file.json>"


@dataclass
class OpenFailed(ShorterError):
    path: Path
    exit_code: int

    def __str__(self) -> str:
        return f"Failed to open file {self.path} (exit code {self.exit_code})"
