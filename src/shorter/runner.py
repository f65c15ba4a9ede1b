# runner.py
from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import DirectoryChangeFailed, SpawnFailed, StepFailed, StepTimedOut
from .invoker import Invoker, select_invoker
from .model import Catalog, Step
from .ui.console import Console, get_console


@dataclass
class RunState:
    """Mutable state of one run; lives only as long as `run_group`."""
    cwd: Path
    completed: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    group: str
    steps: List[str]
    cwd: Path


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def _change_directory(name: str, step: Step, state: RunState) -> Path:
    target = state.cwd / step.arguments[0]
    try:
        resolved = target.resolve()
    except OSError as e:
        raise DirectoryChangeFailed(step_name=name, path=target, reason=str(e)) from e

    if not resolved.exists():
        raise DirectoryChangeFailed(step_name=name, path=target, reason="No such directory")
    if not resolved.is_dir():
        raise DirectoryChangeFailed(step_name=name, path=target, reason="Not a directory")
    if not os.access(resolved, os.X_OK):
        raise DirectoryChangeFailed(step_name=name, path=target, reason="Permission denied")
    return resolved


def _run_step(
    name: str,
    step: Step,
    state: RunState,
    invoker: Invoker,
    timeout: Optional[float],
    console: Console,
) -> None:
    console.print_debug(f"[{invoker.name}] {invoker.argv_for(step.executable, step.arguments)} cwd={state.cwd}")
    try:
        exit_code = invoker.invoke(step.executable, step.arguments, state.cwd, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise StepTimedOut(step_name=name, timeout=float(timeout or e.timeout)) from e
    except OSError as e:
        raise SpawnFailed(step_name=name, cause=e) from e

    if exit_code != 0:
        raise StepFailed(step_name=name, exit_code=exit_code)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_group(
    catalog: Catalog,
    group_name: str,
    invoker: Optional[Invoker] = None,
    *,
    cwd: str | Path | None = None,
    timeout: Optional[float] = None,
    console: Optional[Console] = None,
) -> RunResult:
    """
    Run every step of `group_name`, sorted by step name, stopping at the
    first failure.

    A `cd` step with an argument moves the running directory (relative to
    the previous running directory) instead of spawning a process; every
    later step is started there. A bare `cd` is spawned like any other
    command.

    Raises:
      GroupNotFound          the group is not in the catalog (nothing runs)
      DirectoryChangeFailed  a `cd` target is missing or not a directory
      SpawnFailed            a command could not be started
      StepFailed             a command exited non-zero
      StepTimedOut           a command outlived `timeout`
    """
    steps = catalog.ordered_steps(group_name)
    invoker = invoker or select_invoker()
    console = console or get_console()
    state = RunState(cwd=Path(cwd).resolve() if cwd is not None else Path.cwd())

    for name, step in steps:
        console.print_step(name, step.executable, step.arguments)

        if step.is_cd and step.arguments:
            state.cwd = _change_directory(name, step, state)
            console.print_directory_change(state.cwd)
        else:
            _run_step(name, step, state, invoker, timeout, console)

        state.completed.append(name)

    return RunResult(group=group_name, steps=list(state.completed), cwd=state.cwd)
