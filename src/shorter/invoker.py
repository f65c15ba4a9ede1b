# invoker.py
from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence


# Reported when a child has no exit code (e.g. it was killed by a signal).
UNKNOWN_EXIT_CODE = -1

WINDOWS_PLATFORMS = ("win32", "cygwin")


class Invoker:
    """
    Launch strategy for one step: turns (executable, arguments) into a
    spawned child process and waits for it.

    Child stdin/stdout/stderr are inherited so output streams straight
    to the terminal.
    """

    name = "invoker"

    def argv_for(self, executable: str, arguments: Sequence[str]) -> List[str]:
        raise NotImplementedError

    def invoke(
        self,
        executable: str,
        arguments: Sequence[str],
        cwd: str | Path,
        *,
        timeout: Optional[float] = None,
    ) -> int:
        """
        Run the command in `cwd` and block until it exits.

        Returns:
            the child's exit code, or UNKNOWN_EXIT_CODE if it has none

        Raises:
            OSError: the child could not be started
            subprocess.TimeoutExpired: `timeout` elapsed (the child is killed)
        """
        proc = subprocess.run(
            self.argv_for(executable, arguments),
            cwd=str(cwd),
            check=False,
            timeout=timeout,
        )
        return proc.returncode if proc.returncode >= 0 else UNKNOWN_EXIT_CODE


class DirectInvoker(Invoker):
    """Execute the program itself with the argument vector; no shell involved."""

    name = "direct"

    def argv_for(self, executable: str, arguments: Sequence[str]) -> List[str]:
        return [executable, *arguments]


class ShellInvoker(Invoker):
    """
    Wrap the command in the Windows command interpreter.

    The executable string is handed to `cmd /C` as the command line and
    the arguments follow as separate vector entries; builtins such as
    `dir` or `copy` only resolve this way.
    """

    name = "cmd"

    def __init__(self, shell: str = "cmd", flag: str = "/C"):
        self.shell = shell
        self.flag = flag

    def argv_for(self, executable: str, arguments: Sequence[str]) -> List[str]:
        return [self.shell, self.flag, executable, *arguments]


def select_invoker(platform: str | None = None) -> Invoker:
    """Pick the launch strategy for `platform` (defaults to sys.platform)."""
    platform = platform or sys.platform
    if platform.startswith(WINDOWS_PLATFORMS):
        return ShellInvoker()
    return DirectInvoker()
