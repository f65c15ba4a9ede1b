"""Console output formatting utilities for shrt."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import click


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, color: Optional[bool] = None):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
            color: Force colors on/off; None lets click decide per stream
        """
        self.debug = debug
        self.color = color

    def _out(self, message: str = "", err: bool = False) -> None:
        click.echo(message, err=err, color=self.color)

    def print_header(self, title: str) -> None:
        """Print a section header."""
        self._out(click.style(title, bold=True))

    def print_step(self, name: str, command: str, arguments: Sequence[str]) -> None:
        """Print step start message."""
        label = click.style("Executing", fg="cyan")
        self._out(f"{label}: {command} {list(arguments)!r}")
        self.print_debug(f"step={name}")

    def print_directory_change(self, directory: Path) -> None:
        label = click.style("Changed directory to", fg="green")
        self._out(f"{label}: {directory}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._out(click.style(message, fg="green"))

    def print_warning(self, message: str, suggestion: Optional[str] = None) -> None:
        self._out()
        self._out(f"{click.style('Warning', fg='yellow')}: {message}")
        if suggestion:
            self._out(suggestion)

    def print_error(
        self,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        self._out(f"{click.style('Error', fg='red')}: {message}", err=True)
        if details:
            for detail in details:
                self._out(f"  {detail}", err=True)
        if suggestion:
            self._out(suggestion, err=True)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        self.print_error(
            str(exc),
            details=getattr(exc, "details", None),
            suggestion=getattr(exc, "suggestion", None),
        )

    def print_help(self, app_name: str) -> None:
        def green(text: str) -> str:
            return click.style(text, fg="green")

        self.print_header("Shorter - Command Runner")
        self._out()
        self._out(click.style("Usage:", underline=True))
        self._out(f"  {app_name} <command>")
        self._out()
        self._out(click.style("Commands:", underline=True))
        self._out(f"  {green('config')} <path>         Configure the JSON file path")
        self._out(f"  {green('config')}                Open the config file when configured")
        self._out(f"  {green('<command>')}             Run every step of a command group")
        self._out(f"  {green('help / --help / -h')}    Show this help message")
        self._out()
        self._out(click.style("Options:", underline=True))
        self._out("  --debug               Show stack traces and debug output")
        self._out("  --timeout SECONDS     Kill a step that runs longer than SECONDS")
        self._out("  --store PATH          Use PATH as the configuration store")

    def print_info(self, message: str) -> None:
        """Print informational message."""
        self._out(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            self._out(f"[DEBUG] {message}", err=True)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
