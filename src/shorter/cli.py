# cli.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from shorter.catalog import load
from shorter.config_store import STORE_ENVVAR, ConfigStore, validate_catalog_path
from shorter.errors import (
    ConfiguredPathInvalid,
    InvalidPath,
    NotConfigured,
    OpenFailed,
    ShorterError,
    TooManyArguments,
)
from shorter.invoker import Invoker, select_invoker
from shorter.runner import run_group
from shorter.ui.console import Console, get_console, set_console


HELP_VERBS = ("help", "-h", "--help")
CONFIG_VERB = "config"
MAX_ARGS = 2


class ShorterCommand(click.Command):
    """Report bad options (e.g. `--timeout abc`) with exit code 1 like every other error."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _store_from(ctx: click.Context, store_path: Optional[Path]) -> ConfigStore:
    store = ctx.obj.get("store")
    if store is None:
        store = ConfigStore(store_path)
        ctx.obj["store"] = store
    return store


def _invoker_from(ctx: click.Context) -> Invoker:
    invoker = ctx.obj.get("invoker")
    if invoker is None:
        invoker = select_invoker()
        ctx.obj["invoker"] = invoker
    return invoker


def handle_config(store: ConfigStore, path_arg: Optional[str]) -> None:
    """`config <path>` saves the path; bare `config` opens the configured file."""
    console = get_console()

    if path_arg is not None:
        saved = store.set_configured_path(path_arg)
        console.print_debug(f"store={store.store_path} path={saved}")
        console.print_success("Configuration saved successfully!")
        return

    config_path = store.get_configured_path()
    if config_path is None:
        raise NotConfigured(message="No configuration found")

    code = click.launch(str(config_path))
    if code != 0:
        raise OpenFailed(path=config_path, exit_code=code)
    console.print_info(f"Opening: {config_path}")


def handle_run(
    store: ConfigStore,
    group_name: str,
    invoker: Invoker,
    *,
    timeout: Optional[float] = None,
    prog: str = "shrt",
) -> None:
    console = get_console()

    config_path = store.get_configured_path()
    if config_path is None:
        console.print_warning(
            "Shorter is not configured yet",
            suggestion=f"{click.style('Configuration', fg='green')}: {prog} config <path/to/file.json>",
        )
        return

    try:
        validate_catalog_path(config_path)
    except InvalidPath as e:
        raise ConfiguredPathInvalid(path=config_path, reason=e.reason) from e

    catalog = load(config_path)
    console.print_debug(f"loaded {len(catalog.group_names())} group(s) from {config_path}")

    result = run_group(catalog, group_name, invoker, timeout=timeout, console=console)
    console.print_debug(f"'{result.group}' finished {len(result.steps)} step(s) in {result.cwd}")


def dispatch(ctx: click.Context, args: Sequence[str], timeout: Optional[float], store_path: Optional[Path]) -> None:
    if len(args) > MAX_ARGS:
        raise TooManyArguments(count=len(args))

    console = get_console()
    prog = ctx.find_root().info_name or "shrt"
    verb = args[0].lower() if args else None

    if verb is None or verb in HELP_VERBS:
        console.print_help(prog)
        return

    store = _store_from(ctx, store_path)
    if verb == CONFIG_VERB:
        handle_config(store, args[1] if len(args) > 1 else None)
        return

    handle_run(store, args[0], _invoker_from(ctx), timeout=timeout, prog=prog)


@click.command(
    cls=ShorterCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Kill a step that runs longer than this many seconds",
)
@click.option(
    "--store",
    "store_path",
    envvar=STORE_ENVVAR,
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration store file (defaults to the per-user app directory)",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, debug, timeout, store_path, args):
    """Shorter: run named groups of commands from a JSON file."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    try:
        dispatch(ctx, args, timeout, store_path)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except ShorterError as e:
        if debug:
            import traceback
            traceback.print_exc()
        console.print_error(str(e), details=e.details, suggestion=e.suggestion)
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main() -> None:
    cli(prog_name="shrt")


if __name__ == "__main__":
    main()
