"""CLI entry point for sayaka-util.

Invoked as::

    sayaka-util [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m sayaka_util.cli.main

Commands
--------
version     Show version information
exists      Report whether a stored file exists
read        Print the content of a stored file
write       Replace the content of a stored file
annotate    Print a message wrapped in authority markers
"""
from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from sayaka_util.errors import SayakaUtilError
from sayaka_util.messages import Authority, intercepted_authority
from sayaka_util.storage import StoreSettings, TextStore

console = Console()
err_console = Console(stderr=True)


def _load_settings(root: str | None, config: str | None) -> StoreSettings:
    """Settings from --config (or the environment), with --root on top."""
    try:
        settings = StoreSettings.from_yaml(config) if config else StoreSettings.from_env()
    except (OSError, SayakaUtilError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot load settings: {exc}")
        sys.exit(1)
    if root is not None:
        settings = dataclasses.replace(settings, root=Path(root))
    return settings


def _store(ctx: click.Context) -> TextStore:
    store: TextStore = ctx.obj["store"]
    return store


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="sayaka-util")
@click.option("--root", type=click.Path(file_okay=False), default=None, help="Store root directory")
@click.option("--config", type=click.Path(dir_okay=False), default=None, help="YAML settings file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, root: str | None, config: str | None, verbose: bool) -> None:
    """Text storage and message helpers for the sayaka bot."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    store = TextStore(_load_settings(root, config))
    ctx.obj["store"] = store
    ctx.call_on_close(store.close)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from sayaka_util import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]sayaka-util[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# storage commands
# ---------------------------------------------------------------------------


@cli.command(name="exists")
@click.argument("path")
@click.pass_context
def exists_command(ctx: click.Context, path: str) -> None:
    """Exit 0 if PATH exists in the store, 1 otherwise."""
    if _store(ctx).exists(path):
        console.print(f"[green]yes[/green] {path}")
        return
    console.print(f"[yellow]no[/yellow] {path}")
    sys.exit(1)


@cli.command(name="read")
@click.argument("path")
@click.pass_context
def read_command(ctx: click.Context, path: str) -> None:
    """Print the content of PATH."""
    try:
        text = _store(ctx).read(path).result()
    except SayakaUtilError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    console.print(text, markup=False, highlight=False, soft_wrap=True, end="")


@cli.command(name="write")
@click.argument("path")
@click.argument("text")
@click.pass_context
def write_command(ctx: click.Context, path: str, text: str) -> None:
    """Replace the content of PATH with TEXT, creating it if needed."""
    try:
        _store(ctx).write(path, text).result()
    except SayakaUtilError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    console.print(f"[green]Written:[/green] {path}")


# ---------------------------------------------------------------------------
# annotate command
# ---------------------------------------------------------------------------


@cli.command(name="annotate")
@click.argument("text")
@click.option(
    "--authority",
    type=click.Choice([a.name for a in Authority], case_sensitive=False),
    default=None,
    help="Authority level to mark the message with",
)
def annotate_command(text: str, authority: str | None) -> None:
    """Print TEXT, bracketed by authority markers when --authority is given."""
    level = Authority[authority.upper()] if authority else None
    chain = intercepted_authority(text, level)
    console.print(chain.content, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    cli()
