"""CLI commands using Typer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import click
import typer

from treefs import __version__
from treefs.console import ConsoleOutput, configure_logging
from treefs.context import AppContext, create_context
from treefs.directory import Directory
from treefs.errors import FilesystemError

app = typer.Typer(
    name="treefs",
    help="Typed, error-checked directory and file operations",
    no_args_is_help=True,
)

output = ConsoleOutput()


@dataclass
class CliOptions:
    """Global options, stored on the Typer context by ``main``."""

    config_path: Path | None = None
    verbose: bool = False


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"treefs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every OS call")] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Settings file (YAML)")
    ] = None,
) -> None:
    """Typed, error-checked directory and file operations."""
    ctx.obj = CliOptions(config_path=config, verbose=verbose)


def _current_options() -> CliOptions:
    """Options set by ``main``, or defaults when a command is called directly."""
    click_context = click.get_current_context(silent=True)
    if click_context is None:
        return CliOptions()
    return click_context.find_object(CliOptions) or CliOptions()


def _get_context(context: AppContext | None) -> AppContext:
    """Build the context and set up logging from its settings."""
    if context is not None:
        return context
    options = _current_options()
    try:
        ctx = create_context(options.config_path)
    except (FileNotFoundError, ValueError) as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e
    configure_logging("DEBUG" if options.verbose else ctx.settings.log_level)
    return ctx


def _fail(error: FilesystemError) -> typer.Exit:
    output.show_error(str(error))
    return typer.Exit(1)


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    names: Annotated[bool, typer.Option("--names", "-n", help="Print bare names")] = False,
    _context=None,
) -> None:
    """List the children of a directory."""
    ctx = _get_context(_context)
    try:
        directory = ctx.root.get_directory(path)
        if names:
            output.show_names(directory.read(as_objects=False))
        else:
            output.show_nodes(str(directory.path), directory.read())
    except FilesystemError as e:
        raise _fail(e) from e


@app.command("mkdir")
def make_directory(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _get_context(_context)
    try:
        directory = ctx.root.get_directory(path)
        directory.write()
    except FilesystemError as e:
        raise _fail(e) from e
    output.show_success(f"Created {directory.path}")


@app.command("mv")
def move(
    source: Annotated[str, typer.Argument(help="Existing file or directory")],
    destination: Annotated[str, typer.Argument(help="New location (must not exist)")],
    _context=None,
) -> None:
    """Move a file or directory."""
    ctx = _get_context(_context)
    try:
        node = ctx.root.get_node(source)
        old_path = node.path
        node.move(ctx.root.resolve(destination))
    except FilesystemError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {old_path} to {node.path}")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="File or directory to delete")],
    _context=None,
) -> None:
    """Delete a file, or a directory and everything beneath it."""
    ctx = _get_context(_context)
    try:
        node = ctx.root.get_node(path)
        if not node.exists():
            output.show_warning(f"Nothing to delete at {node.path}")
            return
        node.delete()
    except FilesystemError as e:
        raise _fail(e) from e
    kind = "directory" if isinstance(node, Directory) else "file"
    output.show_success(f"Deleted {kind} {node.path}")


@app.command("mtime")
def modified_time(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _context=None,
) -> None:
    """Print the last modification time in seconds since the epoch."""
    ctx = _get_context(_context)
    try:
        timestamp = ctx.root.get_node(path).get_modified_time()
    except FilesystemError as e:
        raise _fail(e) from e
    output.console.print(str(timestamp))


if __name__ == "__main__":
    app()
