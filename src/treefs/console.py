"""Console output for the CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from treefs.directory import Directory

if TYPE_CHECKING:
    from treefs.nodes import Node


class ConsoleOutput:
    """Rich rendering of command results."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_names(self, names: list[str]) -> None:
        for name in names:
            self.console.print(name, markup=False, highlight=False)

    def show_nodes(self, title: str, nodes: list[Node]) -> None:
        """Display children as a table.

        Args:
            title: Table title, usually the listed directory.
            nodes: Children returned by Directory.read().
        """
        if not nodes:
            self.console.print("[yellow]Directory is empty[/yellow]")
            return

        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Kind")

        for node in nodes:
            kind = "[blue]directory[/blue]" if isinstance(node, Directory) else "file"
            table.add_row(node.path.name, kind)

        self.console.print(table)

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")


def configure_logging(level: str, console: Console | None = None) -> None:
    """Route log records through rich at ``level``."""
    root = logging.getLogger("treefs")
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=console or Console(stderr=True), show_path=False))
    root.setLevel(level)
