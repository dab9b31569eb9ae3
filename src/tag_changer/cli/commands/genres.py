"""Genres command - List the genre table."""

import argparse

from rich.console import Console
from rich.table import Table

from ...genres import iter_genres
from ..schemas import GenreListResponse, GenreModel
from ..utils import json_output


def cmd_genres(args: argparse.Namespace) -> None:
    """List the genre codes that have a name."""
    if getattr(args, "json", False):
        json_output(
            GenreListResponse(
                genres=[GenreModel(code=code, name=name) for code, name in iter_genres()]
            )
        )

    table = Table(title="Genres")
    table.add_column("Code", style="cyan", justify="right")
    table.add_column("Name", style="magenta")
    for code, name in iter_genres():
        table.add_row(str(code), name)

    console = Console()
    console.print(table)
    console.print("[dim]24, 192-255: Unknown. 28-191: Unsupported.[/dim]")
