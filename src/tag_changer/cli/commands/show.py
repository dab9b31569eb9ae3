"""Show command - Display the tag of a file."""

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...constants import DISPLAY_LABELS
from ...errors import TagIOError, TagNotFoundError, UnsupportedGenreError
from ...files import read_file_tag
from ...genres import genre_name
from ..schemas import TagModel, TagResponse
from ..utils import ExitCode, exit_with_error, json_output, load_config


def cmd_show(args: argparse.Namespace) -> None:
    """Display the tag of a file.

    Args:
        args: Parsed command-line arguments

    Exit codes:
        0: Success
        10: Invalid input (file doesn't exist)
        20: Data error (no tag, unreadable file, unsupported genre in strict mode)
    """
    file_path = Path(args.file)
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json, highlight=False)
    config = load_config(args)

    if not file_path.is_file():
        exit_with_error(
            use_json, "invalid_input", f"File does not exist: {file_path}", ExitCode.INVALID_INPUT
        )

    logging.info("Reading tag from: %s", file_path)
    try:
        tag = read_file_tag(file_path)
    except TagNotFoundError as e:
        exit_with_error(use_json, "no_tag", f"No tag in {file_path}: {e}", ExitCode.DATA_ERROR)
    except (TagIOError, OSError) as e:
        exit_with_error(use_json, "read_failed", str(e), ExitCode.DATA_ERROR)

    try:
        genre_name(tag.genre, strict=config.get_strict_genres())
    except UnsupportedGenreError as e:
        exit_with_error(use_json, "unsupported_genre", str(e), ExitCode.DATA_ERROR)

    if use_json:
        json_output(TagResponse(file=str(file_path), tag=TagModel.from_tag(tag)))

    if args.table:
        table = Table(title=f"Tag of {file_path.name}", show_header=False)
        table.add_column("Field", style="cyan", width=12)
        table.add_column("Value", style="magenta")
        for field, label in DISPLAY_LABELS:
            if field == "genre":
                table.add_row(label, escape(f"{tag.genre_name} ({tag.genre})"))
            else:
                table.add_row(label, escape(str(getattr(tag, field))))
        console.print(table)
    else:
        console.print(str(tag), markup=False, emoji=False)
