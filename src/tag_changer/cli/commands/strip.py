"""Strip command - Remove the tag of a file."""

import argparse
import logging
from pathlib import Path

from rich.console import Console

from ...errors import TagError
from ...files import remove_file_tag
from ..schemas import StripResponse
from ..utils import ExitCode, exit_with_error, json_output, load_config


def cmd_strip(args: argparse.Namespace) -> None:
    """Remove the tag of a file.

    A file without a tag is left untouched and is not an error.

    Args:
        args: Parsed command-line arguments
    """
    file_path = Path(args.file)
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json, highlight=False)
    config = load_config(args)

    if not file_path.is_file():
        exit_with_error(
            use_json, "invalid_input", f"File does not exist: {file_path}", ExitCode.INVALID_INPUT
        )

    try:
        removed, backup_path = remove_file_tag(
            file_path,
            atomic=config.get_atomic() and not args.no_atomic,
            backup=args.backup or config.get_backup(),
            backup_dir=config.get_backup_dir(),
            max_backups=config.get_max_backups(),
        )
    except (TagError, OSError) as e:
        exit_with_error(use_json, "write_failed", str(e), ExitCode.WRITE_FAILED)

    if use_json:
        json_output(StripResponse(file=str(file_path), removed=removed, backup=backup_path))

    if removed:
        console.print(f"[green]✓[/green] Tag removed from {file_path}")
        if backup_path:
            console.print(f"[dim]Backup: {backup_path}[/dim]")
    else:
        logging.info("No tag found in %s", file_path)
        console.print(f"[yellow]No tag found in {file_path}[/yellow]")
