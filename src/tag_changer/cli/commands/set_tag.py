"""Set command - Write or update the tag of a file."""

import argparse
import logging
from pathlib import Path

from rich.console import Console

from ...codec import decode, encode
from ...constants import FIELD_WIDTHS, TEXT_FIELDS
from ...errors import TagError, TagNotFoundError, TextEncodingError, UnsupportedGenreError
from ...files import read_file_tag, write_file_tag
from ...genres import genre_code, genre_name
from ...tag import Tag
from ..schemas import TagModel, WriteSuccessResponse
from ..utils import ExitCode, exit_with_error, json_output, load_config


def cmd_set(args: argparse.Namespace) -> None:
    """Write the tag of a file, keeping fields that are not given.

    Args:
        args: Parsed command-line arguments

    Exit codes:
        0: Success
        10: Invalid input (missing file, bad genre, text outside Latin-1)
        20: Data error (existing tag unreadable, unsupported genre in strict mode)
        30: Write failed
    """
    file_path = Path(args.file)
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json, highlight=False)
    config = load_config(args)

    if not file_path.is_file():
        exit_with_error(
            use_json, "invalid_input", f"File does not exist: {file_path}", ExitCode.INVALID_INPUT
        )

    base = Tag()
    if not args.clear:
        try:
            base = read_file_tag(file_path)
            logging.info("Updating existing tag of %s", file_path)
        except TagNotFoundError:
            logging.info("No existing tag in %s, starting from an empty one", file_path)
        except (TagError, OSError) as e:
            exit_with_error(use_json, "read_failed", str(e), ExitCode.DATA_ERROR)

    changes = {
        field: getattr(args, field)
        for field, _ in TEXT_FIELDS
        if getattr(args, field) is not None
    }
    if args.genre is not None:
        try:
            changes["genre"] = genre_code(args.genre)
        except ValueError as e:
            exit_with_error(use_json, "invalid_input", str(e), ExitCode.INVALID_INPUT)

    try:
        tag = base.replace(**changes)
    except TextEncodingError as e:
        exit_with_error(use_json, "invalid_input", str(e), ExitCode.INVALID_INPUT)

    try:
        genre_name(tag.genre, strict=config.get_strict_genres())
    except UnsupportedGenreError as e:
        exit_with_error(use_json, "unsupported_genre", str(e), ExitCode.DATA_ERROR)

    truncated = [
        field for field, value in changes.items()
        if field in FIELD_WIDTHS and len(value) > FIELD_WIDTHS[field]
    ]
    for field in truncated:
        logging.warning("%s is longer than %d characters and will be truncated", field, FIELD_WIDTHS[field])
        console.print(
            f"[yellow]Warning: {field} truncated to {FIELD_WIDTHS[field]} characters[/yellow]"
        )

    atomic = config.get_atomic() and not args.no_atomic
    backup = args.backup or config.get_backup()

    try:
        backup_path = write_file_tag(
            file_path,
            tag,
            atomic=atomic,
            backup=backup,
            backup_dir=config.get_backup_dir(),
            max_backups=config.get_max_backups(),
        )
    except (TagError, OSError) as e:
        exit_with_error(use_json, "write_failed", str(e), ExitCode.WRITE_FAILED)

    stored = decode(encode(tag))

    if use_json:
        json_output(
            WriteSuccessResponse(
                file=str(file_path),
                tag=TagModel.from_tag(stored),
                truncated=truncated,
                atomic=atomic,
                backup=backup_path,
            )
        )

    console.print(f"[green]✓[/green] Tag written to {file_path}")
    if backup_path:
        console.print(f"[dim]Backup: {backup_path}[/dim]")
    console.print(str(stored), markup=False, emoji=False)
