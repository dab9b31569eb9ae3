"""Command-line interface for Tag Changer.

This package provides the 'tag-changer' command-line tool with subcommands:
    show: Display the tag of a file
    set: Write or update the tag of a file
    strip: Remove the tag of a file
    genres: List the genre table

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import ExitCode, setup_logging
from .commands import cmd_show, cmd_set, cmd_strip, cmd_genres

__all__ = [
    "main",
    "cmd_show",
    "cmd_set",
    "cmd_strip",
    "cmd_genres",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def _add_write_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-atomic",
        action="store_true",
        help="Rewrite the file in place instead of through a temporary file",
    )
    parser.add_argument(
        "--backup",
        action="store_true",
        help="Copy the file aside before rewriting it",
    )


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=argparse.SUPPRESS,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=argparse.SUPPRESS,
        help="Path to configuration file",
    )

    # Options for commands that print a result
    json_parser = argparse.ArgumentParser(add_help=False)
    json_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser = argparse.ArgumentParser(
        prog="tag-changer",
        usage="tag-changer <command> [options]",
        description=(
            "Tag Changer - Read and write ID3v1 tags\n\n"
            "Works on the 128-byte tag block at the end of audio files."
        ),
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Display the tag of a file",
        usage="tag-changer show <file> [options]",
        description="Read the ID3v1 tag at the end of a file and print its fields",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("file", help="Audio file to read")
    show_parser.add_argument(
        "-t",
        "--table",
        action="store_true",
        help="Show the fields as a table",
    )
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # set
    # ──────────────────────────────
    set_parser = subparsers.add_parser(
        "set",
        help="Write or update the tag of a file",
        usage="tag-changer set <file> [--title T] [--artist A] ... [options]",
        description=(
            "Write the ID3v1 tag of a file. Fields that are not given keep "
            "their current value. Text longer than its field is truncated."
        ),
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    set_parser.add_argument("file", help="Audio file to rewrite")
    set_parser.add_argument("--title", help="Song title (30 characters)")
    set_parser.add_argument("--artist", help="Artist (30 characters)")
    set_parser.add_argument("--album", help="Album (30 characters)")
    set_parser.add_argument("--year", help="Year (4 characters)")
    set_parser.add_argument("--comment", help="Comment (30 characters)")
    set_parser.add_argument("--genre", help="Genre name or code (0-255)")
    set_parser.add_argument(
        "--clear",
        action="store_true",
        help="Start from an empty tag instead of the existing one",
    )
    _add_write_options(set_parser)
    set_parser.set_defaults(func=cmd_set)

    # ──────────────────────────────
    # strip
    # ──────────────────────────────
    strip_parser = subparsers.add_parser(
        "strip",
        help="Remove the tag of a file",
        usage="tag-changer strip <file> [options]",
        description="Remove the ID3v1 tag from the end of a file",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    strip_parser.add_argument("file", help="Audio file to rewrite")
    _add_write_options(strip_parser)
    strip_parser.set_defaults(func=cmd_strip)

    # ──────────────────────────────
    # genres
    # ──────────────────────────────
    genres_parser = subparsers.add_parser(
        "genres",
        help="List genre codes",
        usage="tag-changer genres [options]",
        description="List the genre codes and their names",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    genres_parser.set_defaults(func=cmd_genres)

    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup
    try:
        setup_logging(getattr(args, "log_level", None) or "critical")
    except ValueError as e:
        parser.error(str(e))

    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)


if __name__ == "__main__":
    main()
