"""Utility functions for CLI operations."""

import argparse
import logging
import sys
from enum import IntEnum
from typing import NoReturn

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from ..config import Config
from .schemas import ErrorResponse


class ExitCode(IntEnum):
    """Process exit codes used by all commands."""

    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    WRITE_FAILED = 30
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel, exit_code: ExitCode = ExitCode.SUCCESS) -> NoReturn:
    """Print a response model as JSON and exit."""
    print(response.model_dump_json(exclude_none=True, indent=2))
    sys.exit(exit_code)


def exit_with_error(use_json: bool, error: str, message: str, exit_code: ExitCode) -> NoReturn:
    """Report an error as JSON or on stderr, then exit.

    Args:
        use_json: Emit an ErrorResponse on stdout instead of text
        error: Machine-readable error code
        message: Human-readable message
        exit_code: Process exit code
    """
    if use_json:
        json_output(ErrorResponse(error=error, message=message), exit_code)

    logging.error(message)
    Console(stderr=True, soft_wrap=True).print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(exit_code)


def load_config(args: argparse.Namespace) -> Config:
    """Return the Config named by --config, or the default one."""
    config_path = getattr(args, "config", None)
    return Config(config_path) if config_path else Config()
