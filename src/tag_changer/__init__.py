"""Tag Changer.

A Python library and command-line tool for reading and rewriting the
128-byte ID3v1 tag stored at the end of audio files.

Main modules:
    cli: Command-line interface (tag-changer command)
    codec: Tag block encoding/decoding and in-stream replacement
    files: Path-level helpers with atomic rewrite

Core modules:
    backup: Backups of files before they are rewritten
    config: Configuration management
    constants: Tag layout constants
    errors: Exception hierarchy
    genres: Genre code lookup table
    tag: The Tag record
    text: Single-byte text value type
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tag-changer")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    from pathlib import Path
    import tomllib

    try:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
            __version__ = pyproject_data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

from .codec import (
    decode,
    encode,
    probe,
    read_tag,
    remove_tag,
    replace_tag,
    strip_trailing_tag,
)
from .errors import (
    ReadFailure,
    TagError,
    TagFormatError,
    TagIOError,
    TagNotFoundError,
    TextEncodingError,
    UnsupportedGenreError,
)
from .genres import genre_code, genre_name
from .tag import Tag
from .text import Latin1Text

__all__ = [
    # Sub-packages
    "cli",
    # Core modules
    "backup",
    "codec",
    "config",
    "constants",
    "errors",
    "files",
    "genres",
    "tag",
    "text",
    # Public API
    "Latin1Text",
    "ReadFailure",
    "Tag",
    "TagError",
    "TagFormatError",
    "TagIOError",
    "TagNotFoundError",
    "TextEncodingError",
    "UnsupportedGenreError",
    "decode",
    "encode",
    "genre_code",
    "genre_name",
    "probe",
    "read_tag",
    "remove_tag",
    "replace_tag",
    "strip_trailing_tag",
]
