"""Exception hierarchy for tag reading and writing.

Callers tell "no tag present" apart from "stream broken" by exception type
(or by ``TagNotFoundError.reason``), never by parsing the message.
"""

from enum import Enum


class ReadFailure(Enum):
    """Why a tag could not be located at the end of a stream."""

    TOO_SHORT = "too_short"
    FORMAT_MISMATCH = "format_mismatch"


class TagError(Exception):
    """Base class for all tag errors."""


class TagIOError(TagError):
    """A seek, read or write on the host stream failed.

    The underlying ``OSError`` is chained as ``__cause__``.
    """


class TagNotFoundError(TagError):
    """The stream does not end with a tag block."""

    def __init__(self, message: str, reason: ReadFailure = ReadFailure.TOO_SHORT):
        super().__init__(message)
        self.reason = reason


class TagFormatError(TagNotFoundError):
    """A block has the wrong size or does not start with the marker."""

    def __init__(self, message: str):
        super().__init__(message, ReadFailure.FORMAT_MISMATCH)


class UnsupportedGenreError(TagError):
    """Strict lookup of a genre code with no name in the supported table."""

    def __init__(self, code: int):
        super().__init__(f"Genre code {code} is not supported (28-191 have no name here)")
        self.code = code


class TextEncodingError(TagError, ValueError):
    """Text contains characters that do not fit in a single byte."""
