"""Encoding, decoding and in-stream replacement of ID3v1 tag blocks.

The functions here work on any seekable binary stream (an open file, a
BytesIO, ...). They never open or close the stream themselves.
"""

import logging
import os
import struct
from enum import Enum

from .constants import MARKER, TAG_FORMAT, TAG_SIZE, TEXT_FIELDS
from .errors import ReadFailure, TagFormatError, TagIOError, TagNotFoundError
from .tag import Tag
from .text import Latin1Text

logger = logging.getLogger(__name__)


class TagStatus(Enum):
    """What the last TAG_SIZE bytes of a stream hold."""

    PRESENT = "present"
    ABSENT = "absent"
    TOO_SHORT = "too_short"


def decode(data: bytes) -> Tag:
    """Return a Tag given a 128-byte block.

    Raises:
        TagFormatError: If the block has the wrong size or no marker
    """
    if len(data) != TAG_SIZE:
        raise TagFormatError(f"Tag block must be {TAG_SIZE} bytes, got {len(data)}")

    marker, *fields, genre = struct.unpack(TAG_FORMAT, data)
    if marker != MARKER:
        raise TagFormatError(f"Expected marker {MARKER!r}, got {marker!r}")

    values = {
        name: Latin1Text.from_field(raw) for (name, _), raw in zip(TEXT_FIELDS, fields)
    }
    return Tag(genre=genre, **values)


def encode(tag: Tag) -> bytes:
    """Return the 128-byte block for a tag.

    Text longer than its field is truncated, shorter text is NUL padded.
    """
    fields = [getattr(tag, name).to_field(width) for name, width in TEXT_FIELDS]
    return struct.pack(TAG_FORMAT, MARKER, *fields, tag.genre)


def _stream_size(stream) -> int:
    return stream.seek(0, os.SEEK_END)


def read_tag(stream) -> Tag:
    """Locate and decode the tag at the end of a stream.

    Raises:
        TagNotFoundError: If the stream is shorter than a tag block
            (reason TOO_SHORT) or its tail has no marker (TagFormatError,
            reason FORMAT_MISMATCH)
        TagIOError: If seeking or reading fails
    """
    try:
        size = _stream_size(stream)
        if size < TAG_SIZE:
            raise TagNotFoundError(
                f"Stream is {size} bytes, too short to hold a tag",
                ReadFailure.TOO_SHORT,
            )
        stream.seek(size - TAG_SIZE)
        data = stream.read(TAG_SIZE)
    except OSError as e:
        raise TagIOError(f"Failed to read tag: {e}") from e

    if len(data) != TAG_SIZE:
        raise TagIOError(f"Short read: expected {TAG_SIZE} bytes, got {len(data)}")

    tag = decode(data)
    logger.debug("Found tag at offset %d", size - TAG_SIZE)
    return tag


def probe(stream) -> TagStatus:
    """Classify the end of a stream without raising for a missing tag.

    Raises:
        TagIOError: If seeking or reading fails
    """
    try:
        read_tag(stream)
    except TagFormatError:
        return TagStatus.ABSENT
    except TagNotFoundError:
        return TagStatus.TOO_SHORT
    return TagStatus.PRESENT


def strip_trailing_tag(stream) -> bytes:
    """Return the stream contents without a trailing tag.

    The whole stream is read into memory. If the last 128 bytes are not a
    valid tag the contents are returned unchanged. The stream itself is not
    modified.
    """
    status = probe(stream)
    try:
        stream.seek(0)
        data = stream.read()
    except OSError as e:
        raise TagIOError(f"Failed to read stream: {e}") from e

    if status is TagStatus.PRESENT:
        return data[:-TAG_SIZE]
    return data


def replace_tag(stream, tag: Tag) -> None:
    """Replace (or append) the tag at the end of a stream, in place.

    The stream is rewritten from offset 0. This is not atomic: if the
    process dies mid-write the stream can be left with mixed contents. Use
    files.write_file_tag for an atomic rewrite of a file on disk.

    Raises:
        TagIOError: If reading or writing the stream fails
    """
    body = strip_trailing_tag(stream)
    data = body + encode(tag)
    try:
        stream.seek(0)
        stream.write(data)
        stream.truncate()
        stream.flush()
    except OSError as e:
        raise TagIOError(f"Failed to write tag: {e}") from e
    logger.debug("Wrote %d bytes (%d body + %d tag)", len(data), len(body), TAG_SIZE)


def remove_tag(stream) -> bool:
    """Truncate a trailing tag off a stream.

    Returns:
        True if a tag was removed, False if there was none
    """
    if probe(stream) is not TagStatus.PRESENT:
        return False
    try:
        size = _stream_size(stream)
        stream.truncate(size - TAG_SIZE)
        stream.flush()
    except OSError as e:
        raise TagIOError(f"Failed to remove tag: {e}") from e
    logger.debug("Removed tag, stream is now %d bytes", size - TAG_SIZE)
    return True
