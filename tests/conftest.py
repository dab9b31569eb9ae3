"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tag_changer.codec import encode  # noqa: E402
from tag_changer.tag import Tag  # noqa: E402

# 300 bytes of audio-like data that never contains the marker
AUDIO_DATA = bytes(range(1, 256)) + bytes(range(1, 46))


def build_block(
    title=b"", artist=b"", album=b"", year=b"", comment=b"", genre=0, marker=b"TAG"
):
    """Build a raw tag block by hand, independent of the encoder."""
    return (
        marker
        + title.ljust(30, b"\x00")
        + artist.ljust(30, b"\x00")
        + album.ljust(30, b"\x00")
        + year.ljust(4, b"\x00")
        + comment.ljust(30, b"\x00")
        + bytes([genre])
    )


@pytest.fixture
def sample_tag():
    """Create a sample Tag for testing."""
    return Tag(
        title="testsong",
        artist="testartist",
        album="testalbum",
        year="2023",
        comment="testcomment",
        genre=5,
    )


@pytest.fixture
def tagged_stream(sample_tag):
    """A stream of 300 audio bytes followed by a tag."""
    return io.BytesIO(AUDIO_DATA + encode(sample_tag))


@pytest.fixture
def untagged_stream():
    """A stream of 300 audio bytes without a tag."""
    return io.BytesIO(AUDIO_DATA)


@pytest.fixture
def tagged_file(tmp_path, sample_tag):
    """Create a temporary audio file with a tag."""
    path = tmp_path / "song.mp3"
    path.write_bytes(AUDIO_DATA + encode(sample_tag))
    return path


@pytest.fixture
def untagged_file(tmp_path):
    """Create a temporary audio file without a tag."""
    path = tmp_path / "untagged.mp3"
    path.write_bytes(AUDIO_DATA)
    return path


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the home directory at a temporary one so no user config is read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
