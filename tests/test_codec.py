"""Tests for Tag and the block encoder/decoder."""

import pytest

from conftest import build_block
from tag_changer.codec import decode, encode
from tag_changer.constants import TAG_SIZE
from tag_changer.errors import ReadFailure, TagFormatError, TagNotFoundError, TextEncodingError
from tag_changer.tag import Tag


class TestTag:
    """Test the Tag record."""

    def test_defaults(self):
        tag = Tag()
        assert tag.title == ""
        assert tag.genre == 255
        assert tag.genre_name == "Unknown"

    def test_text_fields_are_validated(self):
        with pytest.raises(TextEncodingError):
            Tag(title="☃")

    @pytest.mark.parametrize("genre", [-1, 256])
    def test_genre_must_fit_in_a_byte(self, genre):
        with pytest.raises(ValueError):
            Tag(genre=genre)

    def test_none_text_field_rejected(self):
        """Test that None is not stored as the text 'None'."""
        with pytest.raises(TypeError):
            Tag(title=None)
        with pytest.raises(TypeError):
            Tag().replace(artist=None)

    def test_genre_must_be_int(self):
        with pytest.raises(TypeError):
            Tag(genre="5")

    def test_replace_returns_copy(self, sample_tag):
        new_tag = sample_tag.replace(title="newsong")
        assert new_tag.title == "newsong"
        assert new_tag.artist == sample_tag.artist
        assert sample_tag.title == "testsong"

    def test_str_has_six_labeled_lines(self, sample_tag):
        """Test the text rendering used by the show command."""
        assert str(sample_tag).splitlines() == [
            "Song title: testsong",
            "Artist: testartist",
            "Album: testalbum",
            "Year: 2023",
            "Comment: testcomment",
            "Genre: Funk",
        ]

    def test_to_dict(self, sample_tag):
        data = sample_tag.to_dict()
        assert data["title"] == "testsong"
        assert data["genre"] == 5
        assert data["genre_name"] == "Funk"


class TestDecode:
    """Test decode()."""

    def test_decode_fields(self):
        block = build_block(b"testsong", b"testartist", b"album", b"1999", b"hi", 5)
        tag = decode(block)
        assert tag == Tag(
            title="testsong", artist="testartist", album="album",
            year="1999", comment="hi", genre=5,
        )

    def test_year_not_validated(self):
        tag = decode(build_block(year=b"abcd"))
        assert tag.year == "abcd"

    def test_full_width_fields(self):
        block = build_block(title=b"T" * 30, comment=b"C" * 30)
        tag = decode(block)
        assert tag.title == "T" * 30
        assert tag.comment == "C" * 30

    def test_latin1_bytes(self):
        tag = decode(build_block(artist=b"Bj\xf6rk"))
        assert tag.artist == "Björk"

    def test_genre_is_raw_byte(self):
        assert decode(build_block(genre=200)).genre == 200
        assert decode(build_block(genre=28)).genre == 28

    @pytest.mark.parametrize("marker", [b"tag", b"ID3", b"\x00\x00\x00", b"TAF"])
    def test_bad_marker(self, marker):
        """Test that any non-TAG marker is rejected regardless of the rest."""
        block = build_block(b"testsong", marker=marker)
        with pytest.raises(TagFormatError) as excinfo:
            decode(block)
        assert excinfo.value.reason is ReadFailure.FORMAT_MISMATCH

    def test_format_error_is_not_found(self):
        """Test that a bad marker counts as "no tag present"."""
        with pytest.raises(TagNotFoundError):
            decode(b"XXX" + b"\x00" * 125)

    @pytest.mark.parametrize("size", [0, 3, 127, 129, 256])
    def test_wrong_size(self, size):
        data = (b"TAG" + b"\x00" * size)[:size]
        with pytest.raises(TagFormatError):
            decode(data)


class TestEncode:
    """Test encode()."""

    def test_layout(self, sample_tag):
        """Test fixed field offsets 0, 3, 33, 63, 93, 97, 127."""
        block = encode(sample_tag)
        assert len(block) == TAG_SIZE
        assert block[0:3] == b"TAG"
        assert block[3:33] == b"testsong".ljust(30, b"\x00")
        assert block[33:63] == b"testartist".ljust(30, b"\x00")
        assert block[63:93] == b"testalbum".ljust(30, b"\x00")
        assert block[93:97] == b"2023"
        assert block[97:127] == b"testcomment".ljust(30, b"\x00")
        assert block[127] == 5

    def test_matches_hand_built_block(self):
        tag = Tag(title="a", artist="b", album="c", year="d", comment="e", genre=17)
        assert encode(tag) == build_block(b"a", b"b", b"c", b"d", b"e", 17)

    def test_empty_tag(self):
        block = encode(Tag(genre=0))
        assert block == b"TAG" + b"\x00" * 125

    def test_truncation(self):
        """Test that long text fills its slot and does not overflow."""
        tag = Tag(title="x" * 40, artist="artist", year="20231")
        block = encode(tag)
        assert len(block) == TAG_SIZE
        assert block[3:33] == b"x" * 30
        assert block[33:63] == b"artist".ljust(30, b"\x00")
        assert block[93:97] == b"2023"
        assert block[97:127] == b"\x00" * 30

    def test_padding_decodes_to_empty(self):
        block = encode(Tag(title="ab"))
        assert block[5:33] == b"\x00" * 28
        assert decode(block).album == ""

    def test_round_trip(self, sample_tag):
        assert decode(encode(sample_tag)) == sample_tag

    def test_round_trip_after_truncation(self):
        tag = Tag(title="y" * 31)
        assert decode(encode(tag)).title == "y" * 30
