"""Single-byte text used in tag fields."""

from .constants import ENCODING
from .errors import TextEncodingError


class Latin1Text(str):
    """A string whose every character fits in one byte (U+0000-U+00FF).

    Validated on construction, so the encoded length always equals len(self)
    and truncating to a field width never splits a character.
    """

    def __new__(cls, value=""):
        if isinstance(value, Latin1Text):
            return value
        if isinstance(value, (bytes, bytearray)):
            # Every byte value is a valid Latin-1 character
            value = bytes(value).decode(ENCODING)
        elif not isinstance(value, str):
            raise TypeError(f"Text must be str or bytes, got {type(value).__name__}")
        else:
            try:
                value.encode(ENCODING)
            except UnicodeEncodeError as e:
                bad = value[e.start]
                raise TextEncodingError(
                    f"Character {bad!r} (U+{ord(bad):04X}) at position {e.start} "
                    f"cannot be stored in a single byte"
                ) from e
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Latin1Text({str(self)!r})"

    def truncate(self, width: int) -> "Latin1Text":
        return Latin1Text(str(self)[:width])

    def to_field(self, width: int) -> bytes:
        """Return exactly width bytes: the text truncated, then NUL padded."""
        return self.encode(ENCODING)[:width].ljust(width, b"\x00")

    @classmethod
    def from_field(cls, raw: bytes) -> "Latin1Text":
        """Build text from a fixed-width slot, dropping trailing NUL padding."""
        return cls(raw.rstrip(b"\x00"))
