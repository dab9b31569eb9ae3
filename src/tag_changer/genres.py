"""Genre code lookup.

Names follow https://en.wikipedia.org/wiki/List_of_ID3v1_genres for codes
0-27. Code 24 has no name, 28-191 are outside the supported table and
192-255 are unassigned.
"""

from typing import Dict, Iterator, Tuple, Union

from .errors import UnsupportedGenreError

UNKNOWN = "Unknown"
UNSUPPORTED = "Unsupported"

UNSUPPORTED_RANGE = range(28, 192)

GENRES: Dict[int, str] = {
    0: "Blues",
    1: "Classic rock",
    2: "Country",
    3: "Dance",
    4: "Disco",
    5: "Funk",
    6: "Grunge",
    7: "Hip-hop",
    8: "Jazz",
    9: "Metal",
    10: "New age",
    11: "Oldies",
    12: "Other",
    13: "Pop",
    14: "Rhythm and blues",
    15: "Rap",
    16: "Reggae",
    17: "Rock",
    18: "Techno",
    19: "Industrial",
    20: "Alternative",
    21: "Ska",
    22: "Death Metal",
    23: "Soundtrack",
    25: "Euro-techno",
    26: "Ambient",
    27: "Trip-hop",
}

_BY_NAME = {name.lower(): code for code, name in GENRES.items()}


def genre_name(code: int, strict: bool = False) -> str:
    """Return the display name for a genre byte.

    Args:
        code: Genre byte (0-255)
        strict: Raise instead of returning the "Unsupported" sentinel for
            codes 28-191

    Returns:
        The canonical name, "Unsupported" for 28-191 (non-strict) or
        "Unknown" for anything else without a name

    Raises:
        ValueError: If code does not fit in a byte
        UnsupportedGenreError: If strict and code is in 28-191
    """
    if not 0 <= code <= 255:
        raise ValueError(f"Genre code must be between 0 and 255, got {code}")

    if code in GENRES:
        return GENRES[code]
    if code in UNSUPPORTED_RANGE:
        if strict:
            raise UnsupportedGenreError(code)
        return UNSUPPORTED
    return UNKNOWN


def genre_code(value: Union[str, int]) -> int:
    """Return the genre byte for a name or a numeric code.

    Names are matched case-insensitively against the defined table.
    """
    if isinstance(value, int):
        code = value
    else:
        text = value.strip()
        if text.lower() in _BY_NAME:
            return _BY_NAME[text.lower()]
        if not text.isdigit():
            raise ValueError(f"Unknown genre: {value!r}")
        code = int(text)

    if not 0 <= code <= 255:
        raise ValueError(f"Genre code must be between 0 and 255, got {code}")
    return code


def iter_genres() -> Iterator[Tuple[int, str]]:
    """Yield (code, name) pairs of the defined genres in code order."""
    return iter(sorted(GENRES.items()))
