# ID3v1 block layout, see https://id3.org/ID3v1
# offset  width  field
#      0      3  marker ("TAG")
#      3     30  title
#     33     30  artist
#     63     30  album
#     93      4  year
#     97     30  comment
#    127      1  genre
TAG_SIZE = 128
MARKER = b"TAG"

# Text fields in on-disk order, with their fixed widths in bytes
TEXT_FIELDS = [
    ("title", 30),
    ("artist", 30),
    ("album", 30),
    ("year", 4),
    ("comment", 30),
]

FIELD_WIDTHS = dict(TEXT_FIELDS)

# struct format for the whole block; 's' truncates or NUL-pads on pack
TAG_FORMAT = "<3s30s30s30s4s30sB"

# One byte per character, code points 0-255
ENCODING = "latin-1"

# Labels used when rendering a tag as text
DISPLAY_LABELS = [
    ("title", "Song title"),
    ("artist", "Artist"),
    ("album", "Album"),
    ("year", "Year"),
    ("comment", "Comment"),
    ("genre", "Genre"),
]

# Genre byte written when a file gets a fresh tag without a genre
DEFAULT_GENRE = 255
