import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

from .constants import DEFAULT_GENRE, DISPLAY_LABELS, TEXT_FIELDS
from .genres import genre_name
from .text import Latin1Text


@dataclass(frozen=True)
class Tag:
    """Decoded ID3v1 tag.

    Text fields are coerced to Latin1Text, so a Tag can only be built from
    text that is representable on disk. Text longer than the field width is
    accepted here and truncated when encoded.
    """

    title: Latin1Text = Latin1Text()
    artist: Latin1Text = Latin1Text()
    album: Latin1Text = Latin1Text()
    year: Latin1Text = Latin1Text()
    comment: Latin1Text = Latin1Text()
    genre: int = DEFAULT_GENRE

    def __post_init__(self) -> None:
        for field, _ in TEXT_FIELDS:
            object.__setattr__(self, field, Latin1Text(getattr(self, field)))

        if isinstance(self.genre, bool) or not isinstance(self.genre, int):
            raise TypeError(f"Genre must be an int, got {type(self.genre).__name__}")
        if not 0 <= self.genre <= 255:
            raise ValueError(f"Genre must be between 0 and 255, got {self.genre}")

    @property
    def genre_name(self) -> str:
        return genre_name(self.genre)

    def replace(self, **changes: Any) -> "Tag":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {field: str(getattr(self, field)) for field, _ in TEXT_FIELDS}
        data["genre"] = self.genre
        data["genre_name"] = self.genre_name
        return data

    def __str__(self) -> str:
        lines = []
        for field, label in DISPLAY_LABELS:
            value = self.genre_name if field == "genre" else getattr(self, field)
            lines.append(f"{label}: {value}")
        return "\n".join(lines)
