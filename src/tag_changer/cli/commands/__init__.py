"""CLI command implementations.

Each module in this package implements a specific tag-changer subcommand:
    show.py: Display the tag of a file
    set_tag.py: Write or update the tag of a file
    strip.py: Remove the tag of a file
    genres.py: List the genre table
"""

from .show import cmd_show
from .set_tag import cmd_set
from .strip import cmd_strip
from .genres import cmd_genres

__all__ = [
    "cmd_show",
    "cmd_set",
    "cmd_strip",
    "cmd_genres",
]
