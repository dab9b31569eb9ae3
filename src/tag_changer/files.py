"""Path-level tag operations.

These wrap the stream functions in codec with file handling. Rewrites are
atomic by default: the new contents go to a temporary file in the same
directory, which then replaces the original with os.replace.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Tuple, Union

from .backup import BackupManager
from .codec import TagStatus, encode, probe, read_tag, remove_tag, replace_tag, strip_trailing_tag
from .errors import TagIOError
from .tag import Tag

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _open(path: Path, mode: str):
    try:
        return open(path, mode)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except PermissionError as e:
        raise PermissionError(f"Permission denied opening file: {path}") from e
    except IsADirectoryError as e:
        raise IsADirectoryError(f"Not a file: {path}") from e


def _atomic_write(path: Path, data: bytes) -> None:
    """Write data to path through a temporary file and os.replace."""
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", delete=False, dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as e:
        raise TagIOError(f"Failed to rewrite {path}: {e}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)


def _backup(path: Path, backup_dir: Optional[str], max_backups: int) -> Optional[str]:
    backup_path = BackupManager(backup_dir).create_backup(str(path), max_backups=max_backups)
    if backup_path is None:
        logger.warning("Continuing without a backup of %s", path)
    return backup_path


def read_file_tag(path: PathLike) -> Tag:
    """Return the tag of a file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        PermissionError: If the file cannot be read
        TagNotFoundError: If the file has no tag
        TagIOError: If reading fails
    """
    path = Path(path)
    with _open(path, "rb") as f:
        return read_tag(f)


def write_file_tag(
    path: PathLike,
    tag: Tag,
    atomic: bool = True,
    backup: bool = False,
    backup_dir: Optional[str] = None,
    max_backups: int = 5,
) -> Optional[str]:
    """Replace or append the tag of a file.

    Args:
        path: File to rewrite
        tag: Tag to store
        atomic: Rewrite through a temporary file instead of in place
        backup: Copy the file aside first
        backup_dir: Where to put the backup (default: .tag_backups next to it)
        max_backups: Number of backups of this file to keep

    Returns:
        Path of the backup, or None if no backup was made
    """
    path = Path(path)
    backup_path = _backup(path, backup_dir, max_backups) if backup else None

    if atomic:
        with _open(path, "rb") as f:
            body = strip_trailing_tag(f)
        _atomic_write(path, body + encode(tag))
    else:
        with _open(path, "r+b") as f:
            replace_tag(f, tag)

    logger.info("Wrote tag to %s", path)
    return backup_path


def remove_file_tag(
    path: PathLike,
    atomic: bool = True,
    backup: bool = False,
    backup_dir: Optional[str] = None,
    max_backups: int = 5,
) -> Tuple[bool, Optional[str]]:
    """Remove the tag of a file.

    A file without a tag is neither backed up nor rewritten.

    Returns:
        Tuple of (removed, backup path). removed is False if the file had
        no tag; the backup path is None if no backup was made.
    """
    path = Path(path)

    with _open(path, "rb") as f:
        if probe(f) is not TagStatus.PRESENT:
            return False, None
        body = strip_trailing_tag(f) if atomic else None

    backup_path = _backup(path, backup_dir, max_backups) if backup else None

    if atomic:
        _atomic_write(path, body)
    else:
        with _open(path, "r+b") as f:
            remove_tag(f)

    logger.info("Removed tag from %s", path)
    return True, backup_path
