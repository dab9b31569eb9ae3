"""Backup utilities for Tag Changer.

This module copies an audio file aside before its tag is rewritten, to
protect against data loss.
"""

import logging
import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional


logger = logging.getLogger(__name__)

DEFAULT_BACKUP_DIRNAME = ".tag_backups"


class BackupManager:
    """Manages backups of individual audio files."""

    def __init__(self, backup_dir: Optional[str] = None):
        """Initialize backup manager.

        Args:
            backup_dir: Directory to store backups. If None, a .tag_backups
                directory next to each backed up file is used.
        """
        self.backup_dir = backup_dir

    def _backup_dir_for(self, file_path: Path) -> Path:
        if self.backup_dir:
            return Path(self.backup_dir)
        return file_path.parent / DEFAULT_BACKUP_DIRNAME

    def _backups_of(self, file_path: Path) -> List[Path]:
        """Return the backups of file_path, newest first."""
        backup_dir = self._backup_dir_for(file_path)
        if not backup_dir.is_dir():
            return []

        # <name>.YYYYmmdd_HHMMSS_ffffff.bak, matched literally on the name
        pattern = re.compile(re.escape(file_path.name) + r"\.\d{8}_\d{6}_\d{6}\.bak")
        backups = [
            entry for entry in backup_dir.iterdir()
            if entry.is_file() and pattern.fullmatch(entry.name)
        ]
        # Names embed the timestamp, newest sorts last
        return sorted(backups, reverse=True)

    def create_backup(
        self,
        file_path: str,
        callback: Optional[Callable] = None,
        max_backups: int = 5,
    ) -> Optional[str]:
        """Copy a file into the backup directory.

        Args:
            file_path: Path to the file to back up
            callback: Optional callback function for progress updates
            max_backups: Maximum number of backups of this file to keep
                (older ones will be deleted)

        Returns:
            Path to the created backup file, or None if the backup failed
        """
        file_path = Path(file_path).resolve()

        if not file_path.is_file():
            logger.error("File to back up does not exist: %s", file_path)
            return None

        backup_dir = self._backup_dir_for(file_path)
        try:
            backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create backup directory: %s", e)
            return None

        # Sortable timestamp, microseconds keep back-to-back backups distinct
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_path = backup_dir / f"{file_path.name}.{timestamp}.bak"

        if callback:
            callback(f"Creating backup: {backup_path.name}")
        logger.info("Creating backup of %s at %s", file_path, backup_path)

        try:
            shutil.copy2(file_path, backup_path)
        except OSError as e:
            logger.error("Failed to create backup: %s", e)
            if callback:
                callback(f"Backup failed: {e}")
            if backup_path.exists():
                try:
                    backup_path.unlink()
                except OSError:
                    logger.warning("Could not remove partial backup %s", backup_path)
            return None

        self.cleanup_old_backups(file_path, max_backups, callback)
        return str(backup_path)

    def cleanup_old_backups(
        self, file_path: Path, max_backups: int, callback: Optional[Callable] = None
    ) -> None:
        """Remove old backups of a file, keeping only the most recent ones."""
        for old_backup in self._backups_of(file_path)[max_backups:]:
            logger.info("Removing old backup: %s", old_backup.name)
            if callback:
                callback(f"Removing old backup: {old_backup.name}")
            try:
                old_backup.unlink()
            except OSError as e:
                logger.warning("Failed to remove old backup %s: %s", old_backup, e)

    def list_backups(self, file_path: str) -> List[dict]:
        """List backups of a file, newest first.

        Returns:
            List of dictionaries with backup information (path, name, size)
        """
        file_path = Path(file_path).resolve()

        backups = []
        for backup_file in self._backups_of(file_path):
            backups.append(
                {
                    "path": str(backup_file),
                    "name": backup_file.name,
                    "size": backup_file.stat().st_size,
                }
            )
        return backups

    def restore_backup(self, backup_path: str, restore_to: str) -> bool:
        """Copy a backup over a file.

        Returns:
            True if restore was successful, False otherwise
        """
        backup_file = Path(backup_path)
        if not backup_file.is_file():
            logger.error("Backup file does not exist: %s", backup_path)
            return False

        logger.info("Restoring backup from %s to %s", backup_path, restore_to)
        try:
            shutil.copy2(backup_file, restore_to)
        except OSError as e:
            logger.error("Failed to restore backup: %s", e)
            return False
        return True


def create_backup(
    file_path: str,
    backup_dir: Optional[str] = None,
    callback: Optional[Callable] = None,
    max_backups: int = 5,
) -> Optional[str]:
    """Convenience function to create a backup.

    Returns:
        Path to the created backup file, or None if backup failed
    """
    manager = BackupManager(backup_dir)
    return manager.create_backup(file_path, callback, max_backups)
