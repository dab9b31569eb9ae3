"""Configuration management for Tag Changer.

Handles saving and loading user preferences for how tags are written:
atomic rewrites, backups and genre strictness.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.tag-changer on all platforms)
    """
    return Path.home() / ".tag-changer"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


def _is_valid_max_backups(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "write": {
            # Rewrite through a temporary file and rename instead of in place
            "atomic": True,
            # Copy each file aside before rewriting it
            "backup": False,
            # Empty means a .tag_backups directory next to each file
            "backup_dir": "",
            "max_backups": 5,
        },
        "genre": {
            # Treat genre codes 28-191 as an error instead of "Unsupported"
            "strict": False,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use (default: ~/.tag-changer/config.toml)
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        self._validate()
        self._dirty = False
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.warning("Error saving config %s: %s", self.config_path, e)
            return False

        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _validate(self) -> None:
        """Reset loaded values that the setters would reject to their defaults."""
        max_backups = self.data["write"].get("max_backups")
        if not _is_valid_max_backups(max_backups):
            default = self.DEFAULT_CONFIG["write"]["max_backups"]
            logger.warning(
                "Invalid write.max_backups %r in %s, using %d",
                max_backups,
                self.config_path,
                default,
            )
            self.data["write"]["max_backups"] = default

    def is_dirty(self) -> bool:
        return self._dirty

    # Write settings
    def get_atomic(self) -> bool:
        return bool(self.data["write"]["atomic"])

    def set_atomic(self, atomic: bool) -> None:
        self.data["write"]["atomic"] = atomic
        self._dirty = True

    def get_backup(self) -> bool:
        return bool(self.data["write"]["backup"])

    def set_backup(self, backup: bool) -> None:
        self.data["write"]["backup"] = backup
        self._dirty = True

    def get_backup_dir(self) -> Optional[str]:
        """Get the backup directory, or None for the per-file default."""
        return self.data["write"]["backup_dir"] or None

    def set_backup_dir(self, path: str) -> None:
        self.data["write"]["backup_dir"] = path
        self._dirty = True

    def get_max_backups(self) -> int:
        return self.data["write"]["max_backups"]

    def set_max_backups(self, count: int) -> None:
        """Set how many backups of each file to keep.

        Raises:
            ValueError: If count is not an integer of at least 1
        """
        if not _is_valid_max_backups(count):
            raise ValueError("At least one backup must be kept")
        self.data["write"]["max_backups"] = count
        self._dirty = True

    # Genre settings
    def get_strict_genres(self) -> bool:
        return bool(self.data["genre"]["strict"])

    def set_strict_genres(self, strict: bool) -> None:
        self.data["genre"]["strict"] = strict
        self._dirty = True
