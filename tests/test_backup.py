"""Tests for backup functionality."""

from pathlib import Path

import pytest

from tag_changer.backup import DEFAULT_BACKUP_DIRNAME, BackupManager, create_backup


@pytest.fixture
def audio_file(tmp_path):
    """Create a temporary audio file."""
    path = tmp_path / "music" / "song.mp3"
    path.parent.mkdir()
    path.write_bytes(b"fake mp3 data")
    return path


@pytest.fixture
def temp_backup_dir(tmp_path):
    """Create a temporary backup directory."""
    backup_dir = tmp_path / "backups"
    backup_dir.mkdir()
    return backup_dir


class TestBackupManager:
    """Test BackupManager class."""

    def test_create_backup_success(self, audio_file, temp_backup_dir):
        """Test successful backup creation."""
        manager = BackupManager(str(temp_backup_dir))

        backup_path = manager.create_backup(str(audio_file))

        assert backup_path is not None
        assert Path(backup_path).read_bytes() == b"fake mp3 data"
        assert Path(backup_path).name.startswith("song.mp3.")
        assert Path(backup_path).suffix == ".bak"

    def test_default_backup_dir(self, audio_file):
        """Test that backups go next to the file by default."""
        backup_path = BackupManager().create_backup(str(audio_file))

        assert backup_path is not None
        assert Path(backup_path).parent == audio_file.parent / DEFAULT_BACKUP_DIRNAME

    def test_create_backup_with_callback(self, audio_file, temp_backup_dir):
        """Test backup creation with callback."""
        messages = []

        backup_path = BackupManager(str(temp_backup_dir)).create_backup(
            str(audio_file), callback=messages.append
        )

        assert backup_path is not None
        assert any("Creating backup" in msg for msg in messages)

    def test_create_backup_nonexistent_file(self, temp_backup_dir):
        """Test backup creation with nonexistent file."""
        manager = BackupManager(str(temp_backup_dir))

        assert manager.create_backup("/nonexistent/song.mp3") is None

    def test_cleanup_old_backups(self, audio_file, temp_backup_dir):
        """Test that only max_backups backups are kept, newest first."""
        manager = BackupManager(str(temp_backup_dir))
        paths = []
        for i in range(4):
            audio_file.write_bytes(f"version {i}".encode())
            paths.append(manager.create_backup(str(audio_file), max_backups=2))

        backups = manager.list_backups(str(audio_file))
        assert len(backups) == 2
        assert [b["path"] for b in backups] == [paths[3], paths[2]]

    def test_cleanup_only_touches_same_file(self, audio_file, temp_backup_dir):
        """Test that backups of other files are not pruned."""
        other = audio_file.parent / "other.mp3"
        other.write_bytes(b"other")
        manager = BackupManager(str(temp_backup_dir))

        manager.create_backup(str(other))
        for _ in range(3):
            manager.create_backup(str(audio_file), max_backups=1)

        assert len(manager.list_backups(str(other))) == 1
        assert len(manager.list_backups(str(audio_file))) == 1

    def test_cleanup_ignores_files_sharing_the_name_prefix(self, audio_file, temp_backup_dir):
        """Test that backups of 'song.mp3.x.mp3' are not taken for backups of 'song.mp3'."""
        longer = audio_file.parent / "song.mp3.x.mp3"
        longer.write_bytes(b"longer")
        manager = BackupManager(str(temp_backup_dir))
        for _ in range(2):
            manager.create_backup(str(longer), max_backups=5)

        backup_path = manager.create_backup(str(audio_file), max_backups=2)

        assert backup_path is not None
        assert Path(backup_path).exists()
        assert [b["path"] for b in manager.list_backups(str(audio_file))] == [backup_path]
        assert len(manager.list_backups(str(longer))) == 2

    def test_cleanup_with_glob_characters_in_name(self, tmp_path, temp_backup_dir):
        """Test that names like 'Track [Remix].mp3' are matched literally."""
        audio_file = tmp_path / "Track [Remix].mp3"
        audio_file.write_bytes(b"remix")
        manager = BackupManager(str(temp_backup_dir))

        for _ in range(4):
            manager.create_backup(str(audio_file), max_backups=2)

        assert len(list(temp_backup_dir.iterdir())) == 2
        assert len(manager.list_backups(str(audio_file))) == 2

    def test_list_backups_skips_unrelated_files(self, audio_file, temp_backup_dir):
        """Test that only '<name>.<timestamp>.bak' files count as backups."""
        (temp_backup_dir / "song.mp3.notes.bak").write_bytes(b"")
        (temp_backup_dir / "song.mp3.20240101_000000_000000.bak.tmp").write_bytes(b"")
        backup_path = BackupManager(str(temp_backup_dir)).create_backup(str(audio_file))

        backups = BackupManager(str(temp_backup_dir)).list_backups(str(audio_file))

        assert [b["path"] for b in backups] == [backup_path]

    def test_list_backups_empty(self, audio_file, temp_backup_dir):
        assert BackupManager(str(temp_backup_dir)).list_backups(str(audio_file)) == []

    def test_restore_backup(self, audio_file, temp_backup_dir):
        """Test restoring a backup over a changed file."""
        manager = BackupManager(str(temp_backup_dir))
        backup_path = manager.create_backup(str(audio_file))
        audio_file.write_bytes(b"changed")

        assert manager.restore_backup(backup_path, str(audio_file)) is True
        assert audio_file.read_bytes() == b"fake mp3 data"

    def test_restore_missing_backup(self, audio_file, temp_backup_dir):
        manager = BackupManager(str(temp_backup_dir))
        assert manager.restore_backup("/nonexistent.bak", str(audio_file)) is False


def test_create_backup_function(audio_file, temp_backup_dir):
    """Test the convenience function."""
    backup_path = create_backup(str(audio_file), str(temp_backup_dir))
    assert backup_path is not None
    assert Path(backup_path).exists()
