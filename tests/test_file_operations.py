"""Tests for filesystem collaborators."""

import os
import pwd

import pytest

from lstable import identity
from lstable.file_operations import path_exists, read_directory
from lstable.identity import lookup_user_name
from lstable.models import EntryMetadata, FileType


class TestPathExists:
    """Test the existence check."""

    def test_existing(self, tmp_path):
        assert path_exists(tmp_path)

    def test_missing(self, tmp_path):
        assert not path_exists(tmp_path / "nope")

    def test_component_below_a_file_raises(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(NotADirectoryError):
            path_exists(target / "child")

    def test_check_failure_raises(self, monkeypatch):
        def denied(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(os, "stat", denied)
        with pytest.raises(OSError):
            path_exists("/srv/private/data")


class TestLookupUserName:
    """Test POSIX user lookup."""

    def test_current_user(self):
        uid = os.getuid()
        assert lookup_user_name(uid) == pwd.getpwuid(uid).pw_name

    def test_unknown_uid(self, monkeypatch):
        def missing(uid):
            raise KeyError(uid)

        monkeypatch.setattr(identity.pwd, "getpwuid", missing)
        assert lookup_user_name(123456) is None


class TestEntryMetadata:
    """Test stat snapshots."""

    def test_from_stat(self, tmp_path):
        target = tmp_path / "a.txt"
        target.write_bytes(b"12345")
        target.chmod(0o640)

        metadata = EntryMetadata.from_stat(os.stat(target))

        assert not metadata.is_dir
        assert metadata.length == 5
        assert metadata.mode == 0o640
        assert metadata.uid == os.getuid()
        assert metadata.modified == os.stat(target).st_mtime


class TestReadDirectory:
    """Test directory listing."""

    def test_sample_directory(self, sample_dir, fake_lookup):
        records = read_directory(sample_dir, fake_lookup)
        by_name = {record.name.plain: record for record in records}

        assert len(records) == 3
        assert by_name["small.txt"].length.plain == "500"
        assert by_name["medium.bin"].length.plain == "2k"
        assert by_name["subdir"].length.plain == "-"

        assert by_name["small.txt"].permissions.plain == ".rw-r--r--"
        assert by_name["medium.bin"].permissions.plain == ".rw-------"
        assert by_name["subdir"].permissions.plain == "drwxr-xr-x"

        assert by_name["small.txt"].e_type is FileType.FILE
        assert by_name["medium.bin"].e_type is FileType.FILE
        assert by_name["subdir"].e_type is FileType.DIR

        assert all(record.owner == "alice" for record in records)
        assert all(record.modified == "14 Jun 09:32" for record in records)

    def test_follows_enumeration_order(self, sample_dir, fake_lookup):
        expected = [entry.name for entry in os.scandir(sample_dir)]
        records = read_directory(sample_dir, fake_lookup)
        assert [record.name.plain for record in records] == expected

    def test_empty_directory(self, tmp_path):
        assert read_directory(tmp_path) == []

    def test_unreadable_directory_is_empty(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("not a directory")
        assert read_directory(target) == []

    def test_skips_entries_without_metadata(self, tmp_path, fake_lookup):
        (tmp_path / "kept.txt").write_text("x")
        os.symlink(tmp_path / "missing", tmp_path / "dangling")

        records = read_directory(tmp_path, fake_lookup)

        assert [record.name.plain for record in records] == ["kept.txt"]
