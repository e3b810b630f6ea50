"""
Unit tests for FileScannerImpl.
Verifies depth annotation, max depth, symlink handling, special files and ordering.
"""
import os
import sys
import pytest
from pathlib import Path
from findup.core.scanner import FileScannerImpl


def entries_by_path(scanner):
    return {entry.path: entry for entry in scanner.scan()}


class TestFileScannerImpl:
    """Test traversal output."""

    def test_depths(self, test_files, temp_dir):
        """Root is depth 0, its files depth 1, files in subdir depth 2."""
        entries = entries_by_path(FileScannerImpl([str(temp_dir)]))

        assert entries[str(temp_dir)].depth == 0
        assert entries[str(temp_dir)].is_dir
        assert entries[str(test_files["dup1_a"])].depth == 1
        assert entries[str(test_files["sub_dup"])].depth == 2
        assert entries[str(test_files["dup1_a"])].size == 1024
        assert entries[str(test_files["dup1_a"])].is_file

    def test_file_given_as_root(self, test_files):
        entries = list(FileScannerImpl([str(test_files["dup1_a"])]).scan())
        assert len(entries) == 1
        assert entries[0].depth == 0
        assert entries[0].is_file
        assert entries[0].size == 1024

    def test_depth_first_sorted_order(self, test_files, temp_dir):
        """Children are visited by name; subdirectories are entered where they sort."""
        names = [
            os.path.relpath(entry.path, temp_dir)
            for entry in FileScannerImpl([str(temp_dir)]).scan()
        ]
        assert names == [
            ".",
            "dup1_a.txt", "dup1_b.txt", "dup2_a.txt", "dup2_b.txt",
            "empty_a.txt", "empty_b.txt", "same_size.txt",
            "subdir", os.path.join("subdir", "dup_in_subdir.txt"),
            "unique1.txt", "unique2.txt",
        ]

    def test_max_depth_stops_descent(self, test_files, temp_dir):
        entries = entries_by_path(FileScannerImpl([str(temp_dir)], max_depth=1))
        assert str(test_files["dup1_a"]) in entries
        assert str(temp_dir / "subdir") in entries
        assert str(test_files["sub_dup"]) not in entries

    def test_max_depth_zero_yields_only_roots(self, test_files, temp_dir):
        entries = list(FileScannerImpl([str(temp_dir)], max_depth=0).scan())
        assert [e.path for e in entries] == [str(temp_dir)]

    def test_multiple_roots(self, test_files, temp_dir):
        scanner = FileScannerImpl([str(test_files["unique1"]), str(temp_dir / "subdir")])
        entries = list(scanner.scan())
        assert [e.path for e in entries] == [
            str(test_files["unique1"]),
            str(temp_dir / "subdir"),
            str(test_files["sub_dup"]),
        ]
        assert [e.depth for e in entries] == [0, 0, 1]

    def test_missing_root_is_skipped(self, temp_dir):
        assert list(FileScannerImpl([str(temp_dir / "nope")]).scan()) == []

    def test_does_not_descend_into_symlinked_dirs(self, temp_dir):
        """Symlinked directories are reported but never entered."""
        real = temp_dir / "real"
        real.mkdir()
        (real / "inside.txt").write_bytes(b"content")
        try:
            (temp_dir / "link").symlink_to(real, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        entries = entries_by_path(FileScannerImpl([str(temp_dir)]))
        link = entries[str(temp_dir / "link")]
        assert link.is_symlink
        assert not link.is_dir and not link.is_file
        assert str(temp_dir / "link" / "inside.txt") not in entries
        assert str(real / "inside.txt") in entries

    def test_symlinked_file_is_not_a_file_entry(self, temp_dir):
        real = temp_dir / "real.txt"
        real.write_bytes(b"content")
        try:
            (temp_dir / "link.txt").symlink_to(real)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        entries = entries_by_path(FileScannerImpl([str(temp_dir)]))
        assert entries[str(temp_dir / "link.txt")].is_symlink
        assert not entries[str(temp_dir / "link.txt")].is_file
        assert entries[str(real)].is_file

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_special_file_is_neither_file_nor_dir(self, temp_dir):
        fifo = temp_dir / "pipe"
        os.mkfifo(fifo)
        entry = entries_by_path(FileScannerImpl([str(temp_dir)]))[str(fifo)]
        assert not entry.is_file
        assert not entry.is_dir
        assert not entry.is_symlink

    def test_scan_is_lazy(self, test_files, temp_dir):
        iterator = FileScannerImpl([str(temp_dir)]).scan()
        first = next(iterator)
        assert first.path == str(temp_dir)
