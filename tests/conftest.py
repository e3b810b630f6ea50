"""
Shared fixtures for findup tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
import threading
from pathlib import Path
from typing import Dict, List
import sys

# Add src/ to sys.path so 'findup' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from findup.core.hasher import DigestProviderImpl
from findup.core.models import DigestResult


class RecordingDigestProvider(DigestProviderImpl):
    """Real digest provider that remembers which paths it was asked to digest."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: List[str] = []
        self._calls_lock = threading.Lock()

    def digest(self, path: str) -> DigestResult:
        with self._calls_lock:
            self.calls.append(path)
        return super().digest(path)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recording_provider():
    return RecordingDigestProvider()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - 2 identical files of 1KB (duplicates) + 1 more copy in subdir/
    - 2 identical files of 2KB (duplicates)
    - 1 file of 2KB with different content (same size, not a duplicate)
    - 2 files with unique sizes (never digested)
    - 2 empty files (duplicates of each other)
    """
    files = {}

    # Duplicate set #1 (1KB of 'A'), sorted names: dup1_a, dup1_b
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as dup2, different content
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"Z" * 2048)

    # Unique sizes
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Empty files
    files["empty_a"] = temp_dir / "empty_a.txt"
    files["empty_a"].write_bytes(b"")
    files["empty_b"] = temp_dir / "empty_b.txt"
    files["empty_b"].write_bytes(b"")

    # Subdirectory with one more copy of content_a
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
