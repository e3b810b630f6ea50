"""
Unit tests for DigestProviderImpl with SHA-1 and xxHash128.
Verifies streamed whole-file digests and failure results for unreadable files.
"""
import hashlib
import os
import sys
import pytest
from pathlib import Path
from findup.core.hasher import (
    DigestProviderImpl, Sha1AlgorithmImpl, XXHashAlgorithmImpl, algorithm_for)
from findup.core.models import DigestFailure, DigestSuccess, HashAlgorithmName


class TestDigestProviderImpl:
    """Test digest computation with chunked reading."""

    def test_sha1_digest_is_20_bytes_and_matches_hashlib(self, tmp_path):
        content = b"test content " * 1000
        path = tmp_path / "a.bin"
        path.write_bytes(content)

        result = DigestProviderImpl(Sha1AlgorithmImpl()).digest(str(path))

        assert isinstance(result, DigestSuccess)
        assert result.ok
        assert len(result.digest) == 20
        assert result.digest == hashlib.sha1(content).digest()

    def test_chunk_size_does_not_change_digest(self, tmp_path):
        """Chunk size is a performance knob only."""
        content = os.urandom(10_000)
        path = tmp_path / "a.bin"
        path.write_bytes(content)

        digests = {
            DigestProviderImpl(chunk_size=size).digest(str(path)).digest
            for size in (1, 7, 4096, 1024 * 1024)
        }
        assert len(digests) == 1

    def test_different_content_produces_different_digests(self, tmp_path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"A" * 1024)
        b.write_bytes(b"B" * 1024)

        provider = DigestProviderImpl()
        assert provider.digest(str(a)).digest != provider.digest(str(b)).digest

    def test_empty_file_has_digest(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")
        result = DigestProviderImpl().digest(str(path))
        assert result.digest == hashlib.sha1(b"").digest()

    def test_xxhash_algorithm(self, tmp_path):
        path = tmp_path / "a"
        path.write_bytes(b"hello" * 100)
        result = DigestProviderImpl(algorithm_for(HashAlgorithmName.XXH128)).digest(str(path))
        assert len(result.digest) == XXHashAlgorithmImpl.digest_size == 16

    def test_deleted_file_returns_failure(self, tmp_path):
        """A vanished file must yield a DigestFailure, not an exception."""
        path = tmp_path / "deleted.txt"
        path.write_bytes(b"content")
        path.unlink()

        provider = DigestProviderImpl()
        result = provider.digest(str(path))

        assert isinstance(result, DigestFailure)
        assert not result.ok
        assert result.path == str(path)
        assert provider.digest_count == 1
        assert provider.failure_count == 1

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_unreadable_file_returns_failure(self, tmp_path):
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            pytest.skip("root can read any file")
        path = tmp_path / "secret"
        path.write_bytes(b"content")
        path.chmod(0)
        try:
            assert isinstance(DigestProviderImpl().digest(str(path)), DigestFailure)
        finally:
            path.chmod(0o644)

    def test_directory_returns_failure(self, tmp_path):
        assert isinstance(DigestProviderImpl().digest(str(tmp_path)), DigestFailure)

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValueError):
            DigestProviderImpl(chunk_size=0)
