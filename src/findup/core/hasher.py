"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content digests with pluggable hash algorithms.

The DigestProviderImpl streams each file in fixed-size chunks and returns a
DigestResult instead of raising, so a file that vanished or became unreadable
after it was discovered is simply dropped by the engine.
"""

import hashlib
import logging
import threading
import xxhash

from findup.core.models import DigestFailure, DigestResult, DigestSuccess, HashAlgorithmName
from findup.core.interfaces import DigestProvider, HashAlgorithm, HashAccumulator

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha1AlgorithmImpl(HashAlgorithm):
    name = "sha1"
    digest_size = 20

    def new(self) -> HashAccumulator:
        return hashlib.sha1()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh128"
    digest_size = 16

    def new(self) -> HashAccumulator:
        return xxhash.xxh128()


ALGORITHMS = {
    HashAlgorithmName.SHA1: Sha1AlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    return ALGORITHMS[name]()


class DigestProviderImpl(DigestProvider):
    """
    A digest provider that supports any algorithm via the HashAlgorithm interface.
    Safe to call from several worker threads at once.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha1AlgorithmImpl()
        self.chunk_size = chunk_size
        self._lock = threading.Lock()
        self.digest_count = 0
        self.failure_count = 0

    def digest(self, path: str) -> DigestResult:
        """Reads the whole file and returns its digest, or a DigestFailure."""
        with self._lock:
            self.digest_count += 1

        accumulator = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    accumulator.update(chunk)
        except OSError as e:
            with self._lock:
                self.failure_count += 1
            logger.debug(f"Could not digest {path}: {e}")
            return DigestFailure(path=path, reason=e.strerror or str(e))

        return DigestSuccess(accumulator.digest())
