"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` so that
scanners, digest providers and filters can be swapped in tests.

Key Components:
---------------
- HashAlgorithm: Factory for streaming hash accumulators (SHA-1, xxHash128).
- DigestProvider: Computes the content digest of a file, reporting failures as values.
- FileScanner: Lazily walks the roots and yields depth-annotated entries.
- AcceptanceFilter: Decides whether a candidate enters the engine.
- Engine: Classifies candidates one at a time.
"""

from typing import Protocol, Iterator
from findup.core.models import Candidate, DigestResult, ScanEntry


# ===== Interfaces =====

class HashAccumulator(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions without affecting the
    classification logic.
    """
    name: str
    digest_size: int

    def new(self) -> HashAccumulator:
        """Returns a fresh accumulator for one file."""
        ...


class DigestProvider(Protocol):
    """Interface for computing a whole-file content digest."""
    def digest(self, path: str) -> DigestResult:
        """
        Returns DigestSuccess with the digest, or DigestFailure when the file
        vanished or could not be read. Never raises for I/O problems.
        """
        ...


class FileScanner(Protocol):
    """
    Interface for walking file trees.

    Methods:
        scan: Lazily yields every entry below the configured roots.
    """
    def scan(self) -> Iterator[ScanEntry]:
        ...


class AcceptanceFilter(Protocol):
    def accept(self, candidate: Candidate) -> bool:
        """True if the candidate passes the depth and size gates."""
        ...


class Engine(Protocol):
    """
    Interface for the classification engine.

    Called once per accepted candidate, in traversal order.
    """
    def consider(self, candidate: Candidate) -> None:
        ...

    def close(self) -> None:
        """Waits for any outstanding work. The engine state is final afterwards."""
        ...
