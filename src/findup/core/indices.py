"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/indices.py
Size-keyed and digest-keyed indices shared by the classification engine.

SizeIndex holds one bucket per distinct size. A bucket starts as UniqueSize
(the first file is retained but not digested) and flips to HashedSize exactly
once, when a second file of that size arrives. The flip happens under a
per-size lock, so the first file is handed out for digesting only once even
if several threads claim the same size.

HashIndex accumulates candidates per digest. Every entry carries the sequence
number under which its digest was requested, and groups are read back in that
order, which keeps the output deterministic when digests finish out of order.
"""

import threading
from collections import defaultdict
from typing import Dict, Hashable, Iterator, List, Tuple

from findup.core.models import Candidate, SizeBucket, UniqueSize, HashedSize, HASHED


class KeyedLocks:
    """One lock per key, created on first use."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.Lock] = {}

    def get(self, key: Hashable) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock


class SizeIndex:
    def __init__(self):
        self._buckets: Dict[int, SizeBucket] = {}
        self._locks = KeyedLocks()

    def claim(self, candidate: Candidate) -> List[Candidate]:
        """
        Records the candidate under its size and returns the candidates that
        must now be digested, in order:
            - []                   first file of this size
            - [first, candidate]   second file of this size
            - [candidate]          any later file of this size
        """
        size = candidate.size
        with self._locks.get(size):
            bucket = self._buckets.get(size)
            if bucket is None:
                self._buckets[size] = UniqueSize(candidate)
                return []
            if isinstance(bucket, UniqueSize):
                self._buckets[size] = HASHED
                return [bucket.first, candidate]
            return [candidate]

    def bucket(self, size: int) -> SizeBucket:
        return self._buckets.get(size)

    def is_hashed(self, size: int) -> bool:
        return isinstance(self._buckets.get(size), HashedSize)

    def __contains__(self, size: int) -> bool:
        return size in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)


class HashIndex:
    def __init__(self):
        self._groups: Dict[bytes, List[Tuple[int, Candidate]]] = defaultdict(list)
        self._locks = KeyedLocks()

    def add(self, digest: bytes, candidate: Candidate, sequence: int) -> None:
        with self._locks.get(digest):
            self._groups[digest].append((sequence, candidate))

    def groups(self) -> Iterator[Tuple[bytes, List[Candidate]]]:
        """
        Yields (digest, files) in order of each group's earliest sequence number.
        Does not modify the index.
        """
        ordered = [sorted(entries, key=lambda e: e[0]) for entries in self._groups.values()]
        keyed = sorted(zip(self._groups.keys(), ordered), key=lambda item: item[1][0][0])
        for digest, entries in keyed:
            yield digest, [candidate for _, candidate in entries]

    def get(self, digest: bytes) -> List[Candidate]:
        entries = self._groups.get(digest, [])
        return [candidate for _, candidate in sorted(entries, key=lambda e: e[0])]

    def __contains__(self, digest: bytes) -> bool:
        return digest in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def candidate_count(self) -> int:
        return sum(len(entries) for entries in self._groups.values())
