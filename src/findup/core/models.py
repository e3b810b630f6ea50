"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for candidate files, size buckets, digest results and run configuration.
"""

from dataclasses import dataclass
from typing import List, Dict, Optional, Union
from enum import Enum
import time


# =============================
# Enums
# =============================

class SizeOperator(Enum):
    """
    Comparison applied by the size gate of the acceptance filter.
    """
    GREATER_OR_EQUAL = "+"
    LESS_OR_EQUAL = "-"
    EQUAL = "="

    @property
    def display_name(self) -> str:
        """Human-readable name for help and summaries."""
        mapping = {
            SizeOperator.GREATER_OR_EQUAL: "at least",
            SizeOperator.LESS_OR_EQUAL: "at most",
            SizeOperator.EQUAL: "exactly",
        }
        return mapping.get(self, self.value)

    def compare(self, size: int, threshold: int) -> bool:
        if self is SizeOperator.GREATER_OR_EQUAL:
            return size >= threshold
        if self is SizeOperator.LESS_OR_EQUAL:
            return size <= threshold
        return size == threshold

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    """Content digest used to confirm that same-sized files are identical."""
    SHA1 = "sha1"
    XXH128 = "xxh128"

    @property
    def description(self) -> str:
        mapping = {
            HashAlgorithmName.SHA1: "SHA-1, 20-byte cryptographic digest (default)",
            HashAlgorithmName.XXH128: "xxHash128, 16-byte non-cryptographic digest (faster)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class Candidate:
    """
    A regular file observed by traversal.
    Immutable once created; indices only hold references to it.
    """
    path: str
    size: int  # in bytes
    depth: int = 0

    def __post_init__(self):
        if self.size < 0:
            raise ValueError("Candidate size cannot be negative")
        if self.depth < 0:
            raise ValueError("Candidate depth cannot be negative")

    def __repr__(self):
        return f"<Candidate path={self.path}, size={self.size}, depth={self.depth}>"


@dataclass(frozen=True)
class ScanEntry:
    """One entry produced by the traversal, before it is turned into a Candidate."""
    path: str
    size: int
    depth: int
    is_file: bool
    is_dir: bool
    is_symlink: bool = False

    def to_candidate(self) -> Candidate:
        return Candidate(path=self.path, size=self.size, depth=self.depth)


# =============================
# Size buckets
# =============================

@dataclass(frozen=True)
class UniqueSize:
    """Only one file of this size has been seen so far; it has not been digested."""
    first: Candidate


@dataclass(frozen=True)
class HashedSize:
    """The first file of this size has already been handed over for digesting."""


SizeBucket = Union[UniqueSize, HashedSize]

HASHED = HashedSize()


# =============================
# Digest results
# =============================

@dataclass(frozen=True)
class DigestSuccess:
    digest: bytes

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class DigestFailure:
    """The file could not be read; the caller drops the candidate."""
    path: str
    reason: str

    @property
    def ok(self) -> bool:
        return False


DigestResult = Union[DigestSuccess, DigestFailure]


@dataclass
class DuplicateGroup:
    """
    Files sharing one content digest.
    Only groups with two or more files are reported as duplicates.
    """
    digest: bytes
    size: int
    files: List[Candidate]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def __repr__(self):
        return f"<DuplicateGroup digest={self.digest.hex()[:12]}, size={self.size}, count={len(self.files)}>"


class ScanStats:
    """
    Counters collected while a run is in progress.
    """
    def __init__(self):
        self.started_at: float = time.time()
        self.total_time: float = 0.0
        self.counters: Dict[str, int] = {
            "entries": 0,
            "ignored": 0,
            "accepted": 0,
            "rejected": 0,
            "digested": 0,
            "digest_failures": 0,
            "groups": 0,
            "duplicate_files": 0,
        }

    def increment(self, name: str, amount: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + amount

    def finish(self) -> None:
        self.total_time = time.time() - self.started_at

    def print_summary(self) -> str:
        labels = {
            "entries": "Entries seen",
            "ignored": "Ignored (special files, symlinks)",
            "accepted": "Candidates accepted",
            "rejected": "Candidates rejected by filters",
            "digested": "Files digested",
            "digest_failures": "Unreadable files skipped",
            "groups": "Duplicate groups",
            "duplicate_files": "Files in duplicate groups",
        }

        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
        ]
        for key, value in self.counters.items():
            lines.append(f"{labels.get(key, key)}: {value}")
        return "\n".join(lines)


"""
DTO for run parameters with built-in validation.
Interface-agnostic: the CLI builds it, the command consumes it.
"""
from findup.utils.convert_utils import ConvertUtils


@dataclass
class FindupParams:
    """Parameters for a duplicate search with validation."""
    roots: List[str]
    min_depth: int = 0
    max_depth: Optional[int] = None
    size_operator: SizeOperator = SizeOperator.GREATER_OR_EQUAL
    size_threshold: int = 0
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA1
    jobs: int = 1

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.roots:
            raise ValueError("At least one path must be given")

        if self.min_depth < 0:
            raise ValueError("Minimum depth cannot be negative")

        if self.max_depth is not None:
            if self.max_depth < 0:
                raise ValueError("Maximum depth cannot be negative")
            if self.max_depth < self.min_depth:
                raise ValueError("Maximum depth cannot be less than minimum depth")

        if self.size_threshold < 0:
            raise ValueError("Size threshold cannot be negative")

        if self.jobs < 1:
            raise ValueError("Number of jobs must be at least 1")

    @staticmethod
    def from_human_readable(
            roots: List[str],
            size_spec: str = "+0",
            min_depth: int = 0,
            max_depth: Optional[int] = None,
            algorithm: HashAlgorithmName = HashAlgorithmName.SHA1,
            jobs: int = 1,
    ) -> 'FindupParams':
        """
        Factory method to create params from a find-style size spec such as "-1k" or "+2M".
        """
        operator_symbol, threshold = ConvertUtils.parse_size_spec(size_spec)

        return FindupParams(
            roots=list(roots),
            min_depth=min_depth,
            max_depth=max_depth,
            size_operator=SizeOperator(operator_symbol),
            size_threshold=threshold,
            algorithm=algorithm,
            jobs=jobs,
        )
