"""
Core duplicate-detection engine: scanner, filter, hasher, indices, engine and reporter.

This package contains the performance-critical foundation of findup:
- FileScannerImpl: lazy depth-first traversal with depth limits, no symlink descent
- AcceptanceFilterImpl: depth and size gates applied to every candidate
- DigestProviderImpl + Sha1AlgorithmImpl / XXHashAlgorithmImpl: streamed whole-file digests
- SizeIndex / HashIndex: deferred hashing keyed by size, grouping keyed by digest
- ClassificationEngine / ParallelClassificationEngine: the per-candidate classifier
- Reporter: yields groups of two or more identical files

All components are pure Python with no UI dependencies.
"""

from .scanner import FileScannerImpl
from .filters import AcceptanceFilterImpl
from .hasher import DigestProviderImpl, Sha1AlgorithmImpl, XXHashAlgorithmImpl, algorithm_for
from .indices import SizeIndex, HashIndex
from .engine import ClassificationEngine, ParallelClassificationEngine, EngineState, create_engine
from .reporter import Reporter
from .models import (
    Candidate, ScanEntry, DuplicateGroup, FindupParams, ScanStats,
    SizeOperator, HashAlgorithmName, DigestSuccess, DigestFailure,
    UniqueSize, HashedSize)

__all__ = [
    "FileScannerImpl",
    "AcceptanceFilterImpl",
    "DigestProviderImpl",
    "Sha1AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "algorithm_for",
    "SizeIndex",
    "HashIndex",
    "ClassificationEngine",
    "ParallelClassificationEngine",
    "EngineState",
    "create_engine",
    "Reporter",
    "Candidate",
    "ScanEntry",
    "DuplicateGroup",
    "FindupParams",
    "ScanStats",
    "SizeOperator",
    "HashAlgorithmName",
    "DigestSuccess",
    "DigestFailure",
    "UniqueSize",
    "HashedSize",
]
