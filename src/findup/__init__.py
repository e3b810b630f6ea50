"""
findup — finds groups of byte-identical files in one or more directory trees.

Core features:
- Two-stage comparison: file size first, then a whole-file content digest
- Files with a unique size are never read
- Each file whose size collides is digested exactly once
- Depth limits and find-style size filters
- Optional parallel digesting with deterministic output
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("findup")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from findup.commands import FindDuplicatesCommand
from findup.core import (
    FindupParams, SizeOperator, HashAlgorithmName, Candidate, DuplicateGroup, ScanStats)
from findup.utils.convert_utils import ConvertUtils

__all__ = [
    "FindDuplicatesCommand",
    "FindupParams",
    "SizeOperator",
    "HashAlgorithmName",
    "Candidate",
    "DuplicateGroup",
    "ScanStats",
    "ConvertUtils",
    "__version__",
]
