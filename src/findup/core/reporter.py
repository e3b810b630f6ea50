"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reporter.py
Reads the final hash index and yields the groups that are real duplicates.
"""

from typing import Dict, Iterator

from findup.core.indices import HashIndex
from findup.core.models import DuplicateGroup


class Reporter:
    """
    Lazy, read-only view over a finished HashIndex.
    report() can be called again as long as the index is kept.
    """

    def __init__(self, hash_index: HashIndex):
        self.hash_index = hash_index

    def report(self) -> Iterator[DuplicateGroup]:
        """Yields every group with two or more files, in order of first digest."""
        for digest, files in self.hash_index.groups():
            if len(files) < 2:
                continue
            yield DuplicateGroup(digest=digest, size=files[0].size, files=files)

    @property
    def has_duplicates(self) -> bool:
        return next(self.report(), None) is not None

    def summary(self) -> Dict[str, int]:
        groups = 0
        files = 0
        wasted = 0
        for group in self.report():
            groups += 1
            files += group.duplicate_count
            wasted += group.size * (group.duplicate_count - 1)
        return {"groups": groups, "files": files, "wasted_bytes": wasted}
