"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements lazy, depth-first traversal of one or more roots.
Features:
- Yields every entry as a ScanEntry tagged with its depth (roots are depth 0)
- Never descends past max_depth
- Never follows symbolic links into directories
- Directory entries are visited in sorted order so runs are reproducible
"""

import os
import stat
import logging
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

# Local imports
from findup.core.models import ScanEntry
from findup.core.interfaces import FileScanner


class FileScannerImpl(FileScanner):
    """
    Walks the given roots and yields ScanEntry records.

    Attributes:
        roots: Files or directories given directly (depth 0)
        max_depth: Deepest level to produce entries for (None = unbounded)
    """

    def __init__(self, roots: List[str], max_depth: Optional[int] = None):
        self.roots = list(roots)
        self.max_depth = max_depth

    def scan(self) -> Iterator[ScanEntry]:
        """
        Generator over all entries below every root, depth-first.
        """
        for root in self.roots:
            logger.debug(f"Scanning root: {root}")
            yield from self._scan_root(root)

    def _scan_root(self, root: str) -> Iterator[ScanEntry]:
        # Symlinks given directly are followed, like any path typed by the user
        try:
            st = os.stat(root)
        except OSError as e:
            logger.warning(f"Cannot access {root}: {e}")
            return

        entry = self._entry_from_stat(root, st, depth=0, is_symlink=os.path.islink(root))
        yield entry
        if entry.is_dir and self._may_descend(0):
            yield from self._scan_dir(root, 0)

    def _scan_dir(self, dir_path: str, depth: int) -> Iterator[ScanEntry]:
        try:
            with os.scandir(dir_path) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning(f"Skipping unreadable directory {dir_path}: {e}")
            return

        child_depth = depth + 1
        for child in children:
            try:
                if child.is_symlink():
                    yield ScanEntry(
                        path=child.path, size=0, depth=child_depth,
                        is_file=False, is_dir=False, is_symlink=True
                    )
                    continue
                st = child.stat(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Could not stat {child.path}: {e}")
                continue

            entry = self._entry_from_stat(child.path, st, child_depth)
            yield entry
            if entry.is_dir and self._may_descend(child_depth):
                yield from self._scan_dir(child.path, child_depth)

    def _may_descend(self, depth: int) -> bool:
        """True if the children of a directory at this depth are within max_depth."""
        return self.max_depth is None or depth + 1 <= self.max_depth

    @staticmethod
    def _entry_from_stat(path: str, st: os.stat_result, depth: int, is_symlink: bool = False) -> ScanEntry:
        is_file = stat.S_ISREG(st.st_mode)
        return ScanEntry(
            path=path,
            size=st.st_size if is_file else 0,
            depth=depth,
            is_file=is_file,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_symlink=is_symlink,
        )
