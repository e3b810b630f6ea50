"""
Unified command orchestrator for a duplicate search.
This is the SINGLE source of truth for the workflow used by the CLI and by library callers.
"""
import logging
import os
from typing import Callable, List, Optional, Tuple

from findup.core.engine import EngineState, create_engine
from findup.core.filters import AcceptanceFilterImpl
from findup.core.hasher import DigestProviderImpl, algorithm_for
from findup.core.models import DuplicateGroup, FindupParams, ScanStats
from findup.core.reporter import Reporter
from findup.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


class FindDuplicatesCommand:
    """
    Orchestrates the whole search:
    1. Validate roots (configuration errors surface before any traversal)
    2. Stream scanner entries through the acceptance filter into the engine
    3. Drain the engine and hand the hash index to the Reporter

    Usage:
        params = FindupParams.from_human_readable(["~/Downloads"], size_spec="+1k")
        command = FindDuplicatesCommand()
        groups, stats = command.execute(params, progress_callback=printer)
    """

    def __init__(self):
        self.state: Optional[EngineState] = None
        self.reporter: Optional[Reporter] = None

    @staticmethod
    def validate_roots(roots: List[str]) -> None:
        """Raises ValueError if any root does not exist."""
        missing = [root for root in roots if not os.path.exists(root)]
        if missing:
            raise ValueError(f"Path not found: {', '.join(missing)}")

    def execute(
            self,
            params: FindupParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            ignored_callback: Optional[Callable[[str], None]] = None,
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Run a duplicate search with given parameters.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            ignored_callback: (path: str) -> None, called for each special file skipped.
                Without it those paths are logged as warnings.

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            ValueError: If a root path does not exist
        """
        self.validate_roots(params.roots)

        stats = ScanStats()
        scanner = FileScannerImpl(params.roots, max_depth=params.max_depth)
        acceptance = AcceptanceFilterImpl.from_params(params)
        provider = DigestProviderImpl(algorithm_for(params.algorithm))
        self.state = EngineState()

        logger.info(f"Searching {len(params.roots)} root(s), filter: {acceptance!r}")

        with create_engine(provider, jobs=params.jobs, state=self.state) as engine:
            for entry in scanner.scan():
                stats.increment("entries")

                if entry.is_dir:
                    continue
                if not entry.is_file:
                    stats.increment("ignored")
                    if entry.is_symlink:
                        logger.debug(f"Skipping symbolic link: {entry.path}")
                    elif ignored_callback:
                        ignored_callback(entry.path)
                    else:
                        logger.warning(f"Ignoring special file: {entry.path}")
                    continue

                candidate = entry.to_candidate()
                if not acceptance.accept(candidate):
                    stats.increment("rejected")
                    continue

                stats.increment("accepted")
                if progress_callback:
                    progress_callback("Comparing", stats.counters["accepted"], None)
                engine.consider(candidate)

        self.reporter = Reporter(self.state.hash_index)
        groups = list(self.reporter.report())

        stats.increment("digested", provider.digest_count - provider.failure_count)
        stats.increment("digest_failures", provider.failure_count)
        stats.increment("groups", len(groups))
        stats.increment("duplicate_files", sum(g.duplicate_count for g in groups))
        stats.finish()

        logger.info(f"Found {len(groups)} duplicate group(s) in {stats.total_time:.2f}s")
        return groups, stats
