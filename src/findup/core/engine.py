"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

engine.py
Classification engine: decides, one candidate at a time, whether a file has to
be digested and files it into the hash index.

    - first file of a size       : remembered, never digested on its own
    - second file of that size   : the remembered file and the new one are digested
    - any later file of the size : digested directly

Two implementations share the same claim logic:
    - ClassificationEngine         : digests synchronously on the calling thread
    - ParallelClassificationEngine : digests on a bounded thread pool
"""
import itertools
import logging
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import List, Optional

from findup.core.indices import HashIndex, SizeIndex
from findup.core.interfaces import DigestProvider, Engine
from findup.core.models import Candidate, DigestFailure

logger = logging.getLogger(__name__)


@dataclass
class EngineState:
    """Everything the engine mutates during a run. Owned by the caller."""
    size_index: SizeIndex = field(default_factory=SizeIndex)
    hash_index: HashIndex = field(default_factory=HashIndex)


# =============================
# Main Engine Class
# =============================
class ClassificationEngine(Engine):
    """
    Sequential engine. Digesting blocks the caller until the file is fully read.
    """

    def __init__(self, digest_provider: DigestProvider, state: Optional[EngineState] = None):
        self.digest_provider = digest_provider
        self.state = state or EngineState()
        self._sequence = itertools.count()
        self._dropped_lock = threading.Lock()
        self.dropped: List[DigestFailure] = []

    def consider(self, candidate: Candidate) -> None:
        """
        Classifies one accepted candidate. Called in traversal order.
        """
        for target in self.state.size_index.claim(candidate):
            self._schedule(target, next(self._sequence))

    def close(self) -> None:
        """Nothing is pending in the sequential engine."""

    def _schedule(self, candidate: Candidate, sequence: int) -> None:
        self._digest_and_insert(candidate, sequence)

    def _digest_and_insert(self, candidate: Candidate, sequence: int) -> None:
        result = self.digest_provider.digest(candidate.path)
        if isinstance(result, DigestFailure):
            logger.debug(f"Dropping {candidate.path}: {result.reason}")
            with self._dropped_lock:
                self.dropped.append(result)
            return
        self.state.hash_index.add(result.digest, candidate, sequence)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ParallelClassificationEngine(ClassificationEngine):
    """
    Size decisions stay on the calling thread; digesting runs on a thread pool.
    Sequence numbers are taken at claim time, so groups come out in the same
    order as with the sequential engine.
    """

    # Outstanding digests allowed per worker before consider() blocks
    max_pending_per_job = 256

    def __init__(
        self,
        digest_provider: DigestProvider,
        jobs: int,
        state: Optional[EngineState] = None,
    ):
        super().__init__(digest_provider, state)
        if jobs < 1:
            raise ValueError("Number of jobs must be at least 1")
        self.jobs = jobs
        self._executor = ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="findup-digest")
        self._pending: List[Future] = []
        self._closed = False

    def _schedule(self, candidate: Candidate, sequence: int) -> None:
        if self._closed:
            raise RuntimeError("Engine is closed")
        self._pending.append(self._executor.submit(self._digest_and_insert, candidate, sequence))
        self._throttle()

    def _throttle(self) -> None:
        """Blocks until the backlog is below the limit, re-raising anything a worker raised."""
        limit = self.jobs * self.max_pending_per_job
        while len(self._pending) >= limit:
            done, not_done = wait(self._pending, return_when=FIRST_COMPLETED)
            for future in done:
                future.result()
            self._pending = list(not_done)

    def close(self) -> None:
        """Waits for all outstanding digests and shuts the pool down."""
        if self._closed:
            return
        self._closed = True
        try:
            for future in self._pending:
                future.result()
        finally:
            self._pending = []
            self._executor.shutdown(wait=True)


def create_engine(
    digest_provider: DigestProvider,
    jobs: int = 1,
    state: Optional[EngineState] = None,
) -> ClassificationEngine:
    """Returns the sequential engine for one job, the parallel one otherwise."""
    if jobs <= 1:
        return ClassificationEngine(digest_provider, state)
    return ParallelClassificationEngine(digest_provider, jobs, state)
