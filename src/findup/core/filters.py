"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
Acceptance filter applied to every candidate before it reaches the engine.
"""

from typing import Optional

from findup.core.interfaces import AcceptanceFilter
from findup.core.models import Candidate, FindupParams, SizeOperator


class AcceptanceFilterImpl(AcceptanceFilter):
    """
    Pure predicate over (size, depth).

    Attributes:
        min_depth: Candidates shallower than this are rejected
        max_depth: Candidates deeper than this are rejected (None = unbounded)
        size_operator: Comparison used by the size gate
        size_threshold: Threshold in bytes for the size gate
    """

    def __init__(
        self,
        min_depth: int = 0,
        max_depth: Optional[int] = None,
        size_operator: SizeOperator = SizeOperator.GREATER_OR_EQUAL,
        size_threshold: int = 0,
    ):
        self.min_depth = min_depth
        self.max_depth = max_depth
        self.size_operator = size_operator
        self.size_threshold = size_threshold

    @classmethod
    def from_params(cls, params: FindupParams) -> 'AcceptanceFilterImpl':
        return cls(
            min_depth=params.min_depth,
            max_depth=params.max_depth,
            size_operator=params.size_operator,
            size_threshold=params.size_threshold,
        )

    def accept(self, candidate: Candidate) -> bool:
        return self._depth_passes(candidate.depth) and self._size_passes(candidate.size)

    def _depth_passes(self, depth: int) -> bool:
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def _size_passes(self, size: int) -> bool:
        return self.size_operator.compare(size, self.size_threshold)

    def __repr__(self):
        return (f"<AcceptanceFilter depth=[{self.min_depth}, {self.max_depth}], "
                f"size {self.size_operator.display_name} {self.size_threshold}>")
