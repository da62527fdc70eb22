from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from minpq.eval.workload import Operation, replay
from minpq.min_pq import MinPQ
from minpq.optimized_heap_min_pq import OptimizedHeapMinPQ
from minpq.unsorted_array_min_pq import UnsortedArrayMinPQ

QueueFactory = Callable[[], MinPQ]


@dataclass
class ComparisonResult:
    reference: str
    candidate: str
    operations: int
    removals: int
    first_mismatch: Optional[int]
    same_removed_elements: Optional[bool]

    @property
    def matches(self) -> bool:
        return self.first_mismatch is None and self.same_removed_elements is not False


def compare_implementations(
    operations: Sequence[Operation],
    reference_factory: QueueFactory = UnsortedArrayMinPQ,
    candidate_factory: QueueFactory = OptimizedHeapMinPQ,
    compare_elements: bool = True,
) -> ComparisonResult:
    """
    Replays the operations on a fresh queue of each implementation.
    The removed priorities have to agree at every step.
    With compare_elements, the removed elements also have to agree as multisets,
    which only holds if the workload produced no ties.
    """
    reference = reference_factory()
    candidate = candidate_factory()
    reference_removed = replay(reference, operations)
    candidate_removed = replay(candidate, operations)

    first_mismatch = None
    for step, ((_, ref_priority), (_, cand_priority)) in enumerate(
        zip(reference_removed, candidate_removed)
    ):
        if ref_priority != cand_priority:
            first_mismatch = step
            break
    if first_mismatch is None and len(reference_removed) != len(candidate_removed):
        first_mismatch = min(len(reference_removed), len(candidate_removed))

    same_removed_elements = None
    if compare_elements:
        same_removed_elements = Counter(e for e, _ in reference_removed) == Counter(
            e for e, _ in candidate_removed
        )
    return ComparisonResult(
        reference=type(reference).__name__,
        candidate=type(candidate).__name__,
        operations=len(operations),
        removals=len(reference_removed),
        first_mismatch=first_mismatch,
        same_removed_elements=same_removed_elements,
    )
