from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from minpq.min_pq import MinPQ
from minpq.optimized_heap_min_pq import OptimizedHeapMinPQ
from minpq.unsorted_array_min_pq import UnsortedArrayMinPQ


class OperationKind(Enum):
    ADD = 0
    REMOVE_MIN = 1
    CHANGE_PRIORITY = 2


@dataclass
class Operation:
    kind: OperationKind
    element: Optional[int] = None
    priority: Optional[float] = None


def apply_operation(
    queue: MinPQ, operation: Operation, with_priority: bool = True
) -> Optional[Tuple[object, Optional[float]]]:
    """
    Applies the operation to the queue.
    Returns the removed (element, priority) pair for REMOVE_MIN and None otherwise.
    Without with_priority the pair holds None instead of the priority,
    which saves the extra lookup of the minimal priority.
    """
    if operation.kind == OperationKind.ADD:
        queue.add(operation.element, operation.priority)
    elif operation.kind == OperationKind.REMOVE_MIN:
        priority = queue.min_priority() if with_priority else None
        return queue.remove_min(), priority
    elif operation.kind == OperationKind.CHANGE_PRIORITY:
        queue.change_priority(operation.element, operation.priority)
    else:
        raise ValueError(f"Unknown operation kind {operation.kind}.")
    return None


def replay(
    queue: MinPQ, operations: Sequence[Operation], with_priorities: bool = True
) -> List[Tuple[object, Optional[float]]]:
    removed = []
    for operation in operations:
        result = apply_operation(queue, operation, with_priorities)
        if result is not None:
            removed.append(result)
    return removed


class _SharedMembers:
    """
    Keeps the elements enqueued in every tracked queue in a list with O(1) removal,
    so that random change targets can be drawn from it.
    """

    def __init__(self, num_trackers: int):
        self.num_trackers = num_trackers
        self.count: Dict[int, int] = {}
        self.members: List[int] = []
        self.position: Dict[int, int] = {}

    def added(self, element: int):
        self.count[element] = self.num_trackers
        self.position[element] = len(self.members)
        self.members.append(element)

    def removed(self, element: int):
        if self.count[element] == self.num_trackers:
            pos = self.position.pop(element)
            last = self.members.pop()
            if pos < len(self.members):
                self.members[pos] = last
                self.position[last] = pos
        self.count[element] -= 1
        if self.count[element] == 0:
            del self.count[element]


def generate_workload(
    num_operations: int,
    seed: int = 0,
    weights: Tuple[float, float, float] = (0.5, 0.3, 0.2),
    max_priority: float = 1000.0,
    integer_priorities: bool = False,
    prefill: int = 0,
    trackers: Optional[List[MinPQ]] = None,
) -> List[Operation]:
    """
    Generates prefill ADD operations followed by num_operations random operations
    that never violate the queue contract: elements are only added once,
    REMOVE_MIN is never issued on an empty queue and CHANGE_PRIORITY only targets enqueued elements.

    @param weights: Relative frequencies of ADD, REMOVE_MIN and CHANGE_PRIORITY.
    @param integer_priorities: Draw integral priorities, which produces ties.
    @param trackers: Empty queues the workload is applied to while it is generated.
        CHANGE_PRIORITY only targets elements enqueued in all of them, so the workload stays valid
        for every tracked implementation even if they break ties differently.
        Defaults to one queue of each implementation.
    """
    if num_operations < 0 or prefill < 0:
        raise ValueError("The number of operations must be non-negative.")
    weights_arr = np.asarray(weights, dtype=float)
    if weights_arr.shape != (3,) or np.any(weights_arr < 0) or weights_arr.sum() <= 0:
        raise ValueError(f"Invalid operation weights {weights}.")
    probabilities = weights_arr / weights_arr.sum()

    if trackers is None:
        trackers = [UnsortedArrayMinPQ(), OptimizedHeapMinPQ()]
    rng = np.random.default_rng(seed)
    shared = _SharedMembers(len(trackers))
    next_element = 0

    def draw_priority() -> float:
        if integer_priorities:
            return float(rng.integers(0, int(max_priority) + 1))
        return float(rng.uniform(0.0, max_priority))

    operations: List[Operation] = []
    for step in range(prefill + num_operations):
        if step < prefill or trackers[0].is_empty():
            kind = OperationKind.ADD
        else:
            kind = OperationKind(int(rng.choice(3, p=probabilities)))
            if kind == OperationKind.CHANGE_PRIORITY and len(shared.members) == 0:
                kind = OperationKind.REMOVE_MIN

        if kind == OperationKind.ADD:
            operation = Operation(kind, next_element, draw_priority())
            next_element += 1
            shared.added(operation.element)
        elif kind == OperationKind.REMOVE_MIN:
            operation = Operation(kind)
        else:
            target = shared.members[int(rng.integers(len(shared.members)))]
            operation = Operation(kind, target, draw_priority())

        for tracker in trackers:
            result = apply_operation(tracker, operation, with_priority=False)
            if result is not None:
                shared.removed(result[0])
        operations.append(operation)
    return operations
