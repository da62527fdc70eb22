from minpq.errors import (
    DuplicateElementError,
    ElementNotFoundError,
    EmptyQueueError,
    InvalidPriorityError,
    MinPQError,
)
from minpq.min_pq import MinPQ
from minpq.optimized_heap_min_pq import OptimizedHeapMinPQ
from minpq.priority_node import PriorityNode
from minpq.unsorted_array_min_pq import UnsortedArrayMinPQ

__all__ = [
    "DuplicateElementError",
    "ElementNotFoundError",
    "EmptyQueueError",
    "InvalidPriorityError",
    "MinPQ",
    "MinPQError",
    "OptimizedHeapMinPQ",
    "PriorityNode",
    "UnsortedArrayMinPQ",
]
