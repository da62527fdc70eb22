from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from minpq.errors import DuplicateElementError, ElementNotFoundError, EmptyQueueError
from minpq.min_pq import E, MinPQ
from minpq.priority_node import PriorityNode
from minpq.utilities.priorities import check_priority


class OptimizedHeapMinPQ(MinPQ[E]):
    """
    This is a binary min-heap with a change-priority operation.
    Next to the heap-ordered list of entries it keeps a dict from each element
    to the entry's position in the list, so that an element can be located in O(1).
    add, remove_min and change_priority take O(log n), everything else O(1).

    Invariant: self._heap[self._index[e]].element == e for every enqueued element e,
    and the keys of self._index are exactly the enqueued elements.
    All position changes go through _swap, which updates both structures.
    """

    _heap: List[PriorityNode[E]]
    _index: Dict[E, int]

    def __init__(self, initial: Optional[Iterable[Tuple[E, float]]] = None):
        self._heap = []
        self._index = {}
        if initial:
            batch = self._validate_batch(initial)
            self._heap = [PriorityNode(element, priority) for element, priority in batch]
            self._index = {node.element: i for i, node in enumerate(self._heap)}
            # Bottom-up heap construction in O(n)
            for i in reversed(range(len(self._heap) // 2)):
                self._sink(i)

    def add(self, element: E, priority: float):
        if element in self._index:
            raise DuplicateElementError(f"Element {element!r} is already enqueued.")
        node = PriorityNode(element, check_priority(priority))
        self._heap.append(node)
        self._index[element] = len(self._heap) - 1
        self._swim(len(self._heap) - 1)

    def contains(self, element: E) -> bool:
        return element in self._index

    def peek_min(self) -> E:
        if not self._heap:
            raise EmptyQueueError("The priority queue is empty.")
        return self._heap[0].element

    def remove_min(self) -> E:
        if not self._heap:
            raise EmptyQueueError("The priority queue is empty.")
        min_element = self._heap[0].element
        self._swap(0, len(self._heap) - 1)
        self._heap.pop()
        del self._index[min_element]
        if self._heap:
            self._sink(0)
        return min_element

    def change_priority(self, element: E, priority: float):
        priority = check_priority(priority)
        if element not in self._index:
            raise ElementNotFoundError(f"Element {element!r} is not enqueued.")
        pos = self._index[element]
        node = self._heap[pos]
        old_priority = node.priority
        node.priority = priority
        if priority < old_priority:
            self._swim(pos)
        elif priority > old_priority:
            self._sink(pos)

    def size(self) -> int:
        return len(self._heap)

    def priority_of(self, element: E, default: Optional[float] = None) -> Optional[float]:
        if element not in self._index:
            return default
        return self._heap[self._index[element]].priority

    def min_priority(self) -> float:
        if not self._heap:
            raise EmptyQueueError("Cannot get the minimal priority of an empty queue.")
        return self._heap[0].priority

    def is_valid(self) -> bool:
        """
        Checks the heap property and the consistency of the position index.
        """
        if len(self._index) != len(self._heap):
            return False
        for pos, node in enumerate(self._heap):
            if self._index.get(node.element) != pos:
                return False
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < len(self._heap) and self._heap[child].priority < node.priority:
                    return False
        return True

    def _nodes(self) -> List[PriorityNode[E]]:
        return self._heap

    def _swap(self, i: int, j: int):
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._index[self._heap[i].element] = i
        self._index[self._heap[j].element] = j

    def _swim(self, pos: int):
        # Move the entry at pos towards the root while it is smaller than its parent.
        while pos > 0:
            parent = (pos - 1) >> 1
            if self._heap[pos].priority < self._heap[parent].priority:
                self._swap(pos, parent)
                pos = parent
                continue
            break

    def _sink(self, pos: int):
        # Move the entry at pos towards the leaves while a child is smaller.
        end = len(self._heap)
        while True:
            left = 2 * pos + 1
            right = left + 1
            smallest = pos
            if left < end and self._heap[left].priority < self._heap[smallest].priority:
                smallest = left
            if right < end and self._heap[right].priority < self._heap[smallest].priority:
                smallest = right
            if smallest == pos:
                return
            self._swap(pos, smallest)
            pos = smallest
