from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from minpq.errors import DuplicateElementError, ElementNotFoundError, EmptyQueueError
from minpq.min_pq import E, MinPQ
from minpq.priority_node import PriorityNode
from minpq.utilities.priorities import arg_min_index, check_priority


class UnsortedArrayMinPQ(MinPQ[E]):
    """
    Stores the entries in a list in no particular order and scans the whole list
    on every query, so all operations take linear time.
    Among equal priorities the entry stored first wins.
    Useful as a reference for OptimizedHeapMinPQ and for very small queues.
    """

    _nodes_list: List[PriorityNode[E]]

    def __init__(self, initial: Optional[Iterable[Tuple[E, float]]] = None):
        self._nodes_list = []
        if initial:
            self.add_all(initial)

    def add(self, element: E, priority: float):
        if self.contains(element):
            raise DuplicateElementError(f"Element {element!r} is already enqueued.")
        self._nodes_list.append(PriorityNode(element, check_priority(priority)))

    def contains(self, element: E) -> bool:
        return self._find(element) is not None

    def peek_min(self) -> E:
        return self._nodes_list[self._min_index()].element

    def remove_min(self) -> E:
        index = self._min_index()
        min_node = self._nodes_list[index]
        last_node = self._nodes_list.pop()
        if index < len(self._nodes_list):
            self._nodes_list[index] = last_node
        return min_node.element

    def change_priority(self, element: E, priority: float):
        priority = check_priority(priority)
        index = self._find(element)
        if index is None:
            raise ElementNotFoundError(f"Element {element!r} is not enqueued.")
        self._nodes_list[index].priority = priority

    def size(self) -> int:
        return len(self._nodes_list)

    def priority_of(self, element: E, default: Optional[float] = None) -> Optional[float]:
        index = self._find(element)
        if index is None:
            return default
        return self._nodes_list[index].priority

    def _nodes(self) -> List[PriorityNode[E]]:
        return self._nodes_list

    def _find(self, element: E) -> Optional[int]:
        for index, node in enumerate(self._nodes_list):
            if node.element == element:
                return index
        return None

    def _min_index(self) -> int:
        index = arg_min_index(self._nodes_list, key=lambda node: node.priority)
        if index is None:
            raise EmptyQueueError("The priority queue is empty.")
        return index
