from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from minpq.errors import DuplicateElementError, EmptyQueueError
from minpq.priority_node import PriorityNode
from minpq.utilities.priorities import check_priority

E = TypeVar("E", bound=Hashable)


class MinPQ(ABC, Generic[E]):
    """
    A min-priority queue of unique elements whose priorities may change while enqueued.
    Smaller priorities are returned first. The order among equal priorities is
    determined by the implementation.

    Every operation either succeeds or raises without modifying the queue.
    Instances are not safe for concurrent use.
    """

    @abstractmethod
    def add(self, element: E, priority: float):
        """
        Adds the element with the given priority.
        Raises DuplicateElementError if the element is already enqueued.
        """

    @abstractmethod
    def contains(self, element: E) -> bool:
        pass

    @abstractmethod
    def peek_min(self) -> E:
        """
        Returns the element with the smallest priority without removing it.
        Raises EmptyQueueError if the queue is empty.
        """

    @abstractmethod
    def remove_min(self) -> E:
        """
        Removes and returns the element with the smallest priority.
        Raises EmptyQueueError if the queue is empty.
        """

    @abstractmethod
    def change_priority(self, element: E, priority: float):
        """
        Sets the priority of an enqueued element.
        Raises ElementNotFoundError if the element is not enqueued.
        """

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def priority_of(self, element: E, default: Optional[float] = None) -> Optional[float]:
        """
        Returns the current priority of the element, or default if it is not enqueued.
        """

    @abstractmethod
    def _nodes(self) -> List[PriorityNode[E]]:
        """
        Returns the stored entries in storage order.
        """

    def is_empty(self) -> bool:
        return self.size() == 0

    def min_priority(self) -> float:
        if self.is_empty():
            raise EmptyQueueError("Cannot get the minimal priority of an empty queue.")
        return self.priority_of(self.peek_min())

    def add_or_change_priority(self, element: E, priority: float):
        if self.contains(element):
            self.change_priority(element, priority)
        else:
            self.add(element, priority)

    def add_all(self, pairs: Iterable[Tuple[E, float]]):
        """
        Adds all (element, priority) pairs.
        The whole batch is validated first: if any pair is invalid, nothing is added.
        """
        for element, priority in self._validate_batch(pairs):
            self.add(element, priority)

    def sorted_elements(self) -> List[E]:
        """
        Returns all enqueued elements ordered by priority without modifying the queue.
        """
        return [node.element for node in sorted(self._nodes(), key=lambda node: node.priority)]

    def _validate_batch(self, pairs: Iterable[Tuple[E, float]]) -> List[Tuple[E, float]]:
        batch = []
        seen = set()
        for element, priority in pairs:
            if element in seen or self.contains(element):
                raise DuplicateElementError(f"Element {element!r} is already enqueued.")
            seen.add(element)
            batch.append((element, check_priority(priority)))
        return batch

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, element) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[E]:
        """
        Iterates over the elements in storage order, which is not the priority order.
        """
        return iter([node.element for node in self._nodes()])

    def __repr__(self) -> str:
        entries = ", ".join(f"{node.element!r}: {node.priority}" for node in self._nodes())
        return f"{self.__class__.__name__}({{{entries}}})"
