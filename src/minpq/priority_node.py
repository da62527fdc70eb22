from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")


@dataclass
class PriorityNode(Generic[E]):
    """
    An enqueued entry. The element is fixed for the lifetime of the node,
    the priority is updated in place by change_priority.
    """

    element: E
    priority: float
