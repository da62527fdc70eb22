import math
import numbers
from typing import Any, Callable, Iterable, Optional

from minpq.errors import InvalidPriorityError


def check_priority(priority: Any) -> float:
    """
    Returns the priority as a float.
    Raises InvalidPriorityError for non-numeric values, nan and infinities.
    """
    if isinstance(priority, bool) or not isinstance(priority, numbers.Real):
        raise InvalidPriorityError(f"Priority {priority!r} is not a real number.")
    priority = float(priority)
    if not math.isfinite(priority):
        raise InvalidPriorityError(f"Priority {priority!r} is not finite.")
    return priority


def arg_min_index(items: Iterable, key: Callable = lambda x: x) -> Optional[int]:
    """
    Returns the index of the first item with minimal key, or None if items is empty.
    Later items only win if their key is strictly smaller.
    """
    minimum = None
    min_index = None
    for index, item in enumerate(items):
        item_key = key(item)
        if minimum is None or item_key < minimum:
            minimum = item_key
            min_index = index
    return min_index
