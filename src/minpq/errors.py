class MinPQError(Exception):
    """Base class of all errors raised by the priority queues."""


class EmptyQueueError(MinPQError, IndexError):
    pass


class DuplicateElementError(MinPQError, ValueError):
    pass


class ElementNotFoundError(MinPQError, KeyError):
    pass


class InvalidPriorityError(MinPQError, ValueError):
    pass
