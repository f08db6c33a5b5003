"""Exceptions raised by the queue implementations."""


class QueueError(Exception):
    """Base class for queue failures."""


class QueueOverflowError(QueueError):
    """Raised when an element is pushed into a full queue."""


class QueueEmptyError(QueueError):
    """Raised when an element is popped from an empty queue."""