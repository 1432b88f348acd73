"""Double-ended queue with limited length."""
from lqueue.deque import BoundedDeque
from lqueue.adapters import Cursor, DequeBuilder
from lqueue.errors import BuilderClosed, CodecError, InvalidCapacity, LQueueError

__all__ = [
    "BoundedDeque",
    "Cursor",
    "DequeBuilder",
    "BuilderClosed",
    "CodecError",
    "InvalidCapacity",
    "LQueueError",
]

__version__ = "1.2.0"
