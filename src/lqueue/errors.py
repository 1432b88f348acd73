"""Exception types raised by lqueue."""
from __future__ import annotations


class LQueueError(Exception):
    pass


class InvalidCapacity(LQueueError, ValueError):
    """Capacity is not a positive integer."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class CodecError(LQueueError, ValueError):
    pass


class BuilderClosed(LQueueError, RuntimeError):
    pass
