"""Building deques from a stream of values and consuming them piecewise."""
from __future__ import annotations
import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from lqueue.deque import BoundedDeque
from lqueue.errors import BuilderClosed

log = logging.getLogger(__name__)

T = TypeVar("T")


class DequeBuilder(Generic[T]):
    """Accumulates values into a deque, one ``push_rear`` per ``add``.

    Usage:
        with DequeBuilder(3) as b:
            for v in values:
                b.add(v)
        window = b.build()

    An exception inside the ``with`` block aborts the builder.
    """

    def __init__(self, capacity: int):
        self._acc: Optional[BoundedDeque[T]] = BoundedDeque(capacity)

    @property
    def closed(self) -> bool:
        return self._acc is None

    def add(self, value: T) -> "DequeBuilder[T]":
        self._live().push_rear(value)
        return self

    def build(self) -> BoundedDeque[T]:
        acc = self._live()
        self._acc = None
        return acc

    def abort(self) -> None:
        if self._acc is not None:
            log.debug("builder aborted with %d pending items", len(self._acc))
        self._acc = None

    def _live(self) -> BoundedDeque[T]:
        if self._acc is None:
            raise BuilderClosed("builder already finished or aborted")
        return self._acc

    def __enter__(self) -> "DequeBuilder[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()


class Cursor(Generic[T]):
    """Immutable position in a deque's head-to-tail order.

    ``step`` and ``take`` hand back a new cursor for the remainder, so a
    consumer can stop after any prefix and resume from the continuation later.
    Nothing is copied; once the deque is mutated every cursor over it is stale.
    """

    __slots__ = ("_deque", "_pos", "_version")

    def __init__(self, dq: BoundedDeque[T]):
        self._deque = dq
        self._pos = 0
        self._version = dq.version

    @classmethod
    def _at(cls, dq: BoundedDeque[T], pos: int, version: int) -> "Cursor[T]":
        cur = cls.__new__(cls)
        cur._deque = dq
        cur._pos = pos
        cur._version = version
        return cur

    @property
    def done(self) -> bool:
        self._check()
        return self._pos >= len(self._deque)

    @property
    def remaining(self) -> int:
        self._check()
        return max(len(self._deque) - self._pos, 0)

    def step(self) -> Optional[Tuple[T, "Cursor[T]"]]:
        """Return ``(item, rest)``, or ``None`` when exhausted."""
        if self.done:
            return None
        item = self._deque[self._pos]
        return item, Cursor._at(self._deque, self._pos + 1, self._version)

    def take(self, n: int) -> Tuple[List[T], "Cursor[T]"]:
        self._check()
        end = min(self._pos + max(n, 0), len(self._deque))
        items = [self._deque[i] for i in range(self._pos, end)]
        return items, Cursor._at(self._deque, end, self._version)

    def _check(self) -> None:
        if self._deque.version != self._version:
            raise RuntimeError("deque mutated since cursor was created")

    def __iter__(self) -> Iterator[T]:
        cur: Cursor[T] = self
        while True:
            nxt = cur.step()
            if nxt is None:
                return
            item, cur = nxt
            yield item
