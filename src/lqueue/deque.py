"""Double-ended queue with a fixed maximum length.

``[1, 2, 3]`` has its front at ``1`` and its rear at ``3``.  Pushing ``4`` to
the rear of a full deque of capacity 3 gives ``[2, 3, 4]``; pushing it to the
front instead gives ``[4, 1, 2]``.

Storage is two plain lists whose tails face outward:

    logical order = reversed(_front) + _rear

so ``_front[-1]`` is the head and ``_rear[-1]`` is the tail, and every push or
pop touches a list tail.  When a pop (or an eviction) needs an element from a
side that is empty, the whole other side is reversed across once.  Each element
crosses at most once per trip, so pushes and pops are amortized O(1).  Peeks
never move anything: the far end of the other side is read in place.
"""
from __future__ import annotations
import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from lqueue.errors import InvalidCapacity

log = logging.getLogger(__name__)

T = TypeVar("T")


def check_capacity(capacity) -> int:
    # bool is an int subclass but never a meaningful capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacity(capacity)
    return capacity


class BoundedDeque(Generic[T]):
    """Deque holding at most ``capacity`` elements, evicting from the far end."""

    __slots__ = ("_capacity", "_front", "_rear", "_version")

    def __init__(self, capacity: int, items: Optional[Iterable[T]] = None):
        self._capacity = check_capacity(capacity)
        self._front: List[T] = []
        self._rear: List[T] = []
        self._version = 0
        if items is not None:
            self.extend(items)

    @classmethod
    def from_iterable(cls, items: Iterable[T], capacity: int) -> "BoundedDeque[T]":
        """Build a deque from ``items``; only the last ``capacity`` survive."""
        return cls(capacity, items)

    # --- queries ---

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._front) + len(self._rear)

    @property
    def version(self) -> int:
        """Counter bumped by every mutation; lets readers detect stale views."""
        return self._version

    def is_full(self) -> bool:
        return self.count == self._capacity

    def is_empty(self) -> bool:
        return not self._front and not self._rear

    def peek_front(self, default: Optional[T] = None) -> Optional[T]:
        """Return the head without removing it, or ``default`` when empty."""
        if self._front:
            return self._front[-1]
        if self._rear:
            return self._rear[0]
        return default

    def peek_rear(self, default: Optional[T] = None) -> Optional[T]:
        """Return the tail without removing it, or ``default`` when empty."""
        if self._rear:
            return self._rear[-1]
        if self._front:
            return self._front[0]
        return default

    def contains(self, value) -> bool:
        return value in self._front or value in self._rear

    # --- mutation ---

    def push_rear(self, item: T) -> None:
        """Append to the tail.  On a full deque the head is evicted first."""
        if self.count >= self._capacity:
            if not self._front:
                self._rebalance_front()
            self._front.pop()
        self._rear.append(item)
        self._version += 1

    def push_front(self, item: T) -> None:
        """Prepend to the head.  On a full deque the tail is evicted first."""
        if self.count >= self._capacity:
            if not self._rear:
                self._rebalance_rear()
            self._rear.pop()
        self._front.append(item)
        self._version += 1

    append = push_rear
    appendleft = push_front

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.push_rear(item)

    def pop_front(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the head, or return ``default`` when empty."""
        if not self._front:
            if not self._rear:
                return default
            self._rebalance_front()
        self._version += 1
        return self._front.pop()

    def pop_rear(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the tail, or return ``default`` when empty."""
        if not self._rear:
            if not self._front:
                return default
            self._rebalance_rear()
        self._version += 1
        return self._rear.pop()

    def drop_front(self) -> None:
        self.pop_front()

    def drop_rear(self) -> None:
        self.pop_rear()

    def clear(self) -> None:
        self._front = []
        self._rear = []
        self._version += 1

    def reverse(self) -> None:
        """Reverse the logical order in place by swapping the two sides."""
        self._front, self._rear = self._rear, self._front
        self._version += 1

    def filter(self, predicate: Callable[[T], bool]) -> "BoundedDeque[T]":
        """Return a new deque of the same capacity with the matching elements.

        Each side is filtered on its own; the result may be lopsided and is
        left that way until a later pop needs to rebalance it.
        """
        out: BoundedDeque[T] = BoundedDeque(self._capacity)
        out._front = [x for x in self._front if predicate(x)]
        out._rear = [x for x in self._rear if predicate(x)]
        return out

    def copy(self) -> "BoundedDeque[T]":
        out: BoundedDeque[T] = BoundedDeque(self._capacity)
        out._front = list(self._front)
        out._rear = list(self._rear)
        return out

    def to_list(self) -> List[T]:
        return self._front[::-1] + self._rear

    def _rebalance_front(self) -> None:
        # only called with _front empty
        log.debug("rebalance rear->front n=%d", len(self._rear))
        self._front = self._rear[::-1]
        self._rear = []

    def _rebalance_rear(self) -> None:
        log.debug("rebalance front->rear n=%d", len(self._front))
        self._rear = self._front[::-1]
        self._front = []

    # --- protocols ---

    def __len__(self) -> int:
        return self.count

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        version = self._version
        front, rear = self._front, self._rear
        for i in range(len(front) - 1, -1, -1):
            if self._version != version:
                raise RuntimeError("deque mutated during iteration")
            yield front[i]
        for i in range(len(rear)):
            if self._version != version:
                raise RuntimeError("deque mutated during iteration")
            yield rear[i]

    def __reversed__(self) -> Iterator[T]:
        version = self._version
        front, rear = self._front, self._rear
        for i in range(len(rear) - 1, -1, -1):
            if self._version != version:
                raise RuntimeError("deque mutated during iteration")
            yield rear[i]
        for i in range(len(front)):
            if self._version != version:
                raise RuntimeError("deque mutated during iteration")
            yield front[i]

    def __getitem__(self, idx: int) -> T:
        n = self.count
        if idx < 0:
            idx += n
        if not 0 <= idx < n:
            raise IndexError("deque index out of range")
        nf = len(self._front)
        if idx < nf:
            return self._front[nf - 1 - idx]
        return self._rear[idx - nf]

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundedDeque):
            return NotImplemented
        return self._capacity == other._capacity and self.to_list() == other.to_list()

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "BoundedDeque[T]":
        return self.copy()

    def __str__(self) -> str:
        return "[" + ", ".join(repr(x) for x in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r}, capacity={self._capacity})"

    def __rich_repr__(self):
        yield self.to_list()
        yield "capacity", self._capacity
