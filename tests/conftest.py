"""Shared test fixtures."""
import sys
import os
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from lqueue.deque import BoundedDeque  # noqa: E402


@pytest.fixture
def empty():
    return BoundedDeque(5)


@pytest.fixture
def full():
    """Capacity 3 holding [1, 2, 3], all on the rear side."""
    return BoundedDeque(3, [1, 2, 3])


@pytest.fixture
def mixed():
    """[10, 20, 30, 40] split across both sides."""
    dq = BoundedDeque(6)
    dq.push_front(20)
    dq.push_front(10)
    dq.push_rear(30)
    dq.push_rear(40)
    return dq
