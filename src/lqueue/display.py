"""Rich rendering of deque contents."""
from __future__ import annotations

from rich.table import Table

from lqueue.deque import BoundedDeque


def format_deque(dq: BoundedDeque, limit: int = 0) -> str:
    """Bracketed, comma-separated contents; ``limit`` > 0 elides the middle."""
    n = len(dq)
    if limit <= 0 or n <= limit:
        return str(dq)
    head = (limit + 1) // 2
    tail = limit - head
    parts = [repr(dq[i]) for i in range(head)]
    parts.append(f"... {n - limit} more ...")
    parts.extend(repr(dq[i]) for i in range(n - tail, n))
    return "[" + ", ".join(parts) + "]"


def render_table(dq: BoundedDeque, title: str = "") -> Table:
    table = Table(title=title or None, caption=f"{len(dq)}/{dq.capacity}",
                  show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("value")
    for i, item in enumerate(dq):
        table.add_row(str(i), repr(item))
    return table
