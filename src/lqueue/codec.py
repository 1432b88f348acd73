"""Convert a deque to and from a JSON value with orjson.

An in-memory conversion helper alongside ``display``; it defines no file or
wire format of its own.

Payload: ``{"capacity": C, "items": [head, ..., tail]}``.
"""
from __future__ import annotations
import logging

import orjson

from lqueue.deque import BoundedDeque
from lqueue.errors import CodecError

log = logging.getLogger(__name__)


def dumps(dq: BoundedDeque) -> bytes:
    try:
        return orjson.dumps({"capacity": dq.capacity, "items": dq.to_list()})
    except TypeError as e:
        raise CodecError(f"deque holds a value orjson cannot encode: {e}") from e


def loads(data) -> BoundedDeque:
    try:
        payload = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise CodecError(f"invalid deque payload: {e}") from e
    if not isinstance(payload, dict) or "capacity" not in payload:
        raise CodecError("deque payload must be an object with a capacity")
    items = payload.get("items", [])
    if not isinstance(items, list):
        raise CodecError("deque payload items must be a list")
    dq = BoundedDeque(payload["capacity"], items)
    if len(items) > dq.capacity:
        log.warning("payload holds %d items for capacity %d, keeping the newest",
                    len(items), dq.capacity)
    return dq
