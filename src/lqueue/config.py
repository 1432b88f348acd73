"""Configuration for lqueue: logging level and named window profiles.

The ``default.yaml`` shipped inside the package maps profile names to
capacities so call sites can ask for a window by purpose instead of
hard-coding sizes.
"""
from __future__ import annotations
import copy
import logging
import os
import sys
from typing import Any, Dict, Iterable, Optional

import yaml

from lqueue.deque import BoundedDeque, check_capacity

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default.yaml")

DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "windows": {
        "default": 100,
    },
}


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load YAML config and overlay it onto ``DEFAULTS``.

    With no ``path`` the bundled ``default.yaml`` is read; it must exist.
    """
    config = copy.deepcopy(DEFAULTS)
    if path is None:
        path = DEFAULT_CONFIG_PATH
    with open(path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"config root must be a mapping: {path}")
    windows = loaded.pop("windows", None) or {}
    config.update(loaded)
    config["windows"].update(windows)
    return config


def window_capacity(config: Dict[str, Any], name: str) -> int:
    windows = config.get("windows", {})
    if name not in windows:
        raise KeyError(f"unknown window profile: {name}")
    return check_capacity(windows[name])


def make_window(config: Dict[str, Any], name: str, items: Iterable = ()) -> BoundedDeque:
    """Build a deque sized by the named profile, seeded with ``items``."""
    return BoundedDeque(window_capacity(config, name), items)
