"""
Type definitions shared across warden.

Provides the MISSING sentinel and the type aliases used by schemas and issues.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class _Missing(Enum):
    """
    Sentinel for an absent value.

    Python has a single ``None``; warden separates "the key was never there"
    (MISSING) from "the key holds None". Object fields absent from the input
    mapping are read as MISSING, and ``optional()`` only accepts MISSING while
    ``nullable()`` only accepts None.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


def is_absent(value: Any) -> bool:
    """True for the two values that trigger a required issue."""
    return value is None or value is MISSING


# Type aliases
Path = tuple[str | int, ...]
RefineFn = Callable[[Any, Any], Any]
CheckFn = Callable[[Any, Any], Any]
TransformFn = Callable[[Any, Any], Any]
