"""
Context manager for schema construction defaults (traversal mode, strictness).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SchemaDefaults:
    """Flags new array/object schemas start with."""

    immediate: bool = False
    strict: bool = False
    pathed: bool = False


# Context variable for construction defaults
_defaults: ContextVar[SchemaDefaults] = ContextVar(
    "schema_defaults", default=SchemaDefaults()
)


def current_defaults() -> SchemaDefaults:
    """Return the defaults active in the current context."""
    return _defaults.get()


@contextmanager
def schema_defaults(
    *, immediate: bool = False, strict: bool = False, pathed: bool = False
):
    """
    Context manager for schema construction defaults.

    Args:
        immediate: Array/object schemas stop at the first failing item instead
                   of collecting every failure.
        strict: Object schemas drop undeclared keys from their output.
        pathed: Object schemas attach paths to nested issues.

    Defaults are read once, when a schema is built. Parsing never consults
    them, so a schema behaves the same wherever it is used.

    Example:
        from warden import number, object, schema_defaults

        with schema_defaults(strict=True, pathed=True):
            Point = object({"x": number(), "y": number()})

        Point.parse({"x": 1, "y": 2, "z": 3})  # {"x": 1, "y": 2}
    """
    token = _defaults.set(
        SchemaDefaults(immediate=immediate, strict=strict, pathed=pathed)
    )
    try:
        yield
    finally:
        _defaults.reset(token)
