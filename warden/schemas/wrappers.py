"""
Wrapper schemas: optional, nullable, transform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..issues import Issue, TransformIssue
from ..result import Err, Ok, Result
from ..types import MISSING, TransformFn
from .base import Schema, _callback_result


@dataclass(frozen=True, slots=True)
class TransformContext:
    """Passed to transform functions. ``schema_kind`` is the wrapped schema's kind."""

    output: Any
    schema_kind: str

    def fail(self, message: str) -> Err[TransformIssue]:
        return Err(TransformIssue(message=message, source=self.schema_kind))


class _SentinelSchema(Schema[Any]):
    """Accepts one sentinel as-is and forwards everything else to ``inner``."""

    sentinel: ClassVar[Any]

    def __init__(self, inner: Schema):
        super().__init__()
        if not isinstance(inner, Schema):
            raise TypeError(f"Wrapped value must be a Schema, got {type(inner).__name__}")
        self.inner = inner

    def _validate(self, value: Any) -> Result[Any, Issue]:
        if value is self.sentinel:
            return Ok(value)
        return super()._validate(value)

    def _parse(self, value: Any) -> Result[Any, Issue]:
        return self.inner.safe_parse(value)


class OptionalSchema(_SentinelSchema):
    """MISSING passes through; None still goes to the inner schema."""

    kind = "optional"
    sentinel = MISSING


class NullableSchema(_SentinelSchema):
    """None passes through; MISSING still goes to the inner schema."""

    kind = "nullable"
    sentinel = None


class TransformSchema(Schema[Any]):
    """
    Maps the output of ``inner`` with ``fn(output, ctx)``.

    Chained ``.transform()`` calls nest, so they run left to right and stop at
    the first failure. Errors from ``inner`` are returned unchanged.
    """

    kind = "transform"

    def __init__(self, inner: Schema, fn: TransformFn):
        super().__init__()
        if not isinstance(inner, Schema):
            raise TypeError(f"Wrapped value must be a Schema, got {type(inner).__name__}")
        if not callable(fn):
            raise TypeError("Transform function must be callable")
        self.inner = inner
        self.fn = fn

    def _parse(self, value: Any) -> Result[Any, Issue]:
        result = self.inner.safe_parse(value)
        if isinstance(result, Err):
            return result

        ctx = TransformContext(output=result.value, schema_kind=self.inner.kind)
        return _callback_result(
            self.fn, result.value, ctx, TransformIssue, self.inner.kind
        )
