"""
Scalar schemas: string, number, bigint, boolean, unknown, any.

Scalars never coerce. Constraints are checked in a fixed order and the first
violated one wins.
"""

from __future__ import annotations

from typing import Any

from ..issues import BigIntIssue, BooleanIssue, Issue, NumberIssue, StringIssue
from ..result import Err, Ok, Result
from ..types import is_absent
from .base import Constraint, RequirableSchema, Schema

MIN_MESSAGE = "Value is smaller than defined min"
MAX_MESSAGE = "Value is bigger than defined max"


def _length(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"Length bound must be a non-negative int, got {n!r}")
    return n


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_bigint(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


class StringSchema(RequirableSchema[str]):
    kind = "string"

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.min_length: Constraint | None = None
        self.max_length: Constraint | None = None

    def min(self, length: int, message: str | None = None) -> StringSchema:
        """Require at least ``length`` characters."""
        self.min_length = Constraint(_length(length), message)
        return self

    def max(self, length: int, message: str | None = None) -> StringSchema:
        """Allow at most ``length`` characters."""
        self.max_length = Constraint(_length(length), message)
        return self

    def _parse(self, value: Any) -> Result[str, Issue]:
        if is_absent(value):
            return self._required()

        if not isinstance(value, str):
            return Err(StringIssue(message=self.message or "Value is not a string"))

        if self.min_length is not None and len(value) < self.min_length.value:
            msg = self.min_length.message or "String is shorter than defined min"
            return Err(StringIssue(message=msg))

        if self.max_length is not None and len(value) > self.max_length.value:
            msg = self.max_length.message or "String is longer than defined max"
            return Err(StringIssue(message=msg))

        return Ok(value)


class NumberSchema(RequirableSchema[float]):
    """Accepts ``int`` and ``float``; ``bool`` is not a number."""

    kind = "number"

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.integer: Constraint | None = None
        self.minimum: Constraint | None = None
        self.maximum: Constraint | None = None

    def int(self, message: str | None = None) -> NumberSchema:
        """Reject values with a fractional part (and infinities)."""
        self.integer = Constraint(True, message)
        return self

    def min(self, value: float, message: str | None = None) -> NumberSchema:
        if not _is_number(value):
            raise TypeError(f"min must be a number, got {type(value).__name__}")
        self.minimum = Constraint(value, message)
        return self

    def max(self, value: float, message: str | None = None) -> NumberSchema:
        if not _is_number(value):
            raise TypeError(f"max must be a number, got {type(value).__name__}")
        self.maximum = Constraint(value, message)
        return self

    def _parse(self, value: Any) -> Result[float, Issue]:
        if is_absent(value):
            return self._required()

        if not _is_number(value):
            return Err(NumberIssue(message=self.message or "Value is not a number"))

        if self.integer is not None and not (
            isinstance(value, int) or value.is_integer()
        ):
            msg = self.integer.message or "Value is not an integer"
            return Err(NumberIssue(message=msg))

        if self.minimum is not None and value < self.minimum.value:
            return Err(NumberIssue(message=self.minimum.message or MIN_MESSAGE))

        if self.maximum is not None and value > self.maximum.value:
            return Err(NumberIssue(message=self.maximum.message or MAX_MESSAGE))

        return Ok(value)


class BigIntSchema(RequirableSchema[int]):
    """Accepts ``int`` only: no ``bool``, no integral ``float``."""

    kind = "bigint"

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.minimum: Constraint | None = None
        self.maximum: Constraint | None = None

    def min(self, value: int, message: str | None = None) -> BigIntSchema:
        if not _is_bigint(value):
            raise TypeError(f"min must be an int, got {type(value).__name__}")
        self.minimum = Constraint(value, message)
        return self

    def max(self, value: int, message: str | None = None) -> BigIntSchema:
        if not _is_bigint(value):
            raise TypeError(f"max must be an int, got {type(value).__name__}")
        self.maximum = Constraint(value, message)
        return self

    def _parse(self, value: Any) -> Result[int, Issue]:
        if is_absent(value):
            return self._required()

        if not _is_bigint(value):
            return Err(BigIntIssue(message=self.message or "Value is not a bigint"))

        if self.minimum is not None and value < self.minimum.value:
            return Err(BigIntIssue(message=self.minimum.message or MIN_MESSAGE))

        if self.maximum is not None and value > self.maximum.value:
            return Err(BigIntIssue(message=self.maximum.message or MAX_MESSAGE))

        return Ok(value)


class BooleanSchema(RequirableSchema[bool]):
    kind = "boolean"

    def _parse(self, value: Any) -> Result[bool, Issue]:
        if is_absent(value):
            return self._required()

        if not isinstance(value, bool):
            return Err(BooleanIssue(message=self.message or "Value is not a boolean"))

        return Ok(value)


class UnknownSchema(Schema[Any]):
    """Accepts anything, None and MISSING included."""

    kind = "unknown"

    def _parse(self, value: Any) -> Result[Any, Issue]:
        return Ok(value)


class AnySchema(UnknownSchema):
    """Same acceptance as unknown; output is typed ``Any``."""

    kind = "any"
