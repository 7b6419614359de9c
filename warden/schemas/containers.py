"""
Nestable schemas: array and object.

Both traverse their children in one of two modes:
    retained (default) - visit every element/field, report every failure
    immediate          - stop at the first failing element/field
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from ..context import current_defaults
from ..issues import (
    ArraySchemaIssue,
    ArrayTypeIssue,
    FieldIssue,
    IndexIssue,
    Issue,
    ObjectSchemaIssue,
    ObjectTypeIssue,
    tag_paths,
)
from ..result import Err, Ok, Result
from ..types import MISSING, is_absent
from .base import Constraint, RequirableSchema, Schema

T = TypeVar("T")


def _schema(v: Any, where: str) -> Schema:
    if not isinstance(v, Schema):
        raise TypeError(f"{where} must be a Schema, got {type(v).__name__}")
    return v


class ArraySchema(RequirableSchema[list], Generic[T]):
    """Validator for list/tuple structures with item validation."""

    kind = "array"

    def __init__(self, element: Schema[T], message: str | None = None):
        super().__init__(message)
        self.element = _schema(element, "Array element")
        self.min_length: Constraint | None = None
        self.max_length: Constraint | None = None
        self.is_immediate = current_defaults().immediate

    def min(self, size: int, message: str | None = None) -> ArraySchema[T]:
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Array min must be a non-negative int, got {size!r}")
        self.min_length = Constraint(size, message)
        return self

    def max(self, size: int, message: str | None = None) -> ArraySchema[T]:
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Array max must be a non-negative int, got {size!r}")
        self.max_length = Constraint(size, message)
        return self

    def immediate(self) -> ArraySchema[T]:
        """Stop at the first invalid element."""
        self.is_immediate = True
        return self

    def retained(self) -> ArraySchema[T]:
        """Validate every element and report all failures."""
        self.is_immediate = False
        return self

    def _parse(self, value: Any) -> Result[list[T], Issue]:
        if is_absent(value):
            return self._required()

        if not isinstance(value, (list, tuple)):
            return Err(ArrayTypeIssue(message=self.message or "Value is not an array"))

        if self.max_length is not None and len(value) > self.max_length.value:
            msg = self.max_length.message or "Array is bigger than defined max"
            return Err(ArrayTypeIssue(message=msg))

        if self.min_length is not None and len(value) < self.min_length.value:
            msg = self.min_length.message or "Array is smaller than defined min"
            return Err(ArrayTypeIssue(message=msg))

        outputs: list[T] = []
        failures: list[IndexIssue] = []
        changed = not isinstance(value, list)

        for i, item in enumerate(value):
            result = self.element.safe_parse(item)
            if isinstance(result, Err):
                failures.append(IndexIssue(index=i, issue=result.error))
                if self.is_immediate:
                    break
                continue
            outputs.append(result.value)
            changed = changed or result.value is not item

        if failures:
            msg = self.message or "Array elements failed validation"
            return Err(ArraySchemaIssue(message=msg, issues=tuple(failures)))

        return Ok(outputs if changed else value)


class ObjectSchema(RequirableSchema[dict]):
    """
    Validator for mappings with per-field schemas.

    Fields are validated in declaration order; a field absent from the input is
    read as MISSING. Non-strict output keeps undeclared keys, strict output
    holds only declared ones. With ``pathed()``, every nested issue of a failed
    parse gets its location from this object down.
    """

    kind = "object"

    def __init__(self, fields: Mapping[str, Schema], message: str | None = None):
        super().__init__(message)
        if not isinstance(fields, Mapping):
            raise TypeError(f"Object fields must be a mapping, got {type(fields).__name__}")
        self._fields: dict[str, Schema] = {}
        for key, schema in fields.items():
            if not isinstance(key, str):
                raise TypeError(f"Object field names must be str, got {key!r}")
            self._fields[key] = _schema(schema, f"Field {key!r}")

        defaults = current_defaults()
        self.is_immediate = defaults.immediate
        self.is_strict = defaults.strict
        self.is_pathed = defaults.pathed

    @property
    def fields(self) -> dict[str, Schema]:
        return dict(self._fields)

    def immediate(self) -> ObjectSchema:
        """Stop at the first invalid field."""
        self.is_immediate = True
        return self

    def retained(self) -> ObjectSchema:
        """Validate every field and report all failures."""
        self.is_immediate = False
        return self

    def strict(self, enabled: bool = True) -> ObjectSchema:
        """Output only declared fields."""
        self.is_strict = enabled
        return self

    def pathed(self, enabled: bool = True) -> ObjectSchema:
        """Attach paths to nested issues when parsing fails."""
        self.is_pathed = enabled
        return self

    def extend(self, fields: Mapping[str, Schema]) -> ObjectSchema:
        """
        Return a new object schema with ``fields`` overlaid on this one's.

        Flags, messages, refines and checks carry over; this schema is not
        modified.
        """
        extended = ObjectSchema({**self._fields, **fields}, self.message)
        extended.required_message = self.required_message
        extended.is_immediate = self.is_immediate
        extended.is_strict = self.is_strict
        extended.is_pathed = self.is_pathed
        self._copy_stages(extended)
        return extended

    def _parse(self, value: Any) -> Result[dict, Issue]:
        if is_absent(value):
            return self._required()

        if not isinstance(value, Mapping):
            return Err(ObjectTypeIssue(message=self.message or "Value is not an object"))

        outputs: dict[str, Any] = {}
        failures: list[FieldIssue] = []
        changed = False

        for key, schema in self._fields.items():
            item = value.get(key, MISSING)
            result = schema.safe_parse(item)
            if isinstance(result, Err):
                failures.append(FieldIssue(field=key, issue=result.error))
                if self.is_immediate:
                    break
                continue
            outputs[key] = result.value
            changed = changed or result.value is not item

        if failures:
            msg = self.message or "Object fields failed validation"
            issue: Issue = ObjectSchemaIssue(message=msg, issues=tuple(failures))
            if self.is_pathed:
                issue = tag_paths(issue)
            return Err(issue)

        return Ok(self._project(value, outputs, changed))

    def _project(
        self, value: Mapping[str, Any], outputs: dict[str, Any], changed: bool
    ) -> dict:
        if self.is_strict:
            return {k: v for k, v in outputs.items() if v is not MISSING}

        if not changed and isinstance(value, dict):
            return value

        projected = dict(value)
        for k, v in outputs.items():
            if v is MISSING:
                projected.pop(k, None)
            else:
                projected[k] = v
        return projected
