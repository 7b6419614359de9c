"""
Factory functions that build schema instances.

Several names (``object``, ``any``) match builtins, so prefer
``import warden as w`` and ``w.object({...})`` over star imports.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from .schemas import (
    AnySchema,
    ArraySchema,
    BigIntSchema,
    BooleanSchema,
    LiteralSchema,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    Schema,
    StringSchema,
    UnionSchema,
    UnknownSchema,
)


def string(message: str | None = None) -> StringSchema:
    return StringSchema(message)


def number(message: str | None = None) -> NumberSchema:
    return NumberSchema(message)


def bigint(message: str | None = None) -> BigIntSchema:
    return BigIntSchema(message)


def boolean(message: str | None = None) -> BooleanSchema:
    return BooleanSchema(message)


def unknown() -> UnknownSchema:
    return UnknownSchema()


def any() -> AnySchema:
    return AnySchema()


def array(element: Schema, message: str | None = None) -> ArraySchema:
    """
    Usage:
        array(string()).min(1)
        array(number(), "expected a list of numbers").immediate()
    """
    return ArraySchema(element, message)


def object(fields: Mapping[str, Schema], message: str | None = None) -> ObjectSchema:
    """
    Usage:
        object({
            "name": string(),
            "age": number().int().min(0).optional(),
        }).strict()
    """
    return ObjectSchema(fields, message)


def literal(values: Iterable[Any], message: str | None = None) -> LiteralSchema:
    """
    Usage:
        literal(["cat", "dog"])
    """
    return LiteralSchema(values, message)


def union(options: Sequence[Schema], message: str | None = None) -> UnionSchema:
    """
    Usage:
        union([string(), number()])
    """
    return UnionSchema(options, message)


def optional(schema: Schema) -> OptionalSchema:
    return OptionalSchema(schema)


def nullable(schema: Schema) -> NullableSchema:
    return NullableSchema(schema)
