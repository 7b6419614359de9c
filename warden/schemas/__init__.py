from .base import CheckContext, Constraint, RefineContext, RequirableSchema, Schema
from .choices import LiteralSchema, UnionSchema
from .containers import ArraySchema, ObjectSchema
from .scalars import (
    AnySchema,
    BigIntSchema,
    BooleanSchema,
    NumberSchema,
    StringSchema,
    UnknownSchema,
)
from .wrappers import NullableSchema, OptionalSchema, TransformContext, TransformSchema

__all__ = [
    "Schema",
    "RequirableSchema",
    "Constraint",
    "RefineContext",
    "CheckContext",
    "TransformContext",
    "StringSchema",
    "NumberSchema",
    "BigIntSchema",
    "BooleanSchema",
    "UnknownSchema",
    "AnySchema",
    "ArraySchema",
    "ObjectSchema",
    "LiteralSchema",
    "UnionSchema",
    "OptionalSchema",
    "NullableSchema",
    "TransformSchema",
]
