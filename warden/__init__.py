"""
Warden - composable runtime schemas for untrusted data.

Usage:
    import warden as w

    Person = w.object({
        "name": w.string().min(1),
        "age": w.number().int().min(0).optional(),
        "pets": w.array(w.literal(["cat", "dog"])),
    }).pathed()

    result = Person.safe_parse(data)   # Ok(value) | Err(issue)
    person = Person.parse(data)        # value, or raises ParseError
"""

from .context import SchemaDefaults, current_defaults, schema_defaults
from .errors import ParseError, UnwrapError, WardenError
from .factories import (
    any,
    array,
    bigint,
    boolean,
    literal,
    nullable,
    number,
    object,
    optional,
    string,
    union,
    unknown,
)
from .issues import (
    ArraySchemaIssue,
    ArrayTypeIssue,
    BigIntIssue,
    BooleanIssue,
    CheckIssue,
    FieldIssue,
    IndexIssue,
    Issue,
    LiteralIssue,
    NumberIssue,
    ObjectSchemaIssue,
    ObjectTypeIssue,
    RefineIssue,
    RequiredIssue,
    StringIssue,
    TransformIssue,
    UnionIssue,
    tag_paths,
)
from .result import Err, Ok, Result
from .schemas import (
    AnySchema,
    ArraySchema,
    BigIntSchema,
    BooleanSchema,
    CheckContext,
    LiteralSchema,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    RefineContext,
    Schema,
    StringSchema,
    TransformContext,
    TransformSchema,
    UnionSchema,
    UnknownSchema,
)
from .standard import StandardSchema
from .types import MISSING

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "MISSING",
    # Factories
    "string",
    "number",
    "bigint",
    "boolean",
    "unknown",
    "any",
    "array",
    "object",
    "literal",
    "union",
    "optional",
    "nullable",
    # Schemas
    "Schema",
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
    "RefineContext",
    "CheckContext",
    "TransformContext",
    "StandardSchema",
    # Issues
    "Issue",
    "RequiredIssue",
    "StringIssue",
    "NumberIssue",
    "BigIntIssue",
    "BooleanIssue",
    "ArrayTypeIssue",
    "ArraySchemaIssue",
    "IndexIssue",
    "ObjectTypeIssue",
    "ObjectSchemaIssue",
    "FieldIssue",
    "LiteralIssue",
    "UnionIssue",
    "CheckIssue",
    "RefineIssue",
    "TransformIssue",
    "tag_paths",
    # Errors
    "WardenError",
    "ParseError",
    "UnwrapError",
    # Configuration
    "schema_defaults",
    "current_defaults",
    "SchemaDefaults",
]
