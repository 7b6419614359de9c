"""
Issue taxonomy for warden.

Every failed validation produces exactly one Issue. Array and object schemas
produce aggregate issues whose children are full issues themselves, so a
failure is a tree mirroring the shape of the input that failed.

Usage:
    result = schema.safe_parse(data)
    if result.is_err():
        for path, message in result.error.flatten():
            print(path, message)
"""

from __future__ import annotations

from typing import Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .types import Path


class Issue(BaseModel):
    """Base issue. ``path`` stays None unless an object schema ran ``pathed()``."""

    model_config = ConfigDict(frozen=True)

    kind: str
    message: str
    path: tuple[str | int, ...] | None = None

    def with_path(self, path: Path) -> Issue:
        """Return a copy of this issue located at ``path``."""
        return self.model_copy(update={"path": tuple(path)})

    def children(self) -> Iterator[tuple[str | int, Issue]]:
        """Yield ``(key, child)`` pairs. Leaf issues have none."""
        return iter(())

    def flatten(self, base: Path = ()) -> list[tuple[Path, str]]:
        """
        Collapse the tree into ``(path, message)`` pairs, one per leaf.

        Paths are computed from the tree shape, so this works whether or not
        path tagging ran.
        """
        pairs: list[tuple[Path, str]] = []
        has_children = False
        for key, child in self.children():
            has_children = True
            pairs.extend(child.flatten((*base, key)))
        if not has_children:
            pairs.append((base, self.message))
        return pairs


class RequiredIssue(Issue):
    kind: Literal["required"] = "required"


class StringIssue(Issue):
    kind: Literal["string"] = "string"


class NumberIssue(Issue):
    kind: Literal["number"] = "number"


class BigIntIssue(Issue):
    kind: Literal["bigint"] = "bigint"


class BooleanIssue(Issue):
    kind: Literal["boolean"] = "boolean"


class ArrayTypeIssue(Issue):
    kind: Literal["array-type"] = "array-type"


class ObjectTypeIssue(Issue):
    kind: Literal["object-type"] = "object-type"


class LiteralIssue(Issue):
    kind: Literal["literal"] = "literal"


class UnionIssue(Issue):
    kind: Literal["union"] = "union"


class CheckIssue(Issue):
    """Raised by a ``check`` stage. ``source`` is the owning schema's kind."""

    kind: Literal["check"] = "check"
    source: str


class RefineIssue(Issue):
    """Raised by a ``refine`` stage. ``source`` is the owning schema's kind."""

    kind: Literal["refine"] = "refine"
    source: str


class TransformIssue(Issue):
    """Raised by a ``transform`` stage. ``source`` is the wrapped schema's kind."""

    kind: Literal["transform"] = "transform"
    source: str


class IndexIssue(BaseModel):
    """One failing array element."""

    model_config = ConfigDict(frozen=True)

    index: int
    issue: SerializeAsAny[Issue]


class FieldIssue(BaseModel):
    """One failing object field."""

    model_config = ConfigDict(frozen=True)

    field: str
    issue: SerializeAsAny[Issue]


class ArraySchemaIssue(Issue):
    kind: Literal["array-schema"] = "array-schema"
    issues: tuple[IndexIssue, ...] = Field(min_length=1)

    def children(self) -> Iterator[tuple[str | int, Issue]]:
        for entry in self.issues:
            yield entry.index, entry.issue


class ObjectSchemaIssue(Issue):
    kind: Literal["object-schema"] = "object-schema"
    issues: tuple[FieldIssue, ...] = Field(min_length=1)

    def children(self) -> Iterator[tuple[str | int, Issue]]:
        for entry in self.issues:
            yield entry.field, entry.issue


def tag_paths(issue: Issue, base: Path = ()) -> Issue:
    """
    Rebuild ``issue`` so every nested issue carries its full path.

    The walk is depth first over array/object aggregates and returns new issue
    objects; the input tree is left untouched. ``issue`` itself keeps its own
    path, only its descendants are located relative to ``base``.
    """
    if isinstance(issue, ArraySchemaIssue):
        indexed = tuple(
            entry.model_copy(
                update={"issue": _located(entry.issue, (*base, entry.index))}
            )
            for entry in issue.issues
        )
        return issue.model_copy(update={"issues": indexed})

    if isinstance(issue, ObjectSchemaIssue):
        fielded = tuple(
            entry.model_copy(
                update={"issue": _located(entry.issue, (*base, entry.field))}
            )
            for entry in issue.issues
        )
        return issue.model_copy(update={"issues": fielded})

    return issue


def _located(issue: Issue, path: Path) -> Issue:
    return tag_paths(issue, path).with_path(path)
