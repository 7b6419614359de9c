"""
Base schema class and the pipeline stages every variant shares.

A parse runs in fixed order: refine -> structural parse -> check. Transform is
a separate wrapper schema (see wrappers.py) that runs after the wrapped
schema's whole pipeline.

Builder methods mutate the schema and return it, so configuration must be
finished before a schema is shared between threads for parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, TypeVar

from ..errors import ParseError
from ..issues import CheckIssue, Issue, RefineIssue, RequiredIssue
from ..result import Err, Ok, Result
from ..types import CheckFn, RefineFn, TransformFn

if TYPE_CHECKING:
    from ..standard import StandardSchema
    from .wrappers import NullableSchema, OptionalSchema, TransformSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound="Schema")

REQUIRED_MESSAGE = "Value is required"
CHECK_MESSAGE = "Check failed"


@dataclass(frozen=True, slots=True)
class Constraint:
    """A configured bound plus the message used when it is violated."""

    value: Any
    message: str | None = None


@dataclass(frozen=True, slots=True)
class RefineContext:
    """Passed to refine functions as their second argument."""

    input: Any
    schema_kind: str

    def fail(self, message: str) -> Err[RefineIssue]:
        return Err(RefineIssue(message=message, source=self.schema_kind))


@dataclass(frozen=True, slots=True)
class CheckContext:
    """Passed to check functions. ``input`` is the value before structural parsing."""

    input: Any
    output: Any
    schema_kind: str

    def fail(self, message: str) -> Err[CheckIssue]:
        return Err(CheckIssue(message=message, source=self.schema_kind))


def _callback_result(
    fn: Callable[[Any, Any], Any],
    value: Any,
    ctx: Any,
    issue_type: type[Issue],
    source: str,
    predicate_message: str | None = None,
) -> Result[Any, Issue]:
    """
    Call a user stage function and normalize what it gives back.

    Explicit Ok/Err pass through, with non-issue errors wrapped. Exceptions
    become an issue of ``issue_type``. Any other return is the new value, or,
    when ``predicate_message`` is given, a pass/fail verdict on ``value``.
    """
    try:
        out = fn(value, ctx)
        if isinstance(out, (Ok, Err)) or predicate_message is None:
            passed = True
        else:
            passed = bool(out)
    except Exception as e:
        logger.debug(
            "%s function raised in %s schema", issue_type.__name__, source, exc_info=True
        )
        return Err(issue_type(message=str(e) or type(e).__name__, source=source))

    if isinstance(out, Err):
        if isinstance(out.error, Issue):
            return out
        return Err(issue_type(message=str(out.error), source=source))
    if isinstance(out, Ok):
        return out
    if predicate_message is None:
        return Ok(out)
    if passed:
        return Ok(value)
    return Err(issue_type(message=predicate_message, source=source))


class Schema(Generic[T]):
    """
    A validation rule.

    Subclasses set ``kind`` and implement ``_parse``, the structural step.
    """

    kind: ClassVar[str]

    def __init__(self, message: str | None = None):
        self.message = message
        self._refines: list[RefineFn] = []
        self._checks: list[tuple[CheckFn, str | None]] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"

    # -- builders ---------------------------------------------------------

    def refine(self: S, fn: RefineFn) -> S:
        """
        Rewrite the input before structural validation.

        ``fn(value, ctx)`` returns the new value. Return ``ctx.fail(message)``
        or raise to reject the input with a RefineIssue.
        """
        self._refines.append(fn)
        return self

    def check(self: S, fn: CheckFn, message: str | None = None) -> S:
        """
        Validate the parsed output.

        ``fn(output, ctx)`` returns a truthy value to pass. A falsy return fails
        with a CheckIssue carrying ``message``.
        """
        self._checks.append((fn, message))
        return self

    def transform(self, fn: TransformFn) -> TransformSchema:
        """Wrap this schema so ``fn(output, ctx)`` maps its output."""
        from .wrappers import TransformSchema

        return TransformSchema(self, fn)

    def optional(self) -> OptionalSchema:
        """Wrap this schema so MISSING is accepted as-is."""
        from .wrappers import OptionalSchema

        return OptionalSchema(self)

    def nullable(self) -> NullableSchema:
        """Wrap this schema so None is accepted as-is."""
        from .wrappers import NullableSchema

        return NullableSchema(self)

    # -- parsing ----------------------------------------------------------

    def parse(self, value: Any) -> T:
        """
        Validate a value.

        Returns:
            The validated output

        Raises:
            ParseError: carrying the issue tree on ``.issue``
        """
        result = self.safe_parse(value)
        if isinstance(result, Err):
            logger.debug(
                "%s schema rejected input with %s issue", self.kind, result.error.kind
            )
            raise ParseError(result.error)
        return result.value

    def safe_parse(self, value: Any) -> Result[T, Issue]:
        """
        Validate a value without raising.

        Returns:
            Ok(output) if validation passes
            Err(issue) if validation fails
        """
        refined = self._refine(value)
        if isinstance(refined, Err):
            return refined
        return self._validate(refined.value)

    def is_valid(self, value: Any) -> bool:
        """Check if value matches schema."""
        return isinstance(self.safe_parse(value), Ok)

    @property
    def standard(self) -> StandardSchema:
        """Standard-schema descriptor for this schema."""
        from ..standard import StandardSchema

        return StandardSchema(self)

    # -- pipeline ---------------------------------------------------------

    def _refine(self, value: Any) -> Result[Any, Issue]:
        ctx = RefineContext(input=value, schema_kind=self.kind)
        current: Result[Any, Issue] = Ok(value)
        for fn in self._refines:
            current = _callback_result(fn, current.value, ctx, RefineIssue, self.kind)
            if isinstance(current, Err):
                return current
        return current

    def _validate(self, value: Any) -> Result[T, Issue]:
        parsed = self._parse(value)
        if isinstance(parsed, Err):
            return parsed
        return self._check(value, parsed.value)

    def _parse(self, value: Any) -> Result[T, Issue]:
        raise NotImplementedError

    def _check(self, value: Any, output: T) -> Result[T, Issue]:
        ctx = CheckContext(input=value, output=output, schema_kind=self.kind)
        for fn, message in self._checks:
            outcome = _callback_result(
                fn, output, ctx, CheckIssue, self.kind, message or CHECK_MESSAGE
            )
            if isinstance(outcome, Err):
                return outcome
        return Ok(output)

    def _copy_stages(self, other: Schema) -> None:
        other._refines = list(self._refines)
        other._checks = list(self._checks)


class RequirableSchema(Schema[T]):
    """Schema that rejects None/MISSING with a configurable RequiredIssue."""

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.required_message: str | None = None

    def required(self: S, message: str) -> S:
        """Set the message used when the value is None or MISSING."""
        self.required_message = message
        return self

    def _required(self) -> Err[RequiredIssue]:
        return Err(RequiredIssue(message=self.required_message or REQUIRED_MESSAGE))
