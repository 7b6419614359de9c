"""
Choice schemas: literal (one of a set of values) and union (one of a set of schemas).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..issues import Issue, LiteralIssue, UnionIssue
from ..result import Err, Ok, Result
from ..types import is_absent
from .base import RequirableSchema, Schema

logger = logging.getLogger(__name__)


def _same(a: Any, b: Any) -> bool:
    """Exact equality: ``True`` never equals ``1``. A failing ``==`` is no match."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    try:
        return bool(a == b)
    except Exception:
        return False


class LiteralSchema(RequirableSchema[Any]):
    kind = "literal"

    def __init__(self, values: Iterable[Any], message: str | None = None):
        super().__init__(message)
        if isinstance(values, (str, bytes)):
            raise TypeError("Literal values must be a collection, not a single string")
        self.values = tuple(values)
        if not self.values:
            raise ValueError("Literal requires at least one allowed value")

    def _parse(self, value: Any) -> Result[Any, Issue]:
        for allowed in self.values:
            if _same(value, allowed):
                return Ok(value)

        if is_absent(value):
            return self._required()

        msg = self.message or "Value must be one of: " + " | ".join(
            repr(v) for v in self.values
        )
        return Err(LiteralIssue(message=msg))


class UnionSchema(RequirableSchema[Any]):
    """
    First-match union.

    Alternatives are tried in order and the first Ok wins, even if a later one
    would also match.
    """

    kind = "union"

    def __init__(self, options: Sequence[Schema], message: str | None = None):
        super().__init__(message)
        self.options = tuple(options)
        if not self.options:
            raise ValueError("Union requires at least one alternative")
        for option in self.options:
            if not isinstance(option, Schema):
                raise TypeError(
                    f"Union alternatives must be Schemas, got {type(option).__name__}"
                )

    def _parse(self, value: Any) -> Result[Any, Issue]:
        for option in self.options:
            result = option.safe_parse(value)
            if isinstance(result, Ok):
                return result

        logger.debug("No union alternative matched (%d tried)", len(self.options))

        if is_absent(value):
            return self._required()

        # TODO: report each alternative's issue once UnionIssue can carry children
        return Err(UnionIssue(message=self.message or "Value failed union constraints"))
