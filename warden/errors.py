"""
Exceptions raised by warden.

Validation failures are values (``Err(issue)``); the exceptions here are for
``parse()`` and for programmer errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .issues import Issue


class WardenError(Exception):
    """Base class for warden exceptions."""


class ParseError(WardenError):
    """
    Raised by ``Schema.parse`` when validation fails.

    The issue tree is kept on ``.issue`` so nothing is lost compared to
    ``safe_parse``.
    """

    def __init__(self, issue: Issue):
        super().__init__(issue.message)
        self.issue = issue

    @property
    def kind(self) -> str:
        return self.issue.kind


class UnwrapError(WardenError, ValueError):
    """Raised when unwrapping the wrong variant of a Result."""
