"""
Standard-schema adapter.

Exposes a schema as a ``{version, vendor, validate}`` descriptor so libraries
that speak the standard-schema protocol can use warden schemas directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .result import Ok

if TYPE_CHECKING:
    from .schemas.base import Schema

VENDOR = "warden"
VERSION = 1


@dataclass(frozen=True, slots=True)
class StandardSchema:
    schema: Schema
    version: int = VERSION
    vendor: str = VENDOR

    def validate(self, value: Any) -> dict[str, Any]:
        """
        Returns:
            {"value": output} if validation passes
            {"issues": [issue]} if validation fails
        """
        result = self.schema.safe_parse(value)
        if isinstance(result, Ok):
            return {"value": result.value}
        return {"issues": [result.error]}
