"""Structured errors for variant misuse.

Provides error codes and a frozen fault model carried by every exception the
library raises. Modeled failure (Err, None) is plain data and never lands here;
these exceptions signal programmer error only.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ErrorCode(StrEnum):
    """Machine-readable classification of variant misuse."""
    UNWRAP_NONE = "UNWRAP_NONE"
    NON_EXHAUSTIVE_MATCH = "NON_EXHAUSTIVE_MATCH"
    UNKNOWN_CASE = "UNKNOWN_CASE"
    INVALID_HANDLER = "INVALID_HANDLER"
    INVALID_VARIANT = "INVALID_VARIANT"


_PROGRAMMER_ERRORS: frozenset[ErrorCode] = frozenset(ErrorCode)


class VariantFault(BaseModel):
    """Description of a failed variant operation.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        operation: Operation that failed (e.g. "unwrap", "match")
        variant: Name of the variant family involved, if known
        cases: Case names relevant to the failure (missing, unknown, ...)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Variant Fault",
            "description": "Structured description of variant misuse",
            "examples": [{
                "code": "UNWRAP_NONE",
                "message": "Cannot unwrap None: called unwrap() on an empty Option",
                "operation": "unwrap",
                "variant": "Option",
            }],
        },
    )

    code: ErrorCode
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    operation: Annotated[str, Field(min_length=1, description="Operation that failed")]
    variant: str | None = Field(default=None, description="Variant family name")
    cases: tuple[str, ...] = Field(default=(), description="Case names involved")

    @computed_field
    @property
    def is_programmer_error(self) -> bool:
        """Whether the fault signals misuse rather than an expected outcome."""
        return self.code in _PROGRAMMER_ERRORS

    def render(self) -> str:
        """Format as `[CODE] operation: message`."""
        return f"[{self.code}] {self.operation}: {self.message}"


class VariantError(Exception):
    """Base exception for variant misuse. Carries a VariantFault."""

    def __init__(self, fault: VariantFault) -> None:
        super().__init__(fault.message)
        self.fault = fault

    @classmethod
    def create(
        cls,
        code: ErrorCode,
        message: str,
        *,
        operation: str,
        variant: str | None = None,
        cases: tuple[str, ...] = (),
    ) -> VariantError:
        """Build exception and fault in one call."""
        return cls(VariantFault(code=code, message=message, operation=operation, variant=variant, cases=cases))

    @property
    def code(self) -> ErrorCode:
        return self.fault.code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fault.render()!r})"


class UnwrapError(VariantError, RuntimeError):
    """Raised when extracting a value from an empty Option."""


class MatchError(VariantError, TypeError):
    """Raised when a handler set does not line up with a family's cases."""


class VariantDefinitionError(VariantError, TypeError):
    """Raised for malformed family or case declarations."""
