"""Error handling for variantcase.

- ErrorCode: Standard codes for variant misuse
- VariantFault: Frozen, structured description of a failure
- VariantError and subclasses: Exceptions carrying a VariantFault
"""

from .errors import (
    ErrorCode,
    MatchError,
    UnwrapError,
    VariantDefinitionError,
    VariantError,
    VariantFault,
)

__all__ = [
    "ErrorCode", "VariantFault",
    "VariantError", "UnwrapError", "MatchError", "VariantDefinitionError",
]
