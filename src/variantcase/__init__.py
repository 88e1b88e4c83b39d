"""variantcase - Tagged unions with exhaustive dispatch for Python.

A small expressiveness library: declare a closed family of cases, give each
case its own payload, and dispatch over them with a single `match` that
refuses incomplete handler sets.

Quick Start (built-in families):
    >>> from variantcase import Option, Result
    >>>
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     return Result.err("Division by zero") if b == 0 else Result.ok(a / b)
    >>>
    >>> divide(10, 2).match({
    ...     "Ok": lambda ok: f"Result: {ok.value}",
    ...     "Err": lambda err: f"Error: {err.error}",
    ... })
    'Result: 5.0'
    >>> Option.none().unwrap_or(0)
    0

User-Defined Families:
    >>> from dataclasses import dataclass
    >>> from variantcase import Variant
    >>>
    >>> class Shape(Variant, cases=("Circle", "Square")):
    ...     pass
    >>>
    >>> @dataclass(frozen=True)
    ... class Circle(Shape, tag="Circle"):
    ...     radius: float
    >>>
    >>> @dataclass(frozen=True)
    ... class Square(Shape, tag="Square"):
    ...     side: float
    >>>
    >>> Square(3).match(Circle=lambda c: 3.14 * c.radius ** 2, Square=lambda s: s.side ** 2)
    9
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import Variant

# Errors
from .errors import ErrorCode, MatchError, UnwrapError, VariantDefinitionError, VariantError, VariantFault

# Built-in families
from .monads import Err, NoneOption, Ok, Option, Result, Some

# Foundation
from .foundation import configure_logging, get_settings

__all__ = [
    "__version__",
    # Core
    "Variant",
    # Result
    "Result", "Ok", "Err",
    # Option
    "Option", "Some", "NoneOption",
    # Errors
    "ErrorCode", "VariantFault", "VariantError", "UnwrapError", "MatchError", "VariantDefinitionError",
    # Foundation
    "configure_logging", "get_settings",
]
