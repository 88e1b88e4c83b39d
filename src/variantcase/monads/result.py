"""Result variant for explicit, recoverable error signaling.

A two-case family: `Ok` carries a success value, `Err` carries an error
value. Failure is ordinary data here; callers observe it through `match`
(or native `match` statements), never through exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core import Variant

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class Result(Variant, Generic[T, E], cases=("Ok", "Err")):
    """Discriminated union representing success (Ok) or failure (Err).

    Exactly one case holds per instance and it never changes. Consumption
    goes through `match`, which demands a handler for both cases.

    Examples:
        >>> def divide(a: float, b: float) -> Result[float, str]:
        ...     return Result.err("Division by zero") if b == 0 else Result.ok(a / b)
        >>>
        >>> divide(10, 2).match({
        ...     "Ok": lambda ok: f"Result: {ok.value}",
        ...     "Err": lambda err: f"Error: {err.error}",
        ... })
        'Result: 5.0'

        Native pattern matching works on the case classes:
        >>> match divide(1, 0):
        ...     case Ok(value):
        ...         print(value)
        ...     case Err(error):
        ...         print(error)
        Division by zero
    """

    # ─────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def ok(value: T) -> Result[T, E]:
        """Construct Ok variant (success)."""
        return Ok(value)

    @staticmethod
    def err(error: E) -> Result[T, E]:
        """Construct Err variant (failure)."""
        return Err(error)


@dataclass(frozen=True)
class Ok(Result[T, E], tag="Ok"):
    """Success case. Payload: `value`."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E], tag="Err"):
    """Failure case. Payload: `error`."""

    error: E
