"""Option variant for explicit absence of a value.

Implements a two-case family with a small set of combinators:
- Case tests: is_some, is_none
- Extraction: unwrap, unwrap_or
- Functor: map
- Monad: flat_map (bind)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar

from ..core import Variant
from ..errors import ErrorCode, UnwrapError

logger = logging.getLogger("variantcase.option")

T = TypeVar("T")  # Held value type
U = TypeVar("U")  # Mapped value type

UNWRAP_NONE_MESSAGE = "Cannot unwrap None: called unwrap() on an empty Option"


class Option(Variant, Generic[T], cases=("Some", "None")):
    """Discriminated union representing a value (Some) or its absence (None).

    The `None` case is implemented by `NoneOption`, since `None` is reserved
    in Python; its tag is still `"None"`.

    Examples:
        >>> Option.some(8).map(lambda x: x * 2).unwrap()
        16
        >>> Option.none().unwrap_or(0)
        0
        >>> Option.some(4).flat_map(lambda x: Option.some(x + 1) if x > 3 else Option.none())
        Some(value=5)

    Notes:
        - Immutable: map/flat_map always return new instances
        - map/flat_map never call `f` on None
    """

    # ─────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def some(value: T) -> Option[T]:
        """Construct Some variant (present value)."""
        return Some(value)

    @staticmethod
    def none() -> Option[T]:
        """Construct None variant (absent value)."""
        return NoneOption()

    # ─────────────────────────────────────────────────────────────────
    # Case Tests
    # ─────────────────────────────────────────────────────────────────

    def is_some(self) -> bool:
        """Check if Option is Some variant."""
        raise NotImplementedError

    def is_none(self) -> bool:
        """Check if Option is None variant."""
        raise NotImplementedError

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Some value, panic on None.

        Raises:
            UnwrapError: If Option is None
        """
        raise NotImplementedError

    def unwrap_or(self, default: T) -> T:
        """Extract Some value or return default."""
        raise NotImplementedError

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Map function over Some value (Functor).

        Type signature: Option[T] -> (T -> U) -> Option[U]
        """
        return self.match({
            "Some": lambda some: Option.some(f(some.value)),
            "None": lambda _: Option.none(),
        })

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind (>>=): chain operations that may produce nothing.

        `f` returns an Option, which is passed through without re-wrapping.

        Type signature: Option[T] -> (T -> Option[U]) -> Option[U]
        """
        return self.match({
            "Some": lambda some: f(some.value),
            "None": lambda _: Option.none(),
        })


@dataclass(frozen=True)
class Some(Option[T], tag="Some"):
    """Present case. Payload: `value`."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class NoneOption(Option[T], tag="None"):
    """Absent case. No payload."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        logger.debug("unwrap() called on None")
        raise UnwrapError.create(
            ErrorCode.UNWRAP_NONE,
            UNWRAP_NONE_MESSAGE,
            operation="unwrap",
            variant="Option",
        )

    def unwrap_or(self, default: T) -> T:
        return default
