"""Tagged-union core with exhaustive dispatch.

A family root declares its closed set of case names; each case is a frozen
dataclass bound to exactly one of those names. Every family (Result, Option,
user-defined ones) shares the single `match` implementation below.

Example:
    >>> from dataclasses import dataclass
    >>> from variantcase.core import Variant
    >>>
    >>> class Light(Variant, cases=("On", "Off")):
    ...     pass
    >>>
    >>> @dataclass(frozen=True)
    ... class On(Light, tag="On"):
    ...     brightness: int
    >>>
    >>> @dataclass(frozen=True)
    ... class Off(Light, tag="Off"):
    ...     pass
    >>>
    >>> On(80).match(On=lambda on: on.brightness, Off=lambda _: 0)
    80
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from ..errors import ErrorCode, MatchError, VariantDefinitionError
from ..foundation.config import get_settings

logger = logging.getLogger("variantcase.variant")

R = TypeVar("R")  # Handler result type

Handler = Callable[[Any], R]


class Variant:
    """Base class for tagged unions.

    Subclass with `cases=(...)` to declare a family, then subclass the family
    with `tag="<case>"` once per case. Case classes are expected to be frozen
    dataclasses whose fields form the case payload.

    Notes:
        - The family is closed: each declared name binds exactly one class
        - `tag` is a class-level constant, so it never changes per instance
        - Only classes bound to a tag can be instantiated
    """

    tag: ClassVar[str]
    __variant_root__: ClassVar[type[Variant]]
    __variant_cases__: ClassVar[tuple[str, ...]]
    __variant_members__: ClassVar[dict[str, type[Variant]]]

    def __init_subclass__(
        cls,
        *,
        cases: Iterable[str] | None = None,
        tag: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if cases is not None and tag is not None:
            raise _definition_error(cls, "a class cannot both declare cases and bind a tag")
        if cases is not None:
            _declare_family(cls, tuple(cases))
        elif tag is not None:
            _bind_case(cls, tag)

    def __new__(cls, *args: Any, **kwargs: Any) -> Variant:
        if not isinstance(getattr(cls, "tag", None), str):
            raise _definition_error(cls, f"{cls.__name__} is not bound to a case and cannot be instantiated")
        return object.__new__(cls)

    # ─────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def cases(cls) -> tuple[str, ...]:
        """Declared case names of this family, in declaration order."""
        return _root_of(cls).__variant_cases__

    @classmethod
    def case_type(cls, tag: str) -> type[Variant]:
        """Class bound to `tag`.

        Raises:
            MatchError: If the family declares no such case or it is not defined yet
        """
        root = _root_of(cls)
        try:
            return root.__variant_members__[tag]
        except KeyError:
            raise MatchError.create(
                ErrorCode.UNKNOWN_CASE,
                f"{root.__name__} has no case class bound to {tag!r}",
                operation="case_type",
                variant=root.__name__,
                cases=(tag,),
            ) from None

    def payload(self) -> dict[str, Any]:
        """Payload fields of this case as a new dict."""
        if dataclasses.is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        return dict(vars(self))

    # ─────────────────────────────────────────────────────────────────
    # Dispatch
    # ─────────────────────────────────────────────────────────────────

    def match(
        self,
        handlers: Mapping[str, Handler[R]] | None = None,
        /,
        **handlers_kw: Handler[R],
    ) -> R:
        """Invoke the handler registered for this instance's case.

        Handlers come as a mapping, as keyword arguments, or both (keywords
        win on duplicate keys). Every declared case needs a handler; the
        selected one is called once with the instance and its return value
        is returned.

        Raises:
            MatchError: If a case lacks a handler, a handler is not callable,
                or (in strict mode) a key names no declared case

        Example:
            >>> Off().match({"On": lambda on: on.brightness, "Off": lambda _: 0})
            0
        """
        table = {**handlers, **handlers_kw} if handlers else handlers_kw
        check_handlers(type(self), table)
        return table[self.tag](self)


def check_handlers(cls: type[Variant], table: Mapping[str, object]) -> None:
    """Validate a handler table against the family of `cls`.

    Raises:
        MatchError: On missing, unknown (strict mode) or non-callable handlers
    """
    root = _root_of(cls)
    declared = root.__variant_cases__

    missing = tuple(name for name in declared if name not in table)
    if missing:
        raise MatchError.create(
            ErrorCode.NON_EXHAUSTIVE_MATCH,
            f"{root.__name__}.match() is missing handlers for: {', '.join(missing)}",
            operation="match",
            variant=root.__name__,
            cases=missing,
        )

    unknown = tuple(key for key in table if key not in declared)
    if unknown:
        if get_settings().match.strict:
            raise MatchError.create(
                ErrorCode.UNKNOWN_CASE,
                f"{root.__name__} declares no case named: {', '.join(unknown)}",
                operation="match",
                variant=root.__name__,
                cases=unknown,
            )
        logger.debug("Ignoring handlers for undeclared cases of %s: %s", root.__name__, unknown)

    uncallable = tuple(name for name in declared if not callable(table[name]))
    if uncallable:
        raise MatchError.create(
            ErrorCode.INVALID_HANDLER,
            f"{root.__name__}.match() handlers are not callable for: {', '.join(uncallable)}",
            operation="match",
            variant=root.__name__,
            cases=uncallable,
        )


# ═════════════════════════════════════════════════════════════════════════════
# Family Registration
# ═════════════════════════════════════════════════════════════════════════════


def _declare_family(cls: type[Variant], cases: tuple[str, ...]) -> None:
    if any("__variant_root__" in vars(base) for base in cls.__mro__[1:]):
        raise _definition_error(cls, f"{cls.__name__} already belongs to a family and cannot declare cases")
    if not cases:
        raise _definition_error(cls, f"{cls.__name__} must declare at least one case")
    if not all(isinstance(name, str) and name for name in cases):
        raise _definition_error(cls, f"{cls.__name__} case names must be non-empty strings")
    if len(set(cases)) != len(cases):
        raise _definition_error(cls, f"{cls.__name__} declares duplicate case names: {cases}")

    cls.__variant_root__ = cls
    cls.__variant_cases__ = cases
    cls.__variant_members__ = {}
    logger.debug("Declared variant family %s with cases %s", cls.__name__, cases)


def _bind_case(cls: type[Variant], tag: str) -> None:
    root = getattr(cls, "__variant_root__", None)
    if root is None:
        raise _definition_error(cls, f"{cls.__name__} binds tag {tag!r} but extends no variant family")
    if tag not in root.__variant_cases__:
        raise _definition_error(
            cls,
            f"{root.__name__} declares no case named {tag!r} (declared: {', '.join(root.__variant_cases__)})",
            variant=root.__name__,
        )
    if tag in root.__variant_members__:
        bound = root.__variant_members__[tag]
        raise _definition_error(
            cls,
            f"{root.__name__} case {tag!r} is already bound to {bound.__name__}",
            variant=root.__name__,
        )

    cls.tag = tag
    root.__variant_members__[tag] = cls
    logger.debug("Bound case %s.%s to %s", root.__name__, tag, cls.__name__)


def _root_of(cls: type[Variant]) -> type[Variant]:
    root = getattr(cls, "__variant_root__", None)
    if root is None:
        raise _definition_error(cls, f"{cls.__name__} does not belong to a variant family")
    return root


def _definition_error(cls: type, message: str, *, variant: str | None = None) -> VariantDefinitionError:
    return VariantDefinitionError.create(  # type: ignore[return-value]
        ErrorCode.INVALID_VARIANT,
        message,
        operation="define",
        variant=variant or cls.__name__,
    )
