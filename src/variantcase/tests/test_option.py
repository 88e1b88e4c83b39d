"""Tests for the Option variant.

Validates:
- Case tests and extraction
- Functor and monad laws
- Laziness of map/flat_map on None
- unwrap() failure on None
"""

from __future__ import annotations

import logging
from typing import Callable

import pytest

from variantcase import ErrorCode, NoneOption, Option, Some, UnwrapError
from variantcase.monads import UNWRAP_NONE_MESSAGE


def counting(f: Callable[[int], object]) -> tuple[Callable[[int], object], list[int]]:
    """Wrap f so each call is recorded."""
    calls: list[int] = []

    def wrapped(x: int) -> object:
        calls.append(x)
        return f(x)

    return wrapped, calls


# ═════════════════════════════════════════════════════════════════════════════
# Some
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [42, 0, "", False, [1]])
def test_some_accessors(value: object) -> None:
    option = Option.some(value)

    assert option.is_some() is True
    assert option.is_none() is False
    assert option.unwrap() == value
    assert option.unwrap_or("default") == value


def test_some_tag_and_payload() -> None:
    option = Option.some(42)
    assert isinstance(option, Some)
    assert option.tag == "Some"
    assert option.payload() == {"value": 42}


# ═════════════════════════════════════════════════════════════════════════════
# None
# ═════════════════════════════════════════════════════════════════════════════


def test_none_accessors() -> None:
    option: Option[int] = Option.none()

    assert option.is_some() is False
    assert option.is_none() is True
    assert option.unwrap_or(0) == 0
    assert option.unwrap_or("anything") == "anything"


def test_none_tag_and_payload() -> None:
    option = Option.none()
    assert isinstance(option, NoneOption)
    assert option.tag == "None"
    assert option.payload() == {}
    assert Option.none() == Option.none()


def test_unwrap_none_raises() -> None:
    """unwrap() on None is a programmer error with a fixed message."""
    with pytest.raises(UnwrapError, match="Cannot unwrap None") as exc_info:
        Option.none().unwrap()

    err = exc_info.value
    assert str(err) == UNWRAP_NONE_MESSAGE
    assert err.code is ErrorCode.UNWRAP_NONE
    assert err.fault.operation == "unwrap"
    assert err.fault.variant == "Option"
    assert isinstance(err, RuntimeError)


def test_unwrap_none_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="variantcase.option")
    with pytest.raises(UnwrapError):
        Option.none().unwrap()
    assert any("unwrap() called on None" in r.getMessage() for r in caplog.records)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [0, 1, 21, -7])
def test_map_some(value: int) -> None:
    """fmap f (Some v) = Some (f v)"""
    f: Callable[[int], int] = lambda x: x * 2
    assert Option.some(value).map(f).unwrap() == f(value)


def test_map_none_is_lazy() -> None:
    """map on None returns None without calling f."""
    f, calls = counting(lambda x: x * 2)

    mapped = Option.none().map(f)

    assert mapped.is_none()
    assert calls == []


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Option.some(42).map(lambda x: x) == Option.some(42)
    assert Option.none().map(lambda x: x) == Option.none()


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    option = Option.some(5)
    assert option.map(lambda x: f(g(x))) == option.map(g).map(f)


def test_map_returns_new_instance() -> None:
    """The receiver is never mutated."""
    option = Option.some(3)
    mapped = option.map(lambda x: x + 1)

    assert mapped is not option
    assert option.unwrap() == 3
    assert mapped.unwrap() == 4


def test_map_can_wrap_none_value() -> None:
    """Some(None) is a present value, distinct from the None case."""
    mapped = Option.some(1).map(lambda _: None)
    assert mapped.is_some()
    assert mapped.unwrap() is None


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Option[int]] = lambda x: Option.some(x * 2)
    assert Option.some(42).flat_map(f) == f(42)

    g: Callable[[int], Option[int]] = lambda _: Option.none()
    assert Option.some(42).flat_map(g) == g(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    assert Option.some(42).flat_map(Option.some) == Option.some(42)
    assert Option.none().flat_map(Option.some) == Option.none()


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m = Option.some(5)
    f: Callable[[int], Option[int]] = lambda x: Option.some(x + 1)
    g: Callable[[int], Option[int]] = lambda x: Option.some(x * 2) if x > 3 else Option.none()

    assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


def test_flat_map_no_double_wrapping() -> None:
    result = Option.some(42).flat_map(lambda x: Option.some(x * 2))
    assert result == Option.some(84)
    assert not isinstance(result.unwrap(), Option)


def test_flat_map_some_to_none() -> None:
    assert Option.some(42).flat_map(lambda _: Option.none()).is_none()


def test_flat_map_none_is_lazy() -> None:
    f, calls = counting(lambda x: Option.some(x * 2))

    result = Option.none().flat_map(f)

    assert result.is_none()
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_match_both_cases() -> None:
    handlers = {
        "Some": lambda some: f"Found: {some.value}",
        "None": lambda _: "Nothing",
    }
    assert Option.some(8).match(handlers) == "Found: 8"
    assert Option.none().match(handlers) == "Nothing"


def test_native_match_statement() -> None:
    def render(option: Option[int]) -> str:
        match option:
            case Some(value):
                return f"some {value}"
            case NoneOption():
                return "none"
        return "unreachable"

    assert render(Option.some(1)) == "some 1"
    assert render(Option.none()) == "none"
