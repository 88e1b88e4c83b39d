"""Examples of variant-based modeling in variantcase.

Demonstrates:
- Result for recoverable failure (division)
- Option for absence (searching a list)
- A user-defined family (Shape) built on the same core

Run with `python -m variantcase.monads.examples`.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from ..core import Variant
from ..foundation.logging import configure_logging, get_logger
from .option import Option
from .result import Result

log = get_logger("examples")


def format_number(x: float) -> str:
    """Render integral floats without a fractional part (5.0 -> "5")."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return repr(x)


# ═════════════════════════════════════════════════════════════════════════════
# Example 1: Result
# ═════════════════════════════════════════════════════════════════════════════


def divide(a: float, b: float) -> Result[float, str]:
    """Divide with Result instead of raising ZeroDivisionError."""
    if b == 0:
        return Result.err("Division by zero")
    return Result.ok(a / b)


def describe_result(result: Result[float, str]) -> str:
    return result.match({
        "Ok": lambda ok: f"Result: {format_number(ok.value)}",
        "Err": lambda err: f"Error: {err.error}",
    })


# ═════════════════════════════════════════════════════════════════════════════
# Example 2: Option
# ═════════════════════════════════════════════════════════════════════════════


def find_even(numbers: Iterable[int]) -> Option[int]:
    """First even number, or None."""
    for n in numbers:
        if n % 2 == 0:
            return Option.some(n)
    return Option.none()


# ═════════════════════════════════════════════════════════════════════════════
# Example 3: User-Defined Variant
# ═════════════════════════════════════════════════════════════════════════════


class Shape(Variant, cases=("Circle", "Rectangle", "Triangle")):
    """Closed family of plane shapes."""

    @staticmethod
    def circle(radius: float) -> Shape:
        return Circle(radius)

    @staticmethod
    def rectangle(width: float, height: float) -> Shape:
        return Rectangle(width, height)

    @staticmethod
    def triangle(base: float, height: float) -> Shape:
        return Triangle(base, height)


@dataclass(frozen=True)
class Circle(Shape, tag="Circle"):
    radius: float


@dataclass(frozen=True)
class Rectangle(Shape, tag="Rectangle"):
    width: float
    height: float


@dataclass(frozen=True)
class Triangle(Shape, tag="Triangle"):
    base: float
    height: float


def area(shape: Shape) -> float:
    return shape.match(
        Circle=lambda c: math.pi * c.radius * c.radius,
        Rectangle=lambda r: r.width * r.height,
        Triangle=lambda t: 0.5 * t.base * t.height,
    )


def describe(shape: Shape) -> str:
    return shape.match(
        Circle=lambda c: f"Circle with radius {format_number(c.radius)}",
        Rectangle=lambda r: f"Rectangle with width {format_number(r.width)} and height {format_number(r.height)}",
        Triangle=lambda t: f"Triangle with base {format_number(t.base)} and height {format_number(t.height)}",
    )


# ═════════════════════════════════════════════════════════════════════════════
# Running Examples
# ═════════════════════════════════════════════════════════════════════════════


def main() -> int:
    """Print every example to stdout. Returns the process exit code."""
    configure_logging()
    log.debug("Running examples")

    for result in (divide(10, 2), divide(1, 0), divide(7, 3)):
        print(describe_result(result))

    even = find_even([1, 3, 5, 7, 8, 9])
    print(even.match({
        "Some": lambda some: f"Found even number: {some.value}",
        "None": lambda _: "No even number found",
    }))
    print("Is Some?", even.is_some())
    print("Is None?", even.is_none())
    print("Unwrapped even number (or default):", even.unwrap_or(0))

    print("Doubled even number:")
    print(even.map(lambda x: x * 2).match({
        "Some": lambda some: str(some.value),
        "None": lambda _: "No even number to double",
    }))

    for shape in (Shape.circle(5), Shape.rectangle(4, 6), Shape.triangle(3, 4)):
        print(describe(shape))

    return 0


if __name__ == "__main__":
    sys.exit(main())
