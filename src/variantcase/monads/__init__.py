"""Built-in variant families.

Example:
    >>> from variantcase.monads import Option, Result
    >>>
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     return Result.err("Division by zero") if b == 0 else Result.ok(a / b)
    >>>
    >>> divide(1, 0).match({"Ok": lambda ok: ok.value, "Err": lambda err: err.error})
    'Division by zero'
    >>> Option.some(21).map(lambda x: x * 2).unwrap()
    42
"""

from .option import UNWRAP_NONE_MESSAGE, NoneOption, Option, Some
from .result import Err, Ok, Result

__all__ = [
    # Result
    "Result",
    "Ok",
    "Err",
    # Option
    "Option",
    "Some",
    "NoneOption",
    "UNWRAP_NONE_MESSAGE",
]
