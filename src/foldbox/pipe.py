"""Forward pipe helper."""

from collections.abc import Callable
from typing import Any


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Thread `value` through `funcs` from left to right.

    ``pipe(x, f, g)`` is ``g(f(x))``. With no functions, `value` is returned
    unchanged.

    Raises:
        TypeError: If any item of `funcs` is not callable. Nothing is called
            in that case.
    """
    for position, func in enumerate(funcs):
        if not callable(func):
            raise TypeError(
                f"pipe() argument {position + 1} is not callable: {func!r}"
            )
    result = value
    for func in funcs:
        result = func(result)
    return result
