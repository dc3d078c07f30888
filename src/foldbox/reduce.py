"""Fold drivers that honour done boxes.

`reduce` and `accumulate` fold one input; `reduce2` and `accumulate2` fold
two inputs in lockstep. A step function may return a done box (see
`foldbox.box.done`) to stop the fold: the driver consumes no further input,
replaces the accumulator with the box payload if there is one, and returns.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Literal

from .box import DoneBox
from .errors import EmptyInputError, InvalidDirectionError, LengthMismatchError
from .sentinel import MISSING, Missable, is_missing

logger = logging.getLogger(__name__)

type Direction = Literal["forward", "backward"]
DIRECTIONS = ("forward", "backward")


def _is_backward(direction: str) -> bool:
    if direction not in DIRECTIONS:
        raise InvalidDirectionError(direction)
    return direction == "backward"


def _seed(items: Iterator[Any], init: Missable[Any], function: str) -> Any:
    if not is_missing(init):
        return init
    try:
        return next(items)
    except StopIteration:
        raise EmptyInputError(function) from None


def _scan(
    items: Iterator[Any],
    call: Callable[[Any, Any], Any],
    acc: Any,
    function: str,
) -> Iterator[Any]:
    """Yield the seed and every accumulator after it, stopping on a done box."""
    yield acc
    for count, item in enumerate(items, start=1):
        result = call(acc, item)
        if isinstance(result, DoneBox):
            logger.debug(
                "%s() stopped early at step %d (empty box: %s)",
                function,
                count,
                result.is_empty,
            )
            if not result.is_empty:
                yield result.unbox()
            return
        acc = result
        yield acc


def _last(values: Iterable[Any]) -> Any:
    last = MISSING
    for last in values:
        pass
    return last


def _fold(
    x: Iterable[Any],
    step: Callable[[Any, Any], Any],
    init: Missable[Any],
    direction: Direction,
    function: str,
) -> Iterator[Any]:
    if _is_backward(direction):
        items = reversed(list(x))
        call = _flip(step)
    else:
        items = iter(x)
        call = step
    return _scan(items, call, _seed(items, init, function), function)


def _flip(step: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def flipped(acc: Any, item: Any) -> Any:
        return step(item, acc)

    return flipped


def _fold2(
    x: Sequence[Any],
    y: Sequence[Any],
    step: Callable[[Any, Any, Any], Any],
    init: Missable[Any],
    function: str,
) -> Iterator[Any]:
    expected = len(x) if not is_missing(init) else max(len(x) - 1, 0)
    if len(y) != expected:
        raise LengthMismatchError(expected, len(y))
    xs = iter(x)
    acc = _seed(xs, init, function)

    def call(acc: Any, pair: tuple[Any, Any]) -> Any:
        return step(acc, *pair)

    return _scan(zip(xs, y), call, acc, function)


def reduce(
    x: Iterable[Any],
    step: Callable[[Any, Any], Any],
    init: Missable[Any] = MISSING,
    *,
    direction: Direction = "forward",
) -> Any:
    """Fold `x` into a single value.

    Args:
        x: The input to fold. Only a backward fold reads it all up front.
        step: Called as ``step(acc, item)`` for a forward fold and
            ``step(item, acc)`` for a backward one. May return a done box to
            stop early.
        init: Initial accumulator. If omitted, the first element is used.
        direction: "forward" folds from the left, "backward" from the right,
            so ``reduce([1, 2, 3], f, direction="backward")`` is
            ``f(1, f(2, 3))``.

    Returns:
        The final accumulator.

    Raises:
        EmptyInputError: If `x` is empty and `init` is omitted.
        InvalidDirectionError: If `direction` is not recognised.
    """
    return _last(_fold(x, step, init, direction, "reduce"))


def accumulate(
    x: Iterable[Any],
    step: Callable[[Any, Any], Any],
    init: Missable[Any] = MISSING,
    *,
    direction: Direction = "forward",
) -> list[Any]:
    """Fold `x` and keep every intermediate accumulator.

    Takes the same arguments as `reduce`. The result starts with the seed.
    A done box with a payload adds that payload as the last entry. An empty
    done box ends the list at the previous accumulator. Backward results
    are reversed so entries line up with the input.

    Returns:
        The list of accumulators.
    """
    values = list(_fold(x, step, init, direction, "accumulate"))
    if direction == "backward":
        values.reverse()
    return values


def reduce2(
    x: Sequence[Any],
    y: Sequence[Any],
    step: Callable[[Any, Any, Any], Any],
    init: Missable[Any] = MISSING,
) -> Any:
    """Fold `x` and `y` together, calling ``step(acc, x_i, y_i)``.

    With `init`, `y` must be as long as `x`. Without it, ``x[0]`` seeds the
    accumulator and `y` must have one element fewer than `x`.

    Raises:
        LengthMismatchError: If `y` has the wrong length.
        EmptyInputError: If `x` is empty and `init` is omitted.
    """
    return _last(_fold2(x, y, step, init, "reduce2"))


def accumulate2(
    x: Sequence[Any],
    y: Sequence[Any],
    step: Callable[[Any, Any, Any], Any],
    init: Missable[Any] = MISSING,
) -> list[Any]:
    """Accumulating form of `reduce2`."""
    return list(_fold2(x, y, step, init, "accumulate2"))
