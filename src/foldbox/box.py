"""Done boxes: early-termination signals for fold steps.

A fold step returns a done box to tell the driver to stop iterating. The box
is a small sum type with two variants:

* `Done` carries a payload that replaces the accumulator.
* `EmptyDone` carries nothing, and the driver keeps its current accumulator.

Boxes are created with `done`, recognised with `is_done_box`, and opened with
`unbox`. They are never stored by the driver beyond the check that follows the
step call.
"""

import abc
from dataclasses import dataclass
from typing import Any, ClassVar

from rich.console import Console

from .errors import EmptyBoxError, InvalidEmptyFilterError
from .sentinel import MISSING, Missable, is_missing

# pylint: disable=too-few-public-methods

DONE_MARKER = "<done>"
EMPTY_MARKER = "<empty>"


class DoneBox(abc.ABC):
    """Base type for termination signals returned from fold steps."""

    __slots__ = ()

    is_done: ClassVar[bool] = True

    @property
    @abc.abstractmethod
    def is_empty(self) -> bool:
        """Whether the box carries no payload."""

    @abc.abstractmethod
    def unbox(self) -> Any:
        """Return the payload.

        Raises:
            EmptyBoxError: If the box is empty.
        """


@dataclass(frozen=True, slots=True)
class Done(DoneBox):
    """A done box carrying a replacement accumulator."""

    payload: Any

    @property
    def is_empty(self) -> bool:
        return False

    def unbox(self) -> Any:
        return self.payload

    def __repr__(self) -> str:
        return f"Done({self.payload!r})"


@dataclass(frozen=True, slots=True)
class EmptyDone(DoneBox):
    """A done box without a payload."""

    @property
    def payload(self) -> Missable[Any]:
        """Always ``MISSING``."""
        return MISSING

    @property
    def is_empty(self) -> bool:
        return True

    def unbox(self) -> Any:
        raise EmptyBoxError

    def __repr__(self) -> str:
        return "EmptyDone()"


def done(value: Missable[Any] = MISSING) -> DoneBox:
    """Box a final value for early termination.

    Args:
        value: The value to box. Omit it to signal termination without a
            replacement value. ``None`` is a value like any other.

    Returns:
        `EmptyDone` when no value is given, `Done` otherwise.

    Example:
        ```py
        reduce([1, 2, 3], lambda acc, x: done(acc) if x > 1 else acc + x, 0)
        ```
    """
    if is_missing(value):
        return EmptyDone()
    return Done(value)


def is_done_box(x: object, empty: bool | None = None) -> bool:
    """Test whether `x` is a done box.

    Args:
        x: The value to test.
        empty: If None, match any done box. If True, match only empty
            boxes. If False, match only boxes carrying a payload.

    Returns:
        True if `x` is a done box accepted by the `empty` filter.

    Raises:
        InvalidEmptyFilterError: If `empty` is not None, True or False.
    """
    if empty is not None and not isinstance(empty, bool):
        raise InvalidEmptyFilterError(empty)
    if not isinstance(x, DoneBox):
        return False
    if empty is None:
        return True
    return x.is_empty == empty


def unbox(box: DoneBox) -> Any:
    """Return the payload of `box`.

    Check emptiness first with ``is_done_box(box, empty=True)`` or
    `DoneBox.is_empty`.

    Raises:
        EmptyBoxError: If `box` is empty.
    """
    return box.unbox()


def show(box: DoneBox, console: Console | None = None) -> None:
    """Print a done box for diagnostics.

    Writes the ``<done>`` marker followed by the payload repr, or by
    ``<empty>`` for an empty box.

    Args:
        box: The box to display.
        console: Console to print to. Defaults to a new stdout console.
    """
    console = console or Console()
    body = EMPTY_MARKER if box.is_empty else repr(box.unbox())
    for line in (DONE_MARKER, body):
        console.print(
            line, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
