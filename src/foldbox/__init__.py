"""FOLDBOX

Functional helpers built around the done box: a value returned from a fold
step to stop iteration early, with or without a replacement accumulator.
"""

from .box import Done, DoneBox, EmptyDone, done, is_done_box, show, unbox
from .pipe import pipe
from .reduce import accumulate, accumulate2, reduce, reduce2
from .sentinel import MISSING

__all__ = [
    "MISSING",
    "Done",
    "DoneBox",
    "EmptyDone",
    "__version__",
    "accumulate",
    "accumulate2",
    "done",
    "is_done_box",
    "pipe",
    "reduce",
    "reduce2",
    "show",
    "unbox",
]
__version__ = "0.1.0"
