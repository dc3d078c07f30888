"""Error definitions for foldbox."""

# ============================================================================
#                           General errors
# ============================================================================


class FoldboxError(Exception):
    """Base class for all foldbox errors."""


# ============================================================================
#                           Done box errors
# ============================================================================


class EmptyBoxError(FoldboxError, LookupError):
    """Raised when unboxing a done box that carries no payload."""

    def __init__(self) -> None:
        super().__init__("Cannot unbox an empty done box.")


class InvalidEmptyFilterError(FoldboxError, TypeError):
    """Raised when the `empty` filter of `is_done_box` is not None or a bool."""

    def __init__(self, value: object) -> None:
        super().__init__(f"`empty` must be None, True or False, got {value!r}.")
        self.value = value


# ============================================================================
#                           Fold driver errors
# ============================================================================


class EmptyInputError(FoldboxError, ValueError):
    """Raised when folding an empty input without an initial value."""

    def __init__(self, function: str) -> None:
        super().__init__(f"{function}() got an empty input and no `init`.")
        self.function = function


class LengthMismatchError(FoldboxError, ValueError):
    """Raised when the second input of a two-input fold has the wrong length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"`y` must have length {expected}, not {actual}.")
        self.expected = expected
        self.actual = actual


class InvalidDirectionError(FoldboxError, ValueError):
    """Raised when a fold direction is neither "forward" nor "backward"."""

    def __init__(self, direction: object) -> None:
        super().__init__(
            f"`direction` must be 'forward' or 'backward', got {direction!r}."
        )
        self.direction = direction


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidLogLevelError(FoldboxError, ValueError):
    """Raised when a log level name cannot be resolved."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Invalid log level: {level}")
        self.level = level
