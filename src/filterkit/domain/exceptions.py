"""Domain exceptions: all public errors of filterkit.

All exceptions visible to users are defined here.
Errors raised by user predicates are never wrapped: they propagate as-is.
"""


class FilterKitError(Exception):
    """Base for all filterkit error exceptions.

    Allows: except FilterKitError to catch all library errors.
    """


class InvalidFilterError(FilterKitError, TypeError):
    """Filter must be callable.

    Raised when a combinator receives a non-callable sub-filter (None included).
    Inherits TypeError for semantic correctness.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"filter must be callable, got {got.__name__}")


class InvalidFractionError(FilterKitError, ValueError):
    """Sampling fraction must be a real number in [0, 1].

    Inherits ValueError for semantic correctness.

    Attributes:
        fraction: Value received.
    """

    def __init__(self, fraction: object) -> None:
        """Initialize with rejected value."""
        self.fraction = fraction
        super().__init__(f"fraction must be a number in [0, 1], got {fraction!r}")


class UnsupportedCollectionError(FilterKitError, TypeError):
    """Collection cannot remove elements in place.

    Raised by retain_all() for anything that is not a MutableSequence
    or MutableSet (tuple, frozenset, str, mapping, iterator).

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(
            f"in-place removal requires MutableSequence or MutableSet, got {got.__name__}"
        )
