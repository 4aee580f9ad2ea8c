"""Exception types raised by the disjoint-set structure."""

from collections.abc import Hashable

__all__ = [
    "UnionFindError",
    "NullElementError",
    "UnknownElementError",
]


class UnionFindError(Exception):
    """Base class for disjoint-set errors."""


class NullElementError(UnionFindError, TypeError):
    """Raised when ``None`` is passed where an element is required."""

    def __init__(self, operation: str) -> None:
        """Initialize null element error.

        Parameters
        ----------
        operation : str
            Name of the rejecting operation (e.g., "find").
        """
        super().__init__(f"{operation}() does not accept None as an element")
        self.operation = operation


class UnknownElementError(UnionFindError, KeyError):
    """Raised when an element does not belong to the structure.

    Attributes
    ----------
    element : Hashable
        The element that was looked up.
    position : str | None
        "first" or "second" when raised by a two-argument operation,
        None otherwise.
    """

    def __init__(self, element: Hashable, position: str | None = None) -> None:
        """Initialize unknown element error.

        Parameters
        ----------
        element : Hashable
            Element that is not in the structure.
        position : str | None, optional
            Argument position of the element, by default None.
        """
        if position is None:
            message = f"Element does not belong to this set: {element!r}"
        else:
            message = f"{position.capitalize()} element does not belong to this set: {element!r}"
        super().__init__(message)
        self.element = element
        self.position = position

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
