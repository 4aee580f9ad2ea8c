"""Construction-time configuration for the disjoint-set structure."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["UnionFindConfig"]


@dataclass(frozen=True)
class UnionFindConfig:
    """Immutable configuration for a UnionFind instance.

    Attributes
    ----------
    initial_elements : frozenset[Hashable]
        Elements present from construction, each in its own class.
        Any iterable is accepted and frozen.
    allow_find_return_null : bool
        If True, find() on an unknown element returns None instead of
        raising UnknownElementError, by default False.
    """

    initial_elements: frozenset[Hashable] = field(default_factory=frozenset)
    allow_find_return_null: bool = False

    def __post_init__(self) -> None:
        """Freeze initial elements and validate."""
        if not isinstance(self.initial_elements, frozenset):
            if not isinstance(self.initial_elements, Iterable):
                raise TypeError(
                    f"initial_elements must be iterable, got {type(self.initial_elements).__name__}"
                )
            object.__setattr__(self, "initial_elements", frozenset(self.initial_elements))

        if not isinstance(self.allow_find_return_null, bool):
            raise TypeError(
                "allow_find_return_null must be a bool, "
                f"got {type(self.allow_find_return_null).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "initial_element_count": len(self.initial_elements),
            "allow_find_return_null": self.allow_find_return_null,
        }
