"""Factory functions for building UnionFind instances."""

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING

from unionfind.structure.config import UnionFindConfig
from unionfind.structure.union_find import UnionFind

if TYPE_CHECKING:
    from unionfind.audit.logger import AuditLogger

__all__ = ["create_union_find", "empty", "from_elements"]


def create_union_find(
    config: UnionFindConfig,
    audit_logger: "AuditLogger | None" = None,
) -> UnionFind:
    """Create a UnionFind from configuration.

    Parameters
    ----------
    config : UnionFindConfig
        Initial elements and find() behavior.
    audit_logger : AuditLogger | None, optional
        Event logger. If None, no logging.

    Returns
    -------
    UnionFind
        New structure with every initial element in its own class.
    """
    return UnionFind(config, audit_logger=audit_logger)


def empty(
    *,
    allow_find_return_null: bool = False,
    audit_logger: "AuditLogger | None" = None,
) -> UnionFind:
    """Create an empty UnionFind."""
    config = UnionFindConfig(allow_find_return_null=allow_find_return_null)
    return create_union_find(config, audit_logger=audit_logger)


def from_elements(
    elements: Iterable[Hashable],
    *,
    allow_find_return_null: bool = False,
    audit_logger: "AuditLogger | None" = None,
) -> UnionFind:
    """Create a UnionFind with each of elements as a singleton class.

    Parameters
    ----------
    elements : Iterable[Hashable]
        Initial elements. None is rejected.
    allow_find_return_null : bool, optional
        Return None from find() for unknown elements, by default False.
    audit_logger : AuditLogger | None, optional
        Event logger. If None, no logging.

    Returns
    -------
    UnionFind
        New structure.

    Raises
    ------
    NullElementError
        If elements contain None.
    """
    config = UnionFindConfig(
        initial_elements=frozenset(elements),
        allow_find_return_null=allow_find_return_null,
    )
    return create_union_find(config, audit_logger=audit_logger)
