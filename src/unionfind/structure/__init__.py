"""Disjoint-set (union-find) structure.

Tracks a growing universe of elements partitioned into equivalence
classes. Classes are merged with union by rank; lookups walk the parent
chain without path compression.
"""

from unionfind.structure.config import UnionFindConfig
from unionfind.structure.errors import (
    NullElementError,
    UnionFindError,
    UnknownElementError,
)
from unionfind.structure.factory import create_union_find, empty, from_elements
from unionfind.structure.union_find import UnionFind

__all__ = [
    "UnionFind",
    "UnionFindConfig",
    "UnionFindError",
    "NullElementError",
    "UnknownElementError",
    "create_union_find",
    "empty",
    "from_elements",
]
