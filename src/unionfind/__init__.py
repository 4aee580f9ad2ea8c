"""Disjoint-set (union-find) structure for dynamic equivalence classes.

This package provides:
- Structure (unionfind.structure): UnionFind, configuration and errors
- Audit (unionfind.audit): JSONL event logging
- Public API (unionfind.api): grouping pairs into components
- CLI (unionfind.cli): command-line interface
"""

__version__ = "0.1.0"
__license__ = "MIT"

from unionfind.api import (
    PairFormatError,
    group_pairs,
    read_pairs_jsonl,
    write_components_jsonl,
)
from unionfind.structure import (
    NullElementError,
    UnionFind,
    UnionFindConfig,
    UnionFindError,
    UnknownElementError,
    create_union_find,
    empty,
    from_elements,
)

__all__ = [
    "__version__",
    "__license__",
    "UnionFind",
    "UnionFindConfig",
    "UnionFindError",
    "NullElementError",
    "UnknownElementError",
    "create_union_find",
    "empty",
    "from_elements",
    "group_pairs",
    "read_pairs_jsonl",
    "write_components_jsonl",
    "PairFormatError",
]
