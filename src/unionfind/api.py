"""Public API for grouping related elements.

This module provides high-level helpers on top of UnionFind, enabling:
- Grouping pairs of related elements into connected components
- Reading pairs from JSONL files
- Writing components to JSONL files
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Hashable, Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from unionfind.structure import UnionFind

if TYPE_CHECKING:
    from unionfind.audit.logger import AuditLogger

__all__ = [
    "PairFormatError",
    "compute_component_id",
    "group_pairs",
    "read_pairs_jsonl",
    "write_components_jsonl",
]


class PairFormatError(ValueError):
    """Raised when a pairs file contains a malformed line."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
    ) -> None:
        """Initialize pair format error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number where the error occurred.
        """
        super().__init__(message)
        self.line = line


def group_pairs(
    pairs: Iterable[tuple[Hashable, Hashable]],
    elements: Iterable[Hashable] = (),
    audit_logger: AuditLogger | None = None,
) -> list[list[Any]]:
    """Group elements into connected components.

    Parameters
    ----------
    pairs : Iterable[tuple[Hashable, Hashable]]
        Pairs of related elements. Unseen endpoints are added on demand.
    elements : Iterable[Hashable], optional
        Extra elements to include, each a singleton unless paired.
    audit_logger : AuditLogger | None, optional
        Event logger. If None, no logging.

    Returns
    -------
    list[list[Any]]
        Components with sorted members, sorted by first member. Mixed,
        non-comparable element types are ordered by repr().

    Raises
    ------
    NullElementError
        If any element or pair endpoint is None.
    """
    uf = UnionFind(audit_logger=audit_logger)

    for element in elements:
        uf.add(element)

    for first, second in pairs:
        uf.add(first)
        uf.add(second)
        uf.union(first, second)

    components = [_sorted(component) for component in uf.get_components()]
    return _sorted(components)


def compute_component_id(elements: Sequence[Hashable]) -> str:
    """Compute deterministic component ID from members.

    Parameters
    ----------
    elements : Sequence[Hashable]
        Members of the component.

    Returns
    -------
    str
        Component ID in format "g:{sha256_prefix}".
    """
    content = "\n".join(sorted(json.dumps(element, default=repr) for element in elements))
    hash_digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
    return f"g:{hash_digest[:12]}"


def read_pairs_jsonl(path: str | Path) -> list[tuple[Hashable, Hashable]]:
    """Read element pairs from a JSONL file.

    Each non-blank line must be an object with "a" and "b" keys holding
    strings or numbers. Booleans are rejected because true and false
    would collide with 1 and 0 as elements.

    Parameters
    ----------
    path : str | Path
        Path to JSONL file.

    Returns
    -------
    list[tuple[Hashable, Hashable]]
        Pairs in file order.

    Raises
    ------
    FileNotFoundError
        If path does not exist.
    PairFormatError
        If a line is not valid JSON or lacks string or number "a"/"b" values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Pairs file not found: {path}")

    pairs: list[tuple[Hashable, Hashable]] = []
    with path.open("r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise PairFormatError(f"Invalid JSON at line {line_num}: {e}", line=line_num) from e

            if not isinstance(data, dict) or "a" not in data or "b" not in data:
                raise PairFormatError(
                    f'Line {line_num} must be an object with "a" and "b" keys',
                    line=line_num,
                )
            first, second = data["a"], data["b"]
            for value in (first, second):
                if value is None or isinstance(value, (dict, list)):
                    raise PairFormatError(
                        f"Line {line_num} has a non-scalar element: {value!r}",
                        line=line_num,
                    )
                if isinstance(value, bool):
                    raise PairFormatError(
                        f"Line {line_num} has a boolean element: {value!r}",
                        line=line_num,
                    )
            pairs.append((first, second))

    return pairs


def write_components_jsonl(
    components: Iterable[Sequence[Hashable]],
    path: str | Path,
) -> int:
    """Write components to JSONL file.

    Parameters
    ----------
    components : Iterable[Sequence[Hashable]]
        Components to write.
    path : str | Path
        Output file path. Parent directories are created.

    Returns
    -------
    int
        Number of components written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with path.open("w", encoding="utf-8") as f:
        for component in components:
            payload = {
                "component_id": compute_component_id(component),
                "size": len(component),
                "elements": list(component),
            }
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
            count += 1

    return count


def _sorted(items: Iterable[Any]) -> list[Any]:
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)
