"""Union-Find (Disjoint Set Union) data structure with union by rank."""

from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, NoReturn

from unionfind.structure.config import UnionFindConfig
from unionfind.structure.errors import NullElementError, UnknownElementError

if TYPE_CHECKING:
    from unionfind.audit.logger import AuditLogger

__all__ = ["UnionFind"]


class UnionFind:
    """Union-Find data structure with union by rank and no path compression.

    Every find() walks the full parent chain from the element to its root.
    Tree height stays logarithmic because union() always hangs the lower
    rank root under the higher rank one.

    Elements are stored by hash/equality; root checks and the same-element
    short-circuit in union() compare by identity.

    Attributes
    ----------
    parent : Mapping[Hashable, Hashable]
        Read-only view of the parent pointers.
    rank : Mapping[Hashable, int]
        Read-only view of the ranks. Only root entries are meaningful.
    allow_find_return_null : bool
        Whether find() returns None for unknown elements.
    """

    def __init__(
        self,
        config: UnionFindConfig | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> None:
        """Initialize structure from configuration.

        Parameters
        ----------
        config : UnionFindConfig | None, optional
            Initial elements and find() behavior. Defaults to an empty
            structure that raises on unknown elements.
        audit_logger : AuditLogger | None, optional
            Event logger. If None, no logging.

        Raises
        ------
        NullElementError
            If initial elements contain None.
        """
        if config is None:
            config = UnionFindConfig()

        self._audit_logger = audit_logger
        self._allow_find_return_null = config.allow_find_return_null

        parent: dict[Hashable, Hashable] = {}
        rank: dict[Hashable, int] = {}
        if None in config.initial_elements:
            self._fail(NullElementError("UnionFind"))
        for element in config.initial_elements:
            self._insert(parent, rank, element)

        self._parent = parent
        self._rank = rank

    @property
    def parent(self) -> Mapping[Hashable, Hashable]:
        return MappingProxyType(self._parent)

    @property
    def rank(self) -> Mapping[Hashable, int]:
        return MappingProxyType(self._rank)

    @property
    def allow_find_return_null(self) -> bool:
        return self._allow_find_return_null

    def __len__(self) -> int:
        return len(self._parent)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._parent)

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __repr__(self) -> str:
        return f"UnionFind(elements={len(self._parent)}, components={len(self.get_components())})"

    def contains(self, element: object) -> bool:
        """Check whether element belongs to the structure.

        None is never a member; it is reported as absent rather than
        rejected.

        Parameters
        ----------
        element : object
            Element to look up.

        Returns
        -------
        bool
            True if element has been added.
        """
        if element is None:
            return False
        try:
            return element in self._parent
        except TypeError:
            # unhashable values cannot be members
            return False

    def add(self, element: Hashable) -> None:
        """Add element as a singleton class. No-op if already present.

        Parameters
        ----------
        element : Hashable
            Element to add.

        Raises
        ------
        NullElementError
            If element is None.
        """
        self._require_element(element, "add")
        if element in self._parent:
            return
        self._insert(self._parent, self._rank, element)

    def find(self, element: Hashable) -> Hashable | None:
        """Find root of the class containing element.

        Parameters
        ----------
        element : Hashable
            Element to resolve.

        Returns
        -------
        Hashable | None
            Representative of the class, or None if element is unknown
            and allow_find_return_null is set.

        Raises
        ------
        NullElementError
            If element is None.
        UnknownElementError
            If element is unknown and allow_find_return_null is not set.
        """
        self._require_element(element, "find")

        parent = self._parent.get(element)
        if parent is None:
            if self._allow_find_return_null:
                return None
            self._fail(UnknownElementError(element))

        return self._find_root(element, parent)

    def union(self, first: Hashable, second: Hashable) -> None:
        """Merge the classes containing first and second using union by rank.

        On equal ranks the root of first becomes the root of the merged
        class and its rank grows by one.

        Parameters
        ----------
        first : Hashable
            First element.
        second : Hashable
            Second element.

        Raises
        ------
        NullElementError
            If either element is None.
        UnknownElementError
            If either element is unknown, whatever allow_find_return_null is.
        """
        self._require_known_pair(first, second, "union")

        if first is second:
            return

        root_first = self._find_root(first, self._parent[first])
        root_second = self._find_root(second, self._parent[second])
        if root_first is root_second:
            return

        rank_first = self._rank[root_first]
        rank_second = self._rank[root_second]
        if rank_first < rank_second:
            root, absorbed = root_second, root_first
        elif rank_first > rank_second:
            root, absorbed = root_first, root_second
        else:
            root, absorbed = root_first, root_second
            self._rank[root_first] = rank_first + 1

        self._parent[absorbed] = root

        if self._audit_logger is not None:
            self._audit_logger.sets_merged(root, absorbed, self._rank[root])

    def connected(self, first: Hashable, second: Hashable) -> bool:
        """Check whether first and second belong to the same class.

        Parameters
        ----------
        first : Hashable
            First element.
        second : Hashable
            Second element.

        Returns
        -------
        bool
            True if both elements share a root.

        Raises
        ------
        NullElementError
            If either element is None.
        UnknownElementError
            If either element is unknown.
        """
        self._require_known_pair(first, second, "connected")
        root_first = self._find_root(first, self._parent[first])
        return root_first is self._find_root(second, self._parent[second])

    def get_components(self) -> list[list[Hashable]]:
        """Get all classes.

        Returns
        -------
        list[list[Hashable]]
            List of classes, each a list of elements in insertion order.
        """
        components_dict: dict[Hashable, list[Hashable]] = {}

        for element, parent in self._parent.items():
            root = self._find_root(element, parent)
            components_dict.setdefault(root, []).append(element)

        return list(components_dict.values())

    def _find_root(self, element: Hashable, parent: Hashable) -> Hashable:
        if parent is element:
            return element
        return self._find_root(parent, self._parent[parent])

    def _insert(
        self,
        parent: dict[Hashable, Hashable],
        rank: dict[Hashable, int],
        element: Hashable,
    ) -> None:
        parent[element] = element
        rank[element] = 0
        if self._audit_logger is not None:
            self._audit_logger.element_added(element)

    def _require_element(self, element: object, operation: str) -> None:
        if element is None:
            self._fail(NullElementError(operation))

    def _require_known_pair(self, first: object, second: object, operation: str) -> None:
        self._require_element(first, operation)
        self._require_element(second, operation)
        if first not in self._parent:
            self._fail(UnknownElementError(first, "first"))
        if second not in self._parent:
            self._fail(UnknownElementError(second, "second"))

    def _fail(self, exc: Exception) -> NoReturn:
        if self._audit_logger is not None:
            self._audit_logger.error(type(exc).__name__, str(exc))
        raise exc
