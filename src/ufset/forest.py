"""Node forest: root finding and linking for disjoint-set trees.

Each key owns one ``SetNode``. A node whose parent is itself is a root and
identifies its group. Nodes are created and owned by a ``DisjointSets``
container; the container decides which find/union policy applies.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from ufset.errors import CrossContainerUnionError

if TYPE_CHECKING:
    from ufset.disjoint_sets import DisjointSets

__all__ = ["SetNode"]

K = TypeVar("K", bound=Hashable)


class SetNode(Generic[K]):
    """A node in a disjoint-set forest.

    Attributes
    ----------
    key : K
        Key this node represents. Never changes.
    rank : int
        Balancing heuristic for union by rank. Not a true height once
        paths have been compressed.
    parent : SetNode[K]
        Parent node; ``self`` for a root.
    owner : DisjointSets[K]
        Container that created this node.
    """

    __slots__ = ("_key", "rank", "parent", "owner")

    def __init__(self, key: K, owner: DisjointSets[K]) -> None:
        self._key = key
        self.rank = 0
        self.parent: SetNode[K] = self
        self.owner = owner

    @property
    def key(self) -> K:
        return self._key

    @property
    def is_root(self) -> bool:
        return self.parent is self

    def __repr__(self) -> str:
        return f"SetNode(key={self._key!r}, rank={self.rank}, parent={self.parent._key!r})"

    def find(self, path_compress: bool) -> SetNode[K]:
        """Find the root of the tree containing this node.

        Parameters
        ----------
        path_compress : bool
            If True, point every node on the walked path directly at the
            root. If False, the forest is left untouched.

        Returns
        -------
        SetNode[K]
            Root node.
        """
        root = self
        while root.parent is not root:
            root = root.parent

        if path_compress:
            node = self
            while node is not root:
                next_node = node.parent
                node.parent = root
                node = next_node

        return root

    def union(
        self,
        other: SetNode[K],
        path_compress: bool,
        union_by_rank: bool,
    ) -> SetNode[K] | None:
        """Merge the trees containing this node and ``other``.

        Parameters
        ----------
        other : SetNode[K]
            Node to merge with. Must belong to the same container.
        path_compress : bool
            Compress both find paths and link root to root.
        union_by_rank : bool
            Balance by rank. Requires ``path_compress``.

        Returns
        -------
        SetNode[K] | None
            The root that was attached under another node, or None when
            both nodes were already in the same tree.

        Raises
        ------
        CrossContainerUnionError
            If ``other`` was created by a different container.
        ValueError
            If ``union_by_rank`` is requested without ``path_compress``.

        Notes
        -----
        Without compression the absorbed root is linked under this node
        itself rather than under its root, so the forest records which node
        triggered every merge.
        """
        if self.owner is not other.owner:
            raise CrossContainerUnionError(self._key, other._key)
        if union_by_rank and not path_compress:
            raise ValueError("union_by_rank requires path_compress")

        root_a = self.find(path_compress)
        root_b = other.find(path_compress)
        if root_a is root_b:
            return None

        if not path_compress:
            root_b.parent = self
            return root_b

        if not union_by_rank:
            root_b.parent = root_a
            return root_b

        if root_a.rank < root_b.rank:
            root_a.parent = root_b
            return root_a

        root_b.parent = root_a
        if root_a.rank == root_b.rank:
            root_a.rank += 1
        return root_b
