"""Tree extraction for rigid disjoint-set containers.

A rigid container never restructures its trees, so its parent links
record which node triggered each merge. ``get_tree`` turns those links
into an explicit forest snapshot.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ufset.disjoint_sets import DisjointSets
from ufset.errors import CompressedForestError

__all__ = ["TreeNode", "get_tree", "forest_to_dicts"]

K = TypeVar("K", bound=Hashable)


@dataclass(eq=False)
class TreeNode(Generic[K]):
    """Snapshot of one node and its children.

    Attributes
    ----------
    key : K
        Node key.
    children : list[TreeNode[K]]
        Nodes whose parent link pointed here at extraction time. Order is
        unspecified.
    """

    key: K
    children: list[TreeNode[K]] = field(default_factory=list)

    def iter_keys(self) -> Iterator[K]:
        """Yield the keys of this subtree in pre-order."""
        stack: list[TreeNode[K]] = [self]
        while stack:
            node = stack.pop()
            yield node.key
            stack.extend(reversed(node.children))

    @property
    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self.iter_keys())

    def find_child(self, key: K) -> TreeNode[K] | None:
        """Return the direct child with ``key``, if any."""
        for child in self.children:
            if child.key == key:
                return child
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested dictionary.

        Returns
        -------
        dict[str, Any]
            ``{"key": ..., "children": [...]}``.
        """
        return {
            "key": self.key,
            "children": [child.to_dict() for child in self.children],
        }


def get_tree(
    sets: DisjointSets[K],
) -> list[TreeNode[K]]:
    """Reconstruct the merge forest of a rigid container.

    Parameters
    ----------
    sets : DisjointSets[K]
        Container built with ``DisjointSets.rigid()``.

    Returns
    -------
    list[TreeNode[K]]
        One tree per group. Every key of the container appears exactly
        once across the forest. Order of roots and children is
        unspecified.

    Raises
    ------
    CompressedForestError
        If ``sets`` compresses paths.
    """
    if sets.is_compressed():
        raise CompressedForestError(sets.config.mode)

    tree_nodes: dict[K, TreeNode[K]] = {node.key: TreeNode(node.key) for node in sets.nodes()}

    forest: list[TreeNode[K]] = []
    for node in sets.nodes():
        tree_node = tree_nodes[node.key]
        if node.is_root:
            forest.append(tree_node)
        else:
            tree_nodes[node.parent.key].children.append(tree_node)

    if sets.logger is not None:
        sets.logger.tree_extracted(roots=len(forest), nodes=len(tree_nodes))

    return forest


def forest_to_dicts(forest: list[TreeNode[K]]) -> list[dict[str, Any]]:
    """Convert a forest to a JSON-ready list of nested dictionaries."""
    return [tree.to_dict() for tree in forest]
