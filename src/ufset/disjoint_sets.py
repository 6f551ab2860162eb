"""Disjoint-set container mapping keys to forest nodes."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from ufset.audit import AuditLogger
from ufset.config import ForestConfig
from ufset.forest import SetNode

__all__ = ["DisjointSets"]

K = TypeVar("K", bound=Hashable)


class DisjointSets(Generic[K]):
    """Union-find over arbitrary hashable keys.

    Every key is implicitly its own singleton group the first time it is
    referenced; ``find``, ``union`` and ``in_same_set`` never fail on
    unknown keys. Not safe for concurrent use.

    Two modes are available through the named constructors:

    - ``DisjointSets.standard()`` compresses paths and unions by rank, for
      near-constant amortized operations.
    - ``DisjointSets.rigid()`` never restructures a tree. Operations are
      O(n) in the worst case, but ``ufset.get_tree`` can recover the merge
      history afterwards.

    Parameters
    ----------
    config : ForestConfig | None, optional
        Balancing policy. Defaults to ``ForestConfig.standard()``.
    logger : AuditLogger | None, optional
        Receives one ``sets_merged`` event per effective merge. If None,
        nothing is logged.

    Examples
    --------
        >>> sets = DisjointSets.standard()
        >>> sets.union("a", "b")
        >>> sets.in_same_set("a", "b")
        True
    """

    def __init__(
        self,
        config: ForestConfig | None = None,
        logger: AuditLogger | None = None,
    ) -> None:
        self._config = config if config is not None else ForestConfig.standard()
        self._nodes: dict[K, SetNode[K]] = {}
        self.logger = logger

    @classmethod
    def standard(cls, logger: AuditLogger | None = None) -> DisjointSets[K]:
        """Create a container using path compression and union by rank."""
        return cls(ForestConfig.standard(), logger=logger)

    @classmethod
    def rigid(cls, logger: AuditLogger | None = None) -> DisjointSets[K]:
        """Create a container that preserves the merge history.

        Union links the absorbed root under the node that was passed as
        the first key, not under that node's root.
        """
        return cls(ForestConfig.rigid(), logger=logger)

    @property
    def config(self) -> ForestConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[K]:
        return iter(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __repr__(self) -> str:
        return f"DisjointSets(mode={self._config.mode!r}, keys={len(self._nodes)})"

    def add(self, key: K) -> None:
        """Enroll ``key`` as a singleton group if it is not present yet."""
        self.node(key)

    def node(self, key: K) -> SetNode[K]:
        """Return the node for ``key``, creating it if needed."""
        node = self._nodes.get(key)
        if node is None:
            node = SetNode(key, self)
            self._nodes[key] = node
        return node

    def nodes(self) -> Iterator[SetNode[K]]:
        """Iterate over all nodes in insertion order."""
        return iter(self._nodes.values())

    def find(self, key: K) -> K:
        """Return the key of the root of the group containing ``key``.

        Parameters
        ----------
        key : K
            Key to look up. Enrolled as a singleton if unknown.

        Returns
        -------
        K
            Root key.
        """
        return self.node(key).find(self._config.path_compress).key

    def union(self, key_a: K, key_b: K) -> None:
        """Merge the groups containing ``key_a`` and ``key_b``.

        Unknown keys are enrolled first. Unioning keys that already share
        a group is a no-op.

        Parameters
        ----------
        key_a : K
            First key. In rigid mode the other group is attached here.
        key_b : K
            Second key.
        """
        node_a = self.node(key_a)
        node_b = self.node(key_b)
        absorbed = node_a.union(
            node_b,
            self._config.path_compress,
            self._config.union_by_rank,
        )

        if absorbed is not None and self.logger is not None:
            self.logger.sets_merged(
                key_a,
                key_b,
                absorbed=absorbed.key,
                into=absorbed.parent.key,
                mode=self._config.mode,
            )

    def in_same_set(self, key_a: K, key_b: K) -> bool:
        """Check whether two keys belong to the same group.

        Both keys are enrolled if unknown, so this never reports
        "not found".
        """
        return self.find(key_a) == self.find(key_b)

    def is_compressed(self) -> bool:
        """Whether finds in this container compress paths."""
        return self._config.path_compress

    def get_clusters(self) -> dict[K, K]:
        """Get the root assignment for all keys.

        Returns
        -------
        dict[K, K]
            A mapping from key to the key of its group's root.
        """
        return {key: self.find(key) for key in list(self._nodes)}

    def get_components(self) -> list[list[K]]:
        """Get all groups.

        Returns
        -------
        list[list[K]]
            List of groups, each a list of keys in insertion order.
        """
        components: dict[K, list[K]] = {}
        for key, root in self.get_clusters().items():
            components.setdefault(root, []).append(key)
        return list(components.values())

    def roots(self) -> list[K]:
        """Keys that are currently the root of their group."""
        return [key for key, node in self._nodes.items() if node.is_root]

    @property
    def component_count(self) -> int:
        return sum(1 for node in self._nodes.values() if node.is_root)
