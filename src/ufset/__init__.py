"""Generic disjoint-set (union-find) forests.

This package provides:
- Node forest (ufset.forest): per-node find and union
- Container (ufset.disjoint_sets): key to node mapping and mode dispatch
- Tree extraction (ufset.tree): merge history of rigid containers
- Configuration (ufset.config): balancing policy
- Audit (ufset.audit): JSONL event logging
- I/O (ufset.io): pairs file loading
- CLI (ufset.cli): command-line interface
"""

__version__ = "0.1.0"
__license__ = "MIT"

from ufset.config import ForestConfig
from ufset.disjoint_sets import DisjointSets
from ufset.errors import (
    CompressedForestError,
    ContractViolation,
    CrossContainerUnionError,
)
from ufset.forest import SetNode
from ufset.tree import TreeNode, forest_to_dicts, get_tree

__all__ = [
    "__version__",
    "__license__",
    "DisjointSets",
    "ForestConfig",
    "SetNode",
    "TreeNode",
    "get_tree",
    "forest_to_dicts",
    "ContractViolation",
    "CrossContainerUnionError",
    "CompressedForestError",
]
