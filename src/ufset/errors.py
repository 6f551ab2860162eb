"""Contract violations raised by the disjoint-set forest.

These signal programming mistakes, not data conditions. The library never
catches them and never reports them through return values.
"""

__all__ = [
    "ContractViolation",
    "CrossContainerUnionError",
    "CompressedForestError",
]


class ContractViolation(RuntimeError):
    """Base class for misuse of the disjoint-set API."""


class CrossContainerUnionError(ContractViolation):
    """Raised when nodes owned by different containers are unioned."""

    def __init__(self, key_a: object, key_b: object) -> None:
        """Initialize cross-container error.

        Parameters
        ----------
        key_a : object
            Key of the calling node.
        key_b : object
            Key of the node owned by another container.
        """
        super().__init__(
            f"can't union nodes from different disjoint sets: {key_a!r} and {key_b!r}"
        )
        self.key_a = key_a
        self.key_b = key_b


class CompressedForestError(ContractViolation):
    """Raised when a tree is requested from a path-compressed container."""

    def __init__(self, mode: str) -> None:
        super().__init__(
            f"tree extraction requires a rigid container, got mode {mode!r}; "
            "path compression has already discarded the merge history"
        )
        self.mode = mode
