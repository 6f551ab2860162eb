"""Forest configuration dataclass."""

from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["ForestConfig"]


@dataclass(frozen=True)
class ForestConfig:
    """Balancing policy of a disjoint-set container.

    Fixed at construction time; a container never changes mode.

    Attributes
    ----------
    path_compress : bool
        Re-point every node on a find path directly at the root
        (default: True).
    union_by_rank : bool
        Attach the lower-rank root under the higher-rank root on union
        (default: True). Only valid together with ``path_compress``.
    """

    path_compress: bool = True
    union_by_rank: bool = True

    def __post_init__(self) -> None:
        """Validate flag combination."""
        if self.union_by_rank and not self.path_compress:
            raise ValueError("union_by_rank requires path_compress")

    @classmethod
    def standard(cls) -> "ForestConfig":
        """Path compression plus union by rank."""
        return cls(path_compress=True, union_by_rank=True)

    @classmethod
    def rigid(cls) -> "ForestConfig":
        """No compression, no balancing; merge history is preserved."""
        return cls(path_compress=False, union_by_rank=False)

    @property
    def mode(self) -> str:
        """Mode name: ``standard``, ``compressed`` or ``rigid``."""
        if not self.path_compress:
            return "rigid"
        return "standard" if self.union_by_rank else "compressed"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["mode"] = self.mode
        return data
