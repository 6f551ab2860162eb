"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from ufset import DisjointSets  # noqa: E402

# Union sequence shared by the standard and rigid scenarios:
# two groups {0, 1, 2} and {3, 4, 5}, with two self-unions that do nothing.
SCENARIO_PAIRS: list[tuple[int, int]] = [
    (0, 1),
    (2, 1),
    (0, 0),
    (3, 4),
    (5, 3),
    (5, 5),
]


@pytest.fixture
def scenario_pairs() -> list[tuple[int, int]]:
    """Pairs building groups {0, 1, 2} and {3, 4, 5}."""
    return list(SCENARIO_PAIRS)


@pytest.fixture
def rigid_scenario() -> DisjointSets[int]:
    """Rigid container after the scenario unions."""
    sets: DisjointSets[int] = DisjointSets.rigid()
    for key_a, key_b in SCENARIO_PAIRS:
        sets.union(key_a, key_b)
    return sets


@pytest.fixture
def write_pairs(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing pairs (or raw lines) to a JSONL file."""

    def _factory(
        pairs: list[tuple[object, object]] | None = None,
        *,
        lines: list[str] | None = None,
        name: str = "pairs.jsonl",
    ) -> Path:
        path = tmp_path / name
        if lines is None:
            lines = [json.dumps(list(pair)) for pair in pairs or []]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _factory
