"""Reading union pairs from JSONL files.

Each non-blank line of a pairs file is a two-element JSON array of keys,
e.g. ``["a", "b"]`` or ``[0, 1]``. Lines are validated against the
bundled ``pair.schema.json``.
"""

from __future__ import annotations

import json
from collections.abc import Hashable, Iterable
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

import jsonschema
from jsonschema.exceptions import best_match

from ufset.disjoint_sets import DisjointSets

__all__ = [
    "PairsFileError",
    "load_schema",
    "load_pairs",
    "apply_pairs",
]

K = TypeVar("K", bound=Hashable)


class PairsFileError(ValueError):
    """Raised when a pairs file cannot be read."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize pairs file error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        line : int | None, optional
            1-based line number where error occurred.
        """
        super().__init__(message)
        self.file = file
        self.line = line


@cache
def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by name (e.g. ``"pair"``)."""
    text = resources.files("ufset").joinpath(f"schemas/{name}.schema.json").read_text("utf-8")
    return json.loads(text)


def load_pairs(path: str | Path) -> list[tuple[str | int, str | int]]:
    """Load union pairs from a JSONL file.

    Parameters
    ----------
    path : str | Path
        Path to pairs file.

    Returns
    -------
    list[tuple[str | int, str | int]]
        Pairs in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    PairsFileError
        If a line is not valid JSON or not a pair of string/integer keys.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    validator = jsonschema.Draft202012Validator(load_schema("pair"))
    pairs: list[tuple[str | int, str | int]] = []

    with file_path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise PairsFileError(
                    f"{file_path.name}:{line_no}: invalid JSON: {e.msg}",
                    file=str(file_path),
                    line=line_no,
                ) from e

            error = best_match(validator.iter_errors(data))
            if error is not None:
                raise PairsFileError(
                    f"{file_path.name}:{line_no}: invalid pair: {error.message}",
                    file=str(file_path),
                    line=line_no,
                )

            # JSON Schema counts 1.0 as an integer
            for key in data:
                if isinstance(key, float):
                    raise PairsFileError(
                        f"{file_path.name}:{line_no}: invalid pair: {key!r} is not a string or integer",
                        file=str(file_path),
                        line=line_no,
                    )

            pairs.append((data[0], data[1]))

    return pairs


def apply_pairs(sets: DisjointSets[K], pairs: Iterable[tuple[K, K]]) -> int:
    """Union every pair into ``sets``.

    Parameters
    ----------
    sets : DisjointSets[K]
        Target container.
    pairs : Iterable[tuple[K, K]]
        Pairs to union, in order. Order matters for rigid containers.

    Returns
    -------
    int
        Number of pairs applied.
    """
    count = 0
    for key_a, key_b in pairs:
        sets.union(key_a, key_b)
        count += 1
    return count
