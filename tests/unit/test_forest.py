"""Tests for node-level find and union."""

import pytest

from ufset import ContractViolation, CrossContainerUnionError, DisjointSets


def _chain(*keys: str) -> DisjointSets[str]:
    """Build a rigid chain where keys[i + 1] hangs under keys[i]."""
    sets: DisjointSets[str] = DisjointSets.rigid()
    for parent, child in reversed(list(zip(keys, keys[1:]))):
        sets.union(parent, child)
    return sets


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_new_node_is_own_root() -> None:
    """Test a fresh node is a root with rank 0."""
    sets: DisjointSets[str] = DisjointSets.standard()
    node = sets.node("a")

    assert node.is_root
    assert node.parent is node
    assert node.rank == 0
    assert node.find(path_compress=True) is node


@pytest.mark.unit
def test_find_without_compression_leaves_tree_intact() -> None:
    """Test find(path_compress=False) does not rewrite parent links."""
    sets = _chain("a", "b", "c", "d")
    d = sets.node("d")

    root = d.find(path_compress=False)

    assert root.key == "a"
    assert d.parent.key == "c"
    assert sets.node("c").parent.key == "b"
    assert sets.node("b").parent.key == "a"


@pytest.mark.unit
def test_find_with_compression_points_path_at_root() -> None:
    """Test two-pass compression re-points every node on the path."""
    sets = _chain("a", "b", "c", "d")
    ranks_before = {key: sets.node(key).rank for key in "abcd"}

    root = sets.node("d").find(path_compress=True)

    assert root.key == "a"
    for key in "bcd":
        assert sets.node(key).parent is root
    assert {key: sets.node(key).rank for key in "abcd"} == ranks_before


@pytest.mark.unit
def test_find_compression_only_touches_walked_path() -> None:
    """Test compression leaves nodes off the path alone."""
    sets = _chain("a", "b", "c")
    sets.union("b", "x")

    sets.node("c").find(path_compress=True)

    assert sets.node("x").parent.key == "b"


# ---------------------------------------------------------------------------
# union
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_union_by_rank_tie_increments_rank() -> None:
    """Test rank tie attaches second root under first and bumps its rank."""
    sets: DisjointSets[str] = DisjointSets.standard()
    a, b = sets.node("a"), sets.node("b")

    absorbed = a.union(b, path_compress=True, union_by_rank=True)

    assert absorbed is b
    assert b.parent is a
    assert a.rank == 1
    assert b.rank == 0


@pytest.mark.unit
def test_union_by_rank_attaches_lower_rank_root() -> None:
    """Test lower-rank root goes under higher-rank root regardless of order."""
    sets: DisjointSets[str] = DisjointSets.standard()
    sets.union("a", "b")
    sets.union("c", "d")
    sets.union("b", "d")
    assert sets.node("a").rank == 2

    absorbed = sets.node("x").union(sets.node("c"), path_compress=True, union_by_rank=True)

    assert absorbed is sets.node("x")
    assert sets.find("x") == "a"
    assert sets.node("a").rank == 2


@pytest.mark.unit
def test_union_without_rank_attaches_second_root() -> None:
    """Test compressed union without rank always links rootB under rootA."""
    sets: DisjointSets[str] = DisjointSets.standard()
    sets.union("a", "b")
    small = sets.node("z")

    small.union(sets.node("b"), path_compress=True, union_by_rank=False)

    assert sets.node("a").parent is small
    assert small.rank == 0


@pytest.mark.unit
def test_rigid_union_links_under_calling_node() -> None:
    """Test rigid union attaches the other root under the calling node."""
    sets = _chain("a", "b", "c")
    sets.union("x", "y")

    absorbed = sets.node("c").union(sets.node("y"), path_compress=False, union_by_rank=False)

    assert absorbed is sets.node("x")
    assert sets.node("x").parent is sets.node("c")
    assert sets.node("a").is_root


@pytest.mark.unit
def test_union_same_tree_is_noop() -> None:
    """Test union of nodes already sharing a root returns None."""
    sets = _chain("a", "b", "c")

    assert sets.node("c").union(sets.node("b"), path_compress=False, union_by_rank=False) is None
    assert sets.node("b").parent.key == "a"
    assert sets.node("c").parent.key == "b"


@pytest.mark.unit
def test_union_rank_without_compression_rejected() -> None:
    """Test union_by_rank without path_compress raises ValueError."""
    sets: DisjointSets[str] = DisjointSets.standard()

    with pytest.raises(ValueError, match="requires path_compress"):
        sets.node("a").union(sets.node("b"), path_compress=False, union_by_rank=True)

    assert sets.node("b").is_root


@pytest.mark.unit
def test_union_across_containers_raises() -> None:
    """Test union of nodes from different containers is a contract violation."""
    first: DisjointSets[str] = DisjointSets.standard()
    second: DisjointSets[str] = DisjointSets.standard()
    a, b = first.node("a"), second.node("b")

    with pytest.raises(CrossContainerUnionError) as exc_info:
        a.union(b, path_compress=True, union_by_rank=True)

    assert isinstance(exc_info.value, ContractViolation)
    assert isinstance(exc_info.value, RuntimeError)
    assert exc_info.value.key_a == "a"
    assert exc_info.value.key_b == "b"
    assert a.is_root and b.is_root


@pytest.mark.unit
def test_node_key_is_read_only() -> None:
    """Test node key cannot be reassigned."""
    sets: DisjointSets[str] = DisjointSets.standard()
    node = sets.node("a")

    with pytest.raises(AttributeError):
        node.key = "b"  # type: ignore[misc]

    assert "key='a'" in repr(node)
