"""Tests for the breadth-first ancestor bookmark search."""

import pytest

from vcs_prompt.core.jj.abc import RefTarget
from vcs_prompt.core.jj.fake import FakeJj
from vcs_prompt.status.collectors.ancestor_bookmarks import find_ancestor_bookmarks
from vcs_prompt.status.models.status_data import Bookmark
from tests.test_utils.jj_builders import linear_history, local


def test_finds_bookmark_with_distance_in_linear_history() -> None:
    """Test that distance counts parent hops from the working copy."""
    # Arrange: wc -> c1 -> c2 -> c3 (main)
    jj = FakeJj(
        parents=linear_history("c1", "c2", "c3"),
        local_bookmarks=local(main="c3"),
    )

    # Act
    result = find_ancestor_bookmarks(jj, ["c1"], max_depth=10, immutable_heads=frozenset())

    # Assert
    assert result == [Bookmark(name="main", distance=3)]


def test_results_sorted_by_distance() -> None:
    """Test that bookmarks are returned closest first."""
    jj = FakeJj(
        parents=linear_history("c1", "c2", "c3", "c4"),
        local_bookmarks=local(base="c4", feature="c1", middle="c2"),
    )

    result = find_ancestor_bookmarks(jj, ["c1"], max_depth=10, immutable_heads=frozenset())

    assert result == [
        Bookmark(name="feature", distance=1),
        Bookmark(name="middle", distance=2),
        Bookmark(name="base", distance=4),
    ]


def test_bookmark_beyond_max_depth_is_not_found() -> None:
    """A bookmark one hop past the bound is invisible."""
    jj = FakeJj(
        parents=linear_history("c1", "c2", "c3"),
        local_bookmarks=local(main="c3"),
    )

    result = find_ancestor_bookmarks(jj, ["c1"], max_depth=2, immutable_heads=frozenset())

    assert result == []


def test_bookmark_at_exactly_max_depth_is_found_without_reading_its_parents() -> None:
    """Commits at the bound are inspected, but the walk stops there."""
    # Arrange
    jj = FakeJj(
        parents=linear_history("c1", "c2", "c3"),
        local_bookmarks=local(main="c2"),
    )

    # Act
    result = find_ancestor_bookmarks(jj, ["c1"], max_depth=2, immutable_heads=frozenset())

    # Assert
    assert result == [Bookmark(name="main", distance=2)]
    assert jj.parent_calls == ["c1"]


def test_max_depth_zero_performs_no_reads() -> None:
    """Test that a disabled search never touches the backend."""
    jj = FakeJj(read_raises=RuntimeError("must not be called"))

    result = find_ancestor_bookmarks(jj, ["c1", "c2"], max_depth=0, immutable_heads=frozenset())

    assert result == []
    assert jj.parent_calls == []
    assert jj.bookmark_calls == []


def test_merge_commit_visits_shared_ancestor_once() -> None:
    """Test that re-convergent history is walked as a DAG, not a tree."""
    # Arrange: merge m has parents a and b, both descend from base
    jj = FakeJj(
        parents={
            "m": ["a", "b"],
            "a": ["base"],
            "b": ["base"],
            "base": [],
        },
        local_bookmarks=local(trunk_point="base"),
    )

    # Act
    result = find_ancestor_bookmarks(jj, ["m"], max_depth=10, immutable_heads=frozenset())

    # Assert
    assert result == [Bookmark(name="trunk_point", distance=3)]
    assert jj.bookmark_calls.count("base") == 1
    assert jj.parent_calls.count("base") == 1


def test_working_copy_merge_starts_from_every_parent() -> None:
    """Test that each parent of a merge working copy starts at depth 1."""
    jj = FakeJj(
        parents={"left": [], "right": []},
        local_bookmarks=local(left_bm="left", right_bm="right"),
    )

    result = find_ancestor_bookmarks(
        jj, ["left", "right"], max_depth=5, immutable_heads=frozenset()
    )

    assert result == [
        Bookmark(name="left_bm", distance=1),
        Bookmark(name="right_bm", distance=1),
    ]


def test_shortest_path_distance_wins() -> None:
    """A bookmark reachable by paths of different lengths keeps the shorter one."""
    # Arrange: short path m -> x, long path m -> a -> b -> x
    jj = FakeJj(
        parents={
            "m": ["a", "x"],
            "a": ["b"],
            "b": ["x"],
            "x": [],
        },
        local_bookmarks=local(target="x"),
    )

    # Act
    result = find_ancestor_bookmarks(jj, ["m"], max_depth=10, immutable_heads=frozenset())

    # Assert
    assert result == [Bookmark(name="target", distance=2)]


def test_conflicted_bookmark_reached_twice_keeps_first_distance() -> None:
    """A conflicted bookmark on two commits is reported once, at its nearer commit."""
    jj = FakeJj(
        parents=linear_history("c1", "c2", "c3"),
        local_bookmarks={"split": RefTarget(added=("c1", "c3"), removed=("c0",))},
    )

    result = find_ancestor_bookmarks(jj, ["c1"], max_depth=10, immutable_heads=frozenset())

    assert result == [Bookmark(name="split", distance=1)]


def test_immutable_head_stops_traversal() -> None:
    """Test that the search inspects an immutable head but never passes it."""
    # Arrange: wc -> c1 -> trunk (immutable) -> old (bookmarked)
    jj = FakeJj(
        parents=linear_history("c1", "trunk", "old"),
        local_bookmarks=local(main="trunk", ancient="old"),
    )

    # Act
    result = find_ancestor_bookmarks(
        jj, ["c1"], max_depth=10, immutable_heads=frozenset({"trunk"})
    )

    # Assert
    assert result == [Bookmark(name="main", distance=2)]
    assert "trunk" not in jj.parent_calls
    assert "old" not in jj.bookmark_calls


def test_immutable_start_parent_is_still_inspected() -> None:
    """Test that an immutable parent contributes bookmarks but no parents."""
    jj = FakeJj(parents={}, local_bookmarks=local(main="c1"))

    result = find_ancestor_bookmarks(
        jj, ["c1"], max_depth=10, immutable_heads=frozenset({"c1"})
    )

    assert result == [Bookmark(name="main", distance=1)]
    assert jj.parent_calls == []


def test_no_parents_returns_empty() -> None:
    """Test that the root commit as working copy yields nothing."""
    jj = FakeJj()

    assert find_ancestor_bookmarks(jj, [], max_depth=10, immutable_heads=frozenset()) == []


def test_backend_failure_propagates() -> None:
    """Test that a failed read aborts the search instead of returning partial results."""
    jj = FakeJj(read_raises=RuntimeError("jj exploded"))

    with pytest.raises(RuntimeError, match="jj exploded"):
        find_ancestor_bookmarks(jj, ["c1"], max_depth=3, immutable_heads=frozenset())


def test_unknown_parent_propagates_as_error() -> None:
    """Test that a parent the backend cannot read aborts the search."""
    jj = FakeJj(parents={"c1": ["missing"]})

    with pytest.raises(RuntimeError, match="missing"):
        find_ancestor_bookmarks(jj, ["c1"], max_depth=3, immutable_heads=frozenset())
