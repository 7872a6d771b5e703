"""Breadth-first search for bookmarks on ancestors of the working copy."""

import logging
from collections import deque

from vcs_prompt.core.jj.abc import CommitId, Jj
from vcs_prompt.status.models.status_data import Bookmark

logger = logging.getLogger(__name__)


def find_ancestor_bookmarks(
    jj: Jj,
    start_parents: list[CommitId],
    max_depth: int,
    immutable_heads: frozenset[CommitId],
) -> list[Bookmark]:
    """Find local bookmarks on ancestors, closest first.

    The search walks level by level from the working copy's parents (depth 1).
    The commit graph is a DAG, so each commit is visited once; a bookmark
    keeps the depth at which it was first seen. Immutable heads are inspected
    for bookmarks but their parents are never queued.

    Args:
        jj: Repository to read parents and bookmarks from
        start_parents: Parent ids of the working-copy commit
        max_depth: Max parent hops to search (0 = disabled, no reads at all)
        immutable_heads: Commits the search must not traverse past

    Returns:
        Bookmarks sorted by ascending distance; ties keep discovery order

    Raises:
        RuntimeError: Propagated from any failed backend read
    """
    if max_depth == 0:
        return []

    queue: deque[tuple[CommitId, int]] = deque((parent, 1) for parent in start_parents)
    visited: set[CommitId] = set()
    distances: dict[str, int] = {}

    while queue:
        commit_id, depth = queue.popleft()
        if depth > max_depth:
            continue
        if commit_id in visited:
            continue
        visited.add(commit_id)

        for name in jj.local_bookmarks_for_commit(commit_id):
            distances.setdefault(name, depth)

        if commit_id in immutable_heads:
            continue

        if depth < max_depth:
            for parent_id in jj.get_parent_ids(commit_id):
                queue.append((parent_id, depth + 1))

    logger.debug("Visited %d ancestor commits, found %d bookmarks", len(visited), len(distances))

    # sorted() is stable, so same-distance bookmarks keep discovery order
    bookmarks = [Bookmark(name=name, distance=distance) for name, distance in distances.items()]
    return sorted(bookmarks, key=lambda bookmark: bookmark.distance)
