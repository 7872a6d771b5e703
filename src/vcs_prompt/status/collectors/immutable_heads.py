"""Immutable head index for the ancestor bookmark search.

Mirrors jj's built-in immutable heads (trunk, tags, untracked remote
bookmarks) with a single pass over the refs rather than revset evaluation.
"""

from vcs_prompt.core.jj.abc import GIT_TRACKING_REMOTE, CommitId, Jj

TRUNK_REMOTES = frozenset({"origin", "upstream"})
TRUNK_NAMES = frozenset({"main", "master", "trunk"})


def is_trunk(name: str, remote: str) -> bool:
    """Check for a trunk bookmark on a well-known remote (case-sensitive)."""
    return remote in TRUNK_REMOTES and name in TRUNK_NAMES


def find_immutable_heads(jj: Jj) -> frozenset[CommitId]:
    """Collect commits the ancestor search must not traverse past.

    A remote bookmark contributes its target when it is trunk or has no local
    bookmark of the same name. Every tag contributes its target. Absent and
    conflicted targets contribute nothing.

    Args:
        jj: Repository to read refs from

    Returns:
        Set of barrier commit ids
    """
    immutable: set[CommitId] = set()

    for bookmark in jj.list_remote_bookmarks():
        if bookmark.remote == GIT_TRACKING_REMOTE:
            continue

        untracked = jj.get_local_bookmark(bookmark.name).is_absent
        if is_trunk(bookmark.name, bookmark.remote) or untracked:
            commit_id = bookmark.target.as_normal()
            if commit_id is not None:
                immutable.add(commit_id)

    for tag in jj.list_tags():
        commit_id = tag.target.as_normal()
        if commit_id is not None:
            immutable.add(commit_id)

    return frozenset(immutable)
