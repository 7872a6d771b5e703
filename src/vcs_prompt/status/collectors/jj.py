"""JJ status collector.

Assembles a JjStatus from the working-copy commit, its direct bookmarks and
the ancestor bookmark search.
"""

import logging

from vcs_prompt.core.jj.abc import GIT_TRACKING_REMOTE, Jj
from vcs_prompt.status.collectors.ancestor_bookmarks import find_ancestor_bookmarks
from vcs_prompt.status.collectors.errors import StatusCollectionError
from vcs_prompt.status.collectors.immutable_heads import find_immutable_heads
from vcs_prompt.status.models.status_data import Bookmark, JjStatus

logger = logging.getLogger(__name__)


def remote_sync_status(jj: Jj, bookmarks: list[Bookmark]) -> tuple[bool, bool]:
    """Compute (has_remote, is_synced) for the closest bookmark only.

    Only the first bookmark is inspected: in a stack of changes it is the
    one whose push state matters. With no bookmarks, or no real remote for
    the closest one, there is nothing to push and the result is synced.
    """
    if not bookmarks:
        return False, True

    name = bookmarks[0].name
    local_target = jj.get_local_bookmark(name)

    has_remote = False
    is_synced = False
    for bookmark in jj.list_remote_bookmarks():
        if bookmark.name != name or bookmark.remote == GIT_TRACKING_REMOTE:
            continue
        has_remote = True
        if bookmark.target == local_target:
            is_synced = True
            break

    return has_remote, is_synced or not has_remote


def _collect(jj: Jj, id_length: int, ancestor_depth: int) -> JjStatus:
    commit = jj.get_working_copy_commit()

    change_id = commit.change_id[:id_length]
    prefix_len = min(commit.change_id_prefix_len, len(change_id))

    direct_names = jj.local_bookmarks_for_commit(commit.commit_id)
    bookmarks = [Bookmark(name=name, distance=0) for name in direct_names]

    if ancestor_depth > 0:
        immutable_heads = find_immutable_heads(jj)
        ancestors = find_ancestor_bookmarks(
            jj, list(commit.parent_ids), ancestor_depth, immutable_heads
        )
        seen = set(direct_names)
        bookmarks.extend(b for b in ancestors if b.name not in seen)

    has_remote, is_synced = remote_sync_status(jj, bookmarks)

    return JjStatus(
        change_id=change_id,
        change_id_prefix_len=prefix_len,
        bookmarks=bookmarks,
        empty_desc=commit.empty_description,
        conflict=commit.has_conflict,
        divergent=commit.is_divergent,
        has_remote=has_remote,
        is_synced=is_synced,
    )


def collect_jj_status(jj: Jj, id_length: int, ancestor_depth: int) -> JjStatus:
    """Collect prompt status for a jj working copy.

    Args:
        jj: Repository to read from
        id_length: Number of change id characters to keep
        ancestor_depth: Max parent hops searched for bookmarks (0 = disabled)

    Returns:
        JjStatus snapshot for rendering

    Raises:
        StatusCollectionError: If any backend read fails
    """
    try:
        status = _collect(jj, id_length, ancestor_depth)
    except (RuntimeError, ValueError) as e:
        raise StatusCollectionError(f"Failed to collect jj status: {e}") from e
    logger.debug("Collected jj status: %s", status)
    return status
