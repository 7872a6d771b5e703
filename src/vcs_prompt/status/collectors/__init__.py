"""Status information collectors."""

from vcs_prompt.status.collectors.ancestor_bookmarks import find_ancestor_bookmarks
from vcs_prompt.status.collectors.errors import StatusCollectionError
from vcs_prompt.status.collectors.git import collect_git_status
from vcs_prompt.status.collectors.immutable_heads import find_immutable_heads
from vcs_prompt.status.collectors.jj import collect_jj_status

__all__ = [
    "StatusCollectionError",
    "collect_git_status",
    "collect_jj_status",
    "find_ancestor_bookmarks",
    "find_immutable_heads",
]
