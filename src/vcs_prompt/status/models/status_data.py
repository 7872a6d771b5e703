"""Data models for prompt status information."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Bookmark:
    """A bookmark and how far it sits from the working-copy commit.

    Distance 0 means the bookmark points at the working-copy commit itself;
    distance N means it was found N parent hops away.
    """

    name: str
    distance: int


@dataclass(frozen=True)
class JjStatus:
    """Everything the jj prompt shows for one invocation.

    The bool fields are independent flags; any combination may hold at once.

    Attributes:
        change_id: Change id truncated to the configured display length
        change_id_prefix_len: Shortest unique prefix length, capped at len(change_id)
        bookmarks: Direct bookmarks first, then ancestors by ascending distance
        empty_desc: Description is empty (needs a commit message)
        conflict: Commit tree has conflicts
        divergent: Change id resolves to more than one commit
        has_remote: Closest bookmark has a counterpart on a real remote
        is_synced: Closest bookmark matches one of its remotes (or has none)
    """

    change_id: str
    change_id_prefix_len: int
    bookmarks: list[Bookmark] = field(default_factory=list)
    empty_desc: bool = False
    conflict: bool = False
    divergent: bool = False
    has_remote: bool = False
    is_synced: bool = True


@dataclass(frozen=True)
class GitStatus:
    """Git working tree status for the prompt."""

    branch: str | None  # None if detached
    head_short: str
    staged: int = 0
    modified: int = 0
    untracked: int = 0
    deleted: int = 0
    conflicted: int = 0
    ahead: int = 0
    behind: int = 0
