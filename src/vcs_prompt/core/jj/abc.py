"""Read-only jj repository interface.

This module provides a clean abstraction over the jj view of a repository,
making the status collectors testable without a jj binary.

Architecture:
- Jj: Abstract base class defining the read interface
- RealJj: Production implementation using the jj CLI
- FakeJj: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

# Remote that mirrors the colocated git repo's refs. It is not a real remote.
GIT_TRACKING_REMOTE = "git"

CommitId = str


@dataclass(frozen=True)
class RefTarget:
    """Target of a bookmark or tag.

    A target is absent when nothing is added, normal when exactly one commit
    is added and none removed, and conflicted otherwise. Equality compares
    the full target, so a conflicted local bookmark never equals a normal
    remote one.
    """

    added: tuple[CommitId, ...] = ()
    removed: tuple[CommitId, ...] = ()

    @staticmethod
    def normal(commit_id: CommitId) -> "RefTarget":
        return RefTarget(added=(commit_id,))

    @staticmethod
    def absent() -> "RefTarget":
        return RefTarget()

    @property
    def is_absent(self) -> bool:
        return not self.added and not self.removed

    def as_normal(self) -> CommitId | None:
        """Return the single target commit, or None if absent or conflicted."""
        if len(self.added) == 1 and not self.removed:
            return self.added[0]
        return None


@dataclass(frozen=True)
class RemoteBookmark:
    """A bookmark as last seen on a remote."""

    name: str
    remote: str
    target: RefTarget


@dataclass(frozen=True)
class TagRef:
    """A tag and its target."""

    name: str
    target: RefTarget


@dataclass(frozen=True)
class WorkingCopyCommit:
    """Direct attributes of the working-copy commit."""

    commit_id: CommitId
    change_id: str  # full change id in jj's reverse-hex form
    change_id_prefix_len: int  # shortest unique prefix length
    parent_ids: tuple[CommitId, ...]
    empty_description: bool
    has_conflict: bool
    is_divergent: bool


# ============================================================================
# Abstract Interface
# ============================================================================


class Jj(ABC):
    """Abstract read-only interface over a jj repository.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY read operations - nothing here mutates the
    repository.
    """

    @abstractmethod
    def get_working_copy_commit(self) -> WorkingCopyCommit:
        """Get the working-copy commit of the current workspace."""
        ...

    @abstractmethod
    def get_parent_ids(self, commit_id: CommitId) -> list[CommitId]:
        """Get the parent commit ids of a commit.

        Args:
            commit_id: Commit to look up

        Returns:
            Parent ids in the order the backend reports them

        Raises:
            RuntimeError: If the commit cannot be read
        """
        ...

    @abstractmethod
    def local_bookmarks_for_commit(self, commit_id: CommitId) -> list[str]:
        """List names of local bookmarks whose target includes the commit."""
        ...

    @abstractmethod
    def get_local_bookmark(self, name: str) -> RefTarget:
        """Get the local target of a bookmark (absent if there is none)."""
        ...

    @abstractmethod
    def list_remote_bookmarks(self) -> list[RemoteBookmark]:
        """List every remote bookmark, including the git tracking remote."""
        ...

    @abstractmethod
    def list_tags(self) -> list[TagRef]:
        """List every tag in the repository."""
        ...
