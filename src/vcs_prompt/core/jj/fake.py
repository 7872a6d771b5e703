"""Fake Jj implementation for testing.

FakeJj is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from vcs_prompt.core.jj.abc import (
    CommitId,
    Jj,
    RefTarget,
    RemoteBookmark,
    TagRef,
    WorkingCopyCommit,
)


class FakeJj(Jj):
    """In-memory fake implementation of the jj read interface.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty collections).
    """

    def __init__(
        self,
        *,
        working_copy: WorkingCopyCommit | None = None,
        parents: dict[CommitId, list[CommitId]] | None = None,
        local_bookmarks: dict[str, RefTarget] | None = None,
        remote_bookmarks: list[RemoteBookmark] | None = None,
        tags: list[TagRef] | None = None,
        read_raises: Exception | None = None,
    ) -> None:
        """Create FakeJj with pre-configured state.

        Args:
            working_copy: Working-copy commit returned by get_working_copy_commit()
            parents: Mapping of commit id -> parent ids
            local_bookmarks: Mapping of local bookmark name -> target
            remote_bookmarks: Remote bookmarks returned by list_remote_bookmarks()
            tags: Tags returned by list_tags()
            read_raises: Exception raised by get_parent_ids() and
                local_bookmarks_for_commit() (for testing backend failures)
        """
        self._working_copy = working_copy
        self._parents = parents if parents is not None else {}
        self._local_bookmarks = local_bookmarks if local_bookmarks is not None else {}
        self._remote_bookmarks = remote_bookmarks if remote_bookmarks is not None else []
        self._tags = tags if tags is not None else []
        self._read_raises = read_raises
        self._parent_calls: list[CommitId] = []
        self._bookmark_calls: list[CommitId] = []

    @property
    def parent_calls(self) -> list[CommitId]:
        """Commit ids passed to get_parent_ids(), in call order.

        This property is for test assertions only.
        """
        return self._parent_calls

    @property
    def bookmark_calls(self) -> list[CommitId]:
        """Commit ids passed to local_bookmarks_for_commit(), in call order.

        This property is for test assertions only.
        """
        return self._bookmark_calls

    def get_working_copy_commit(self) -> WorkingCopyCommit:
        if self._working_copy is None:
            raise RuntimeError("Failed to read working-copy commit: no working copy")
        return self._working_copy

    def get_parent_ids(self, commit_id: CommitId) -> list[CommitId]:
        self._parent_calls.append(commit_id)
        if self._read_raises is not None:
            raise self._read_raises
        if commit_id not in self._parents:
            raise RuntimeError(f"Failed to read parents of {commit_id}: unknown commit")
        return list(self._parents[commit_id])

    def local_bookmarks_for_commit(self, commit_id: CommitId) -> list[str]:
        self._bookmark_calls.append(commit_id)
        if self._read_raises is not None:
            raise self._read_raises
        return [
            name for name, target in self._local_bookmarks.items() if commit_id in target.added
        ]

    def get_local_bookmark(self, name: str) -> RefTarget:
        return self._local_bookmarks.get(name, RefTarget.absent())

    def list_remote_bookmarks(self) -> list[RemoteBookmark]:
        return list(self._remote_bookmarks)

    def list_tags(self) -> list[TagRef]:
        return list(self._tags)
