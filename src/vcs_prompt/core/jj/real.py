"""Production Jj implementation using the jj CLI.

Every command runs with --ignore-working-copy so the prompt never snapshots
or otherwise touches the working copy; the view is read as of the last
operation. Each kind of read is issued at most once per instance.
"""

import logging
from pathlib import Path

from vcs_prompt.core.jj.abc import (
    CommitId,
    Jj,
    RefTarget,
    RemoteBookmark,
    TagRef,
    WorkingCopyCommit,
)
from vcs_prompt.core.jj.parsing import (
    PARENTS_TEMPLATE,
    REF_TEMPLATE,
    WORKING_COPY_TEMPLATE,
    parse_bookmarks,
    parse_parents,
    parse_tags,
    parse_working_copy,
)
from vcs_prompt.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

_GLOBAL_ARGS = ["--ignore-working-copy", "--color=never", "--no-pager"]
# shortest() is unique within revsets.short-prefixes; the prompt needs repo-wide uniqueness.
SHORT_PREFIXES_OVER_ALL = "--config=revsets.short-prefixes=all()"


class RealJj(Jj):
    """Production implementation reading one repository through the jj CLI.

    Parent lookups are served from a single `ancestors(@, depth + 1)` query
    issued on first use; commits outside that window fall back to a
    per-commit query.
    """

    def __init__(self, repo_root: Path, *, prefetch_depth: int, jj_path: str = "jj") -> None:
        self._repo_root = repo_root
        self._prefetch_depth = prefetch_depth
        self._jj_path = jj_path
        self._working_copy: WorkingCopyCommit | None = None
        self._parents: dict[CommitId, list[CommitId]] | None = None
        self._local_bookmarks: dict[str, RefTarget] | None = None
        self._remote_bookmarks: list[RemoteBookmark] | None = None
        self._tags: list[TagRef] | None = None

    def _run(self, args: list[str], operation_context: str) -> str:
        cmd = [self._jj_path, *_GLOBAL_ARGS, *args]
        logger.debug("Running: %s", cmd)
        result = run_subprocess_with_context(
            cmd,
            operation_context=operation_context,
            cwd=self._repo_root,
        )
        return result.stdout

    def get_working_copy_commit(self) -> WorkingCopyCommit:
        if self._working_copy is None:
            output = self._run(
                [
                    "log",
                    "--no-graph",
                    SHORT_PREFIXES_OVER_ALL,
                    "-r",
                    "@",
                    "-T",
                    WORKING_COPY_TEMPLATE,
                ],
                operation_context="read working-copy commit",
            )
            self._working_copy = parse_working_copy(output)
        return self._working_copy

    def _prefetch_parents(self) -> dict[CommitId, list[CommitId]]:
        if self._parents is None:
            revset = f"ancestors(@, {self._prefetch_depth + 1})"
            output = self._run(
                ["log", "--no-graph", "-r", revset, "-T", PARENTS_TEMPLATE],
                operation_context="read ancestor commits",
            )
            self._parents = parse_parents(output)
            logger.debug("Prefetched parents for %d commits", len(self._parents))
        return self._parents

    def get_parent_ids(self, commit_id: CommitId) -> list[CommitId]:
        parents = self._prefetch_parents()
        if commit_id not in parents:
            output = self._run(
                ["log", "--no-graph", "-r", commit_id, "-T", PARENTS_TEMPLATE],
                operation_context=f"read parents of {commit_id}",
            )
            parents.update(parse_parents(output))
        return list(parents.get(commit_id, []))

    def _load_bookmarks(self) -> tuple[dict[str, RefTarget], list[RemoteBookmark]]:
        output = self._run(
            ["bookmark", "list", "--all-remotes", "-T", REF_TEMPLATE],
            operation_context="list bookmarks",
        )
        return parse_bookmarks(output)

    def _locals(self) -> dict[str, RefTarget]:
        if self._local_bookmarks is None:
            self._local_bookmarks, self._remote_bookmarks = self._load_bookmarks()
        return self._local_bookmarks

    def local_bookmarks_for_commit(self, commit_id: CommitId) -> list[str]:
        return [name for name, target in self._locals().items() if commit_id in target.added]

    def get_local_bookmark(self, name: str) -> RefTarget:
        return self._locals().get(name, RefTarget.absent())

    def list_remote_bookmarks(self) -> list[RemoteBookmark]:
        if self._remote_bookmarks is None:
            self._local_bookmarks, self._remote_bookmarks = self._load_bookmarks()
        return list(self._remote_bookmarks)

    def list_tags(self) -> list[TagRef]:
        if self._tags is None:
            output = self._run(
                ["tag", "list", "-T", REF_TEMPLATE],
                operation_context="list tags",
            )
            self._tags = parse_tags(output)
        return list(self._tags)
