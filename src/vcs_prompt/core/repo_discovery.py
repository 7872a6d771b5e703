"""Repository discovery functionality.

Detects which kind of working copy contains a directory by walking up the
tree looking for `.jj` and `.git` entries. No VCS binary is run, so this is
cheap enough to back the `detect` command.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RepoType(Enum):
    """Kind of working copy found at a directory."""

    JJ = "jj"
    JJ_COLOCATED = "jj-colocated"
    GIT = "git"
    NONE = "none"

    @property
    def is_jj(self) -> bool:
        return self in (RepoType.JJ, RepoType.JJ_COLOCATED)


@dataclass(frozen=True)
class DetectResult:
    """Repo type and root found by detect_repo()."""

    repo_type: RepoType
    repo_root: Path | None


def detect_repo(start: Path) -> DetectResult:
    """Walk up from `start` to find the nearest jj or git working copy.

    A directory holding `.jj` wins over one holding only `.git`, so a
    colocated repository is treated as jj. `.git` may be a directory or the
    file git writes into linked worktrees.

    Args:
        start: Directory to start the search from

    Returns:
        DetectResult with RepoType.NONE and no root if nothing was found
    """
    if not start.exists():
        return DetectResult(repo_type=RepoType.NONE, repo_root=None)

    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        has_git = (parent / ".git").exists()
        if (parent / ".jj").is_dir():
            repo_type = RepoType.JJ_COLOCATED if has_git else RepoType.JJ
            return DetectResult(repo_type=repo_type, repo_root=parent)
        if has_git:
            return DetectResult(repo_type=RepoType.GIT, repo_root=parent)

    return DetectResult(repo_type=RepoType.NONE, repo_root=None)


def in_repo(start: Path) -> bool:
    """Check whether `start` is inside a jj or git working copy."""
    return detect_repo(start).repo_type is not RepoType.NONE
