"""Git status collector."""

from pathlib import Path

from vcs_prompt.core.git.abc import Git
from vcs_prompt.status.collectors.errors import StatusCollectionError
from vcs_prompt.status.models.status_data import GitStatus


def collect_git_status(git: Git, repo_root: Path, id_length: int) -> GitStatus:
    """Collect prompt status for a git working tree.

    Raises:
        StatusCollectionError: If git status cannot be read
    """
    try:
        info = git.get_status(repo_root, id_length)
    except (RuntimeError, ValueError) as e:
        raise StatusCollectionError(f"Failed to collect git status: {e}") from e

    return GitStatus(
        branch=info.branch,
        head_short=info.head_short,
        staged=info.staged,
        modified=info.modified,
        untracked=info.untracked,
        deleted=info.deleted,
        conflicted=info.conflicted,
        ahead=info.ahead,
        behind=info.behind,
    )
