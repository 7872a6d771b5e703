"""Production Git implementation using subprocess."""

import logging
from pathlib import Path

from vcs_prompt.core.git.abc import Git, GitInfo
from vcs_prompt.core.git.parsing import parse_porcelain_v2
from vcs_prompt.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealGit(Git):
    """Production implementation using subprocess.

    Optional locks are disabled so that a prompt redraw never contends with a
    git command the user is running in the same repository.
    """

    def __init__(self, git_path: str = "git") -> None:
        self._git_path = git_path

    def get_status(self, repo_root: Path, id_length: int) -> GitInfo:
        result = run_subprocess_with_context(
            [
                self._git_path,
                "--no-optional-locks",
                "status",
                "--porcelain=v2",
                "--branch",
                "--untracked-files=normal",
            ],
            operation_context="read git status",
            cwd=repo_root,
        )
        info = parse_porcelain_v2(result.stdout, id_length)
        logger.debug("Git status for %s: %s", repo_root, info)
        return info
