"""Fake Git implementation for testing."""

from pathlib import Path

from vcs_prompt.core.git.abc import Git, GitInfo


class FakeGit(Git):
    """In-memory fake implementation of git status reads.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        statuses: dict[Path, GitInfo] | None = None,
        status_raises: Exception | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            statuses: Mapping of repo root -> GitInfo returned by get_status()
            status_raises: Exception to raise when get_status() is called
        """
        self._statuses = statuses if statuses is not None else {}
        self._status_raises = status_raises

    def get_status(self, repo_root: Path, id_length: int) -> GitInfo:
        if self._status_raises is not None:
            raise self._status_raises
        if repo_root not in self._statuses:
            raise RuntimeError(f"Failed to read git status: {repo_root} is not a repository")
        return self._statuses[repo_root]
