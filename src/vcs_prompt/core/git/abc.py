"""High-level git status interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GitInfo:
    """File-level status of a git working tree."""

    branch: str | None  # None if detached
    head_short: str
    staged: int
    modified: int
    untracked: int
    deleted: int
    conflicted: int
    ahead: int
    behind: int


class Git(ABC):
    """Abstract interface for git status reads.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_status(self, repo_root: Path, id_length: int) -> GitInfo:
        """Collect branch, head and file counts for the working tree.

        Args:
            repo_root: Path to the repository root
            id_length: Number of characters of the head commit id to keep

        Returns:
            GitInfo for the working tree

        Raises:
            RuntimeError: If git cannot be run or fails
        """
        ...
