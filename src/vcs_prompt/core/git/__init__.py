"""Git operations subpackage.

This subpackage provides an abstraction over git status reads with support
for testing via fakes.
"""

from vcs_prompt.core.git.abc import Git, GitInfo
from vcs_prompt.core.git.fake import FakeGit
from vcs_prompt.core.git.real import RealGit

__all__ = [
    "FakeGit",
    "Git",
    "GitInfo",
    "RealGit",
]
