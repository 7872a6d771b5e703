"""Jj operations subpackage.

This subpackage provides a read-only abstraction over a jj repository with
support for testing via fakes.
"""

from vcs_prompt.core.jj.abc import (
    GIT_TRACKING_REMOTE,
    CommitId,
    Jj,
    RefTarget,
    RemoteBookmark,
    TagRef,
    WorkingCopyCommit,
)
from vcs_prompt.core.jj.fake import FakeJj
from vcs_prompt.core.jj.real import RealJj

__all__ = [
    "GIT_TRACKING_REMOTE",
    "CommitId",
    "FakeJj",
    "Jj",
    "RealJj",
    "RefTarget",
    "RemoteBookmark",
    "TagRef",
    "WorkingCopyCommit",
]
