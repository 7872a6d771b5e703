"""Data models for prompt status."""

from vcs_prompt.status.models.status_data import Bookmark, GitStatus, JjStatus

__all__ = [
    "Bookmark",
    "GitStatus",
    "JjStatus",
]
