"""Prompt renderers."""

from vcs_prompt.status.renderers.prompt import render_git, render_jj

__all__ = [
    "render_git",
    "render_jj",
]
