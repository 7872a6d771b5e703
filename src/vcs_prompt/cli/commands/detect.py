"""Detect command implementation - exit status says whether cwd is in a repo."""

import click

from vcs_prompt.core.context import PromptContext
from vcs_prompt.core.repo_discovery import in_repo


@click.command("detect")
@click.pass_obj
def detect_cmd(ctx: PromptContext) -> None:
    """Exit 0 inside a jj or git repository, 1 otherwise.

    Meant for a prompt framework's "when" condition; prints nothing.
    """
    if not in_repo(ctx.cwd):
        raise SystemExit(1)
