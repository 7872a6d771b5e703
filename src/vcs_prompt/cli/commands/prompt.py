"""Prompt command implementation - prints the status fragment."""

import logging

import click

from vcs_prompt.cli.output import machine_output
from vcs_prompt.core.context import PromptContext
from vcs_prompt.core.repo_discovery import RepoType, detect_repo
from vcs_prompt.status.collectors import (
    StatusCollectionError,
    collect_git_status,
    collect_jj_status,
)
from vcs_prompt.status.renderers import render_git, render_jj

logger = logging.getLogger(__name__)


def build_prompt(ctx: PromptContext) -> str | None:
    """Collect and render the prompt fragment for ctx.cwd.

    Returns:
        The rendered fragment, or None outside a repository

    Raises:
        StatusCollectionError: If the repository could not be read
    """
    result = detect_repo(ctx.cwd)
    logger.debug("Detected %s at %s", result.repo_type.value, result.repo_root)
    if result.repo_type is RepoType.NONE or result.repo_root is None:
        return None

    config = ctx.config
    if result.repo_type.is_jj:
        jj = ctx.open_jj(result.repo_root, config.ancestor_bookmark_depth)
        jj_status = collect_jj_status(jj, config.id_length, config.ancestor_bookmark_depth)
        return render_jj(jj_status, config)

    git_status = collect_git_status(ctx.git, result.repo_root, config.id_length)
    return render_git(git_status, config)


@click.command("prompt")
@click.pass_obj
def prompt_cmd(ctx: PromptContext) -> None:
    """Print the prompt fragment (default command).

    Prints nothing and exits 1 outside a repository or when the repository
    cannot be read.
    """
    try:
        output = build_prompt(ctx)
    except StatusCollectionError as e:
        logger.debug("Status collection failed: %s", e)
        raise SystemExit(1) from e

    if output is None:
        raise SystemExit(1)

    machine_output(output, nl=False)
