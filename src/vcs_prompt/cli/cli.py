import dataclasses
import logging
import os
from pathlib import Path

import click

from vcs_prompt.cli.commands.detect import detect_cmd
from vcs_prompt.cli.commands.prompt import prompt_cmd
from vcs_prompt.cli.commands.version import version_cmd
from vcs_prompt.cli.config import CliOptions, resolve_prompt_config
from vcs_prompt.core.config_store import FileConfig
from vcs_prompt.core.context import create_context

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags
ENV_PREFIX = "VCS_PROMPT_"
DEBUG_ENV = f"{ENV_PREFIX}DEBUG"


def _env(option: str) -> str:
    return ENV_PREFIX + option.upper()


def _hide_flag(name: str, help_text: str):
    flag = "--" + name.replace("_", "-")
    return click.option(flag, name, is_flag=True, envvar=_env(name), help=help_text)


@click.group(
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
)
@click.version_option(package_name="vcs-prompt")
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to inspect instead of the current one.",
)
@click.option(
    "--truncate-name",
    type=click.IntRange(min=0),
    default=None,
    envvar=_env("truncate_name"),
    help="Max length of bookmark/branch names (0 = unlimited).",
)
@click.option(
    "--id-length",
    type=click.IntRange(min=0),
    default=None,
    envvar=_env("id_length"),
    help="Characters of the change/commit id to show.",
)
@click.option(
    "--ancestor-bookmark-depth",
    type=click.IntRange(min=0),
    default=None,
    envvar=_env("ancestor_bookmark_depth"),
    help="Parent hops searched for bookmarks (0 = disabled).",
)
@click.option(
    "--bookmarks-display-limit",
    type=click.IntRange(min=0),
    default=None,
    envvar=_env("bookmarks_display_limit"),
    help="Max bookmarks shown before collapsing (0 = unlimited).",
)
@click.option(
    "--strip-bookmark-prefix",
    multiple=True,
    envvar=_env("strip_bookmark_prefix"),
    help="Prefix removed from bookmark names. Repeatable; first match wins.",
)
@click.option("--jj-symbol", default=None, envvar=_env("jj_symbol"), help="Symbol for jj repos.")
@click.option(
    "--git-symbol", default=None, envvar=_env("git_symbol"), help="Symbol for git repos."
)
@_hide_flag("no_symbol", "Hide the repository symbol.")
@_hide_flag("no_color", "Disable ANSI colors.")
@_hide_flag("no_jj_prefix", "Hide the jj symbol.")
@_hide_flag("no_jj_name", "Hide jj bookmarks.")
@_hide_flag("no_jj_id", "Hide the jj change id.")
@_hide_flag("no_jj_status", "Hide jj status characters.")
@_hide_flag("no_prefix_color", "Do not highlight the unique change id prefix.")
@_hide_flag("no_git_prefix", "Hide the git symbol.")
@_hide_flag("no_git_name", "Hide the git branch name.")
@_hide_flag("no_git_id", "Hide the git commit id.")
@_hide_flag("no_git_status", "Hide git status characters.")
@click.pass_context
def cli(ctx: click.Context, cwd: Path | None, **options: object) -> None:
    """Print a compact jj or git status fragment for shell prompts."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
        if ctx.obj is None:
            raise SystemExit(1)

    # Only the prompt reads the config file.
    file_config = FileConfig()
    if ctx.invoked_subcommand in (None, prompt_cmd.name):
        try:
            file_config = ctx.obj.config_store.load_or_default()
        except ValueError as e:
            logger.debug("Ignoring prompt, config is invalid: %s", e)
            raise SystemExit(1) from e

    config = resolve_prompt_config(
        CliOptions(**options),
        file_config,
        no_color_env=bool(ctx.obj.env.get("NO_COLOR")),
    )
    ctx.obj = dataclasses.replace(
        ctx.obj,
        config=config,
        cwd=cwd if cwd is not None else ctx.obj.cwd,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(prompt_cmd)


cli.add_command(prompt_cmd)
cli.add_command(detect_cmd)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `vcs-prompt` console script."""
    if os.environ.get(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()
