"""Resolution of CLI flags and config file settings into a PromptConfig.

Values: a flag (or its environment variable) wins over the config file,
which wins over the built-in default. Switches only ever hide things, so a
segment is hidden when either the flag or the config file hides it.
"""

from dataclasses import dataclass
from typing import TypeVar

from vcs_prompt.core.config_store import DisplaySettings, FileConfig
from vcs_prompt.core.prompt_config import (
    DEFAULT_ANCESTOR_BOOKMARK_DEPTH,
    DEFAULT_BOOKMARKS_DISPLAY_LIMIT,
    DEFAULT_GIT_SYMBOL,
    DEFAULT_ID_LENGTH,
    DEFAULT_JJ_SYMBOL,
    DEFAULT_TRUNCATE_NAME,
    DisplayFlags,
    PromptConfig,
)

T = TypeVar("T")


@dataclass(frozen=True)
class CliOptions:
    """Global options as parsed by click (None = not given)."""

    truncate_name: int | None = None
    id_length: int | None = None
    ancestor_bookmark_depth: int | None = None
    bookmarks_display_limit: int | None = None
    strip_bookmark_prefix: tuple[str, ...] = ()
    jj_symbol: str | None = None
    git_symbol: str | None = None
    no_symbol: bool = False
    no_color: bool = False
    no_jj_prefix: bool = False
    no_jj_name: bool = False
    no_jj_id: bool = False
    no_jj_status: bool = False
    no_prefix_color: bool = False
    no_git_prefix: bool = False
    no_git_name: bool = False
    no_git_id: bool = False
    no_git_status: bool = False


def _pick(flag: T | None, file_value: T | None, default: T) -> T:
    if flag is not None:
        return flag
    if file_value is not None:
        return file_value
    return default


def _hidden(flag: bool, setting: bool | None) -> bool:
    return flag or setting is False


def _display(
    settings: DisplaySettings,
    *,
    no_prefix: bool,
    no_name: bool,
    no_id: bool,
    no_status: bool,
    no_color: bool,
    no_prefix_color: bool,
) -> DisplayFlags:
    return DisplayFlags.from_hidden(
        no_prefix=_hidden(no_prefix, settings.prefix),
        no_name=_hidden(no_name, settings.name),
        no_id=_hidden(no_id, settings.id),
        no_status=_hidden(no_status, settings.status),
        no_color=no_color,
        no_prefix_color=_hidden(no_prefix_color, settings.prefix_color),
    )


def resolve_prompt_config(
    options: CliOptions, file_config: FileConfig, *, no_color_env: bool
) -> PromptConfig:
    """Merge CLI options and config file settings into a PromptConfig.

    Args:
        options: Parsed global CLI options
        file_config: Settings from the config file (empty if there is none)
        no_color_env: Whether the NO_COLOR convention is set in the environment

    Returns:
        Fully resolved PromptConfig
    """
    no_color = options.no_color or file_config.no_color or no_color_env
    no_symbol = options.no_symbol or file_config.no_symbol

    if no_symbol:
        jj_symbol = ""
        git_symbol = ""
    else:
        jj_symbol = _pick(options.jj_symbol, file_config.jj_symbol, DEFAULT_JJ_SYMBOL)
        git_symbol = _pick(options.git_symbol, file_config.git_symbol, DEFAULT_GIT_SYMBOL)

    if options.strip_bookmark_prefix:
        strip_prefixes = options.strip_bookmark_prefix
    elif file_config.strip_bookmark_prefix is not None:
        strip_prefixes = file_config.strip_bookmark_prefix
    else:
        strip_prefixes = ()

    return PromptConfig(
        truncate_name=_pick(
            options.truncate_name, file_config.truncate_name, DEFAULT_TRUNCATE_NAME
        ),
        id_length=_pick(options.id_length, file_config.id_length, DEFAULT_ID_LENGTH),
        ancestor_bookmark_depth=_pick(
            options.ancestor_bookmark_depth,
            file_config.ancestor_bookmark_depth,
            DEFAULT_ANCESTOR_BOOKMARK_DEPTH,
        ),
        bookmarks_display_limit=_pick(
            options.bookmarks_display_limit,
            file_config.bookmarks_display_limit,
            DEFAULT_BOOKMARKS_DISPLAY_LIMIT,
        ),
        strip_bookmark_prefix=strip_prefixes,
        jj_symbol=jj_symbol,
        git_symbol=git_symbol,
        jj_display=_display(
            file_config.jj,
            no_prefix=options.no_jj_prefix,
            no_name=options.no_jj_name,
            no_id=options.no_jj_id,
            no_status=options.no_jj_status,
            no_color=no_color,
            no_prefix_color=options.no_prefix_color,
        ),
        git_display=_display(
            file_config.git,
            no_prefix=options.no_git_prefix,
            no_name=options.no_git_name,
            no_id=options.no_git_id,
            no_status=options.no_git_status,
            no_color=no_color,
            # unused: git ids have no unique-prefix split
            no_prefix_color=False,
        ),
    )
