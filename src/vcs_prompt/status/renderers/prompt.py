"""Prompt string renderers.

Pure functions from a status snapshot and a PromptConfig to the exact text
printed into the shell prompt. No I/O happens here and no input makes them
raise.

Layouts:
    jj:  on {symbol}{change_id} ({bookmarks}) [{status}]
    git: on {symbol}{branch} ({head}) [{status}]
"""

import click

from vcs_prompt.core.prompt_config import DisplayFlags, PromptConfig
from vcs_prompt.status.models.status_data import GitStatus, JjStatus

SYMBOL_COLOR = "blue"
ID_PREFIX_COLOR = "bright_magenta"
ID_REST_COLOR = "bright_black"
ID_COLOR = "magenta"
NAME_COLOR = "magenta"
LABEL_COLOR = "green"
STATUS_COLOR = "red"

OVERFLOW_MARKER = "…"


def format_segment(text: str, color: str, show_color: bool) -> str:
    """Wrap text in a color and a reset code when color is enabled."""
    if not show_color:
        return text
    return click.style(text, fg=color, reset=True)


def format_change_id(change_id: str, prefix_len: int) -> str:
    """Color the unique prefix of a change id, dimming the rest (as jj log does)."""
    prefix_len = min(prefix_len, len(change_id))
    prefix = format_segment(change_id[:prefix_len], ID_PREFIX_COLOR, True)
    rest = change_id[prefix_len:]
    if not rest:
        return prefix
    return prefix + format_segment(rest, ID_REST_COLOR, True)


def _format_prefix(symbol: str, display: DisplayFlags) -> str:
    if not display.show_prefix:
        return ""
    return "on " + format_segment(symbol, SYMBOL_COLOR, display.show_color)


def _append(out: str, segment: str) -> str:
    if not segment:
        return out
    if out:
        return f"{out} {segment}"
    return segment


def format_bookmarks(status: JjStatus, config: PromptConfig) -> str:
    """Render the bookmark list as `(a, b~1, …+N)` without color."""
    total = len(status.bookmarks)
    limit = config.bookmarks_display_limit
    show_count = total if limit == 0 else min(limit, total)
    hidden = total - show_count

    entries: list[str] = []
    for bookmark in status.bookmarks[:show_count]:
        name = config.truncate(config.strip_prefix(bookmark.name))
        if bookmark.distance > 0:
            entries.append(f"{name}~{bookmark.distance}")
        else:
            entries.append(name)

    if hidden > 0:
        entries.append(f"{OVERFLOW_MARKER}+{hidden}")

    return "(" + ", ".join(entries) + ")"


def format_jj_status_chars(status: JjStatus) -> str:
    """Status characters in fixed priority order: ! ⇔ ? ⇡."""
    chars = ""
    if status.conflict:
        chars += "!"
    if status.divergent:
        chars += "⇔"
    if status.empty_desc:
        chars += "?"
    if status.has_remote and not status.is_synced:
        chars += "⇡"
    return chars


def format_git_status_chars(status: GitStatus) -> str:
    """Status characters in fixed priority order: = + ! ? ✘ ⇡N ⇣N."""
    chars = ""
    if status.conflicted > 0:
        chars += "="
    if status.staged > 0:
        chars += "+"
    if status.modified > 0:
        chars += "!"
    if status.untracked > 0:
        chars += "?"
    if status.deleted > 0:
        chars += "✘"
    if status.ahead > 0:
        chars += f"⇡{status.ahead}"
    if status.behind > 0:
        chars += f"⇣{status.behind}"
    return chars


def render_jj(status: JjStatus, config: PromptConfig) -> str:
    """Render a jj working-copy status as a prompt fragment."""
    display = config.jj_display
    out = _format_prefix(config.jj_symbol, display)

    # The id follows the symbol directly; the symbol carries its own spacing
    if display.show_id:
        if display.show_color and display.show_prefix_color:
            out += format_change_id(status.change_id, status.change_id_prefix_len)
        else:
            out += format_segment(status.change_id, ID_COLOR, display.show_color)

    if display.show_name and status.bookmarks:
        bookmarks = format_bookmarks(status, config)
        out = _append(out, format_segment(bookmarks, LABEL_COLOR, display.show_color))

    if display.show_status:
        chars = format_jj_status_chars(status)
        if chars:
            out = _append(out, format_segment(f"[{chars}]", STATUS_COLOR, display.show_color))

    return out


def render_git(status: GitStatus, config: PromptConfig) -> str:
    """Render a git working-tree status as a prompt fragment."""
    display = config.git_display
    out = _format_prefix(config.git_symbol, display)

    if display.show_name:
        name = config.truncate(status.branch) if status.branch is not None else "HEAD"
        out += format_segment(name, NAME_COLOR, display.show_color)

    if display.show_id:
        head = format_segment(f"({status.head_short})", LABEL_COLOR, display.show_color)
        out = _append(out, head)

    if display.show_status:
        chars = format_git_status_chars(status)
        if chars:
            out = _append(out, format_segment(f"[{chars}]", STATUS_COLOR, display.show_color))

    return out
