"""Resolved rendering configuration.

PromptConfig is built once at the CLI entry point from flags, environment and
the config file, then threaded unchanged through collection and rendering.
"""

from dataclasses import dataclass, field

DEFAULT_JJ_SYMBOL = "\U000f15c6 "
DEFAULT_GIT_SYMBOL = " "
DEFAULT_ID_LENGTH = 8
DEFAULT_ANCESTOR_BOOKMARK_DEPTH = 10
DEFAULT_BOOKMARKS_DISPLAY_LIMIT = 3
DEFAULT_TRUNCATE_NAME = 0

ELLIPSIS = "…"


@dataclass(frozen=True)
class DisplayFlags:
    """Which prompt segments are shown for one working-copy model.

    The flags are independent; every combination is valid.
    """

    show_prefix: bool = True
    show_name: bool = True
    show_id: bool = True
    show_status: bool = True
    show_color: bool = True
    show_prefix_color: bool = True

    @staticmethod
    def all_visible() -> "DisplayFlags":
        return DisplayFlags()

    @staticmethod
    def from_hidden(
        *,
        no_prefix: bool = False,
        no_name: bool = False,
        no_id: bool = False,
        no_status: bool = False,
        no_color: bool = False,
        no_prefix_color: bool = False,
    ) -> "DisplayFlags":
        """Build flags from `--no-*` style switches."""
        return DisplayFlags(
            show_prefix=not no_prefix,
            show_name=not no_name,
            show_id=not no_id,
            show_status=not no_status,
            show_color=not no_color,
            show_prefix_color=not no_prefix_color,
        )


@dataclass(frozen=True)
class PromptConfig:
    """Immutable, fully resolved prompt configuration.

    Attributes:
        truncate_name: Max visible length of a bookmark/branch name (0 = unlimited)
        id_length: Number of characters of the change/commit id to display
        ancestor_bookmark_depth: Max parent hops searched for bookmarks (0 = disabled)
        bookmarks_display_limit: Max bookmarks shown before collapsing (0 = unlimited)
        strip_bookmark_prefix: Literal prefixes removed from bookmark names, first match wins
        jj_symbol: Symbol printed after "on " for jj working copies
        git_symbol: Symbol printed after "on " for git working copies
        jj_display: Segment flags for jj working copies
        git_display: Segment flags for git working copies
    """

    truncate_name: int = DEFAULT_TRUNCATE_NAME
    id_length: int = DEFAULT_ID_LENGTH
    ancestor_bookmark_depth: int = DEFAULT_ANCESTOR_BOOKMARK_DEPTH
    bookmarks_display_limit: int = DEFAULT_BOOKMARKS_DISPLAY_LIMIT
    strip_bookmark_prefix: tuple[str, ...] = ()
    jj_symbol: str = DEFAULT_JJ_SYMBOL
    git_symbol: str = DEFAULT_GIT_SYMBOL
    jj_display: DisplayFlags = field(default_factory=DisplayFlags.all_visible)
    git_display: DisplayFlags = field(default_factory=DisplayFlags.all_visible)

    def __post_init__(self) -> None:
        for name in (
            "truncate_name",
            "id_length",
            "ancestor_bookmark_depth",
            "bookmarks_display_limit",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def strip_prefix(self, name: str) -> str:
        """Remove the first configured prefix that `name` starts with."""
        for prefix in self.strip_bookmark_prefix:
            if prefix and name.startswith(prefix):
                return name[len(prefix) :]
        return name

    def truncate(self, name: str) -> str:
        """Cut `name` to `truncate_name` visible characters, ellipsis included.

        A width of 0 never truncates.
        """
        if self.truncate_name == 0 or len(name) <= self.truncate_name:
            return name
        return name[: self.truncate_name - 1] + ELLIPSIS
